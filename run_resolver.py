#!/usr/bin/env python3
"""Resolve the style of one or more content nodes and print it as JSON.

Usage:
    python run_resolver.py table node.json                  # one node
    python run_resolver.py paragraph node.yaml --font-size 12
    python run_resolver.py cell nodes.json --all            # list of nodes
"""
import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

import yaml
from pydantic import ValidationError

from models.content import ContentNode
from resolver.styles import STYLE_KINDS, resolve_style
from settings import Settings

logger = logging.getLogger("run_resolver")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("kind", choices=STYLE_KINDS, help="Style to resolve")
    parser.add_argument("path", type=Path, help="JSON or YAML file holding the content node(s)")
    parser.add_argument("--font-size", type=float, default=None, dest="font_size",
                        help="Font size of the enclosing text run (paragraph only)")
    parser.add_argument("--all", action="store_true", dest="load_all",
                        help="Treat the file as a list of nodes")
    parser.add_argument("--verbose", action="store_true",
                        help="Log ignored parameters (DEBUG level)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level_number,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    font_size = args.font_size if args.font_size is not None else settings.default_font_size

    try:
        nodes = ContentNode.load_many(args.path) if args.load_all else [ContentNode.load(args.path)]
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.path)
        return 1
    except (ValidationError, json.JSONDecodeError, yaml.YAMLError) as exc:
        logger.error("Could not load content from %s: %s", args.path, exc)
        return 1

    styles = [resolve_style(args.kind, node, font_size).model_dump(mode="json") for node in nodes]
    logger.info("Resolved %d %s style(s) from %s", len(styles), args.kind, args.path)

    output = styles if args.load_all else styles[0]
    print(json.dumps(output, indent=settings.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
