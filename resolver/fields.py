"""Field extraction shared by all style resolvers.

Every field follows the same rule: absent key → default, present but of the
wrong variant → default, otherwise the matched value. Mismatches are logged
at DEBUG and never raised, and each field is read independently of its
siblings.
"""
import logging
from collections.abc import Callable, Collection, Mapping
from typing import TypeVar

from models.values import ParamValue

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

_PADDING_SIDES = ("top", "left", "bottom", "right")


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------

def number(value: ParamValue) -> float | None:
    return value.as_number()


def text(value: ParamValue) -> str | None:
    return value.as_text()


def obj(value: ParamValue) -> dict[str, ParamValue] | None:
    return value.as_object()


def array(value: ParamValue) -> list[ParamValue] | None:
    return value.as_array()


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

def read_field(
    mapping: Mapping[str, ParamValue] | None,
    key: str,
    matcher: Callable[[ParamValue], T | None],
    default: D,
) -> T | D:
    """Return ``matcher(mapping[key])``, or ``default`` when absent or mismatched."""
    if not mapping:
        return default
    value = mapping.get(key)
    if value is None:
        return default
    matched = matcher(value)
    if matched is None:
        logger.debug("Ignoring '%s': expected %s, got %s", key, matcher.__name__, value.kind)
        return default
    return matched


def read_choice(
    mapping: Mapping[str, ParamValue] | None,
    key: str,
    choices: Collection[str],
    default: str,
) -> str:
    """Read a text field restricted to ``choices``; anything else maps to ``default``."""
    chosen = read_field(mapping, key, text, None)
    if chosen is None:
        return default
    if chosen not in choices:
        logger.debug("Unrecognised value %r for '%s', using %r", chosen, key, default)
        return default
    return chosen


def read_padding(
    mapping: Mapping[str, ParamValue] | None,
    key: str = "padding",
) -> tuple[float, float, float, float]:
    """Read a nested ``{top, left, bottom, right}`` object as a 4-tuple.

    Each side is independently optional and defaults to 0.0.
    """
    sides = read_field(mapping, key, obj, None)
    top, left, bottom, right = (read_field(sides, side, number, 0.0) for side in _PADDING_SIDES)
    return (top, left, bottom, right)
