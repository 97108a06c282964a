"""Tests for the run_resolver command-line entry point."""
import json

import pytest

from run_resolver import main


def _run(capsys, *argv) -> tuple[int, object]:
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, json.loads(out) if out else None


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("DOCSTYLE_DEFAULT_FONT_SIZE", "DOCSTYLE_LOG_LEVEL", "DOCSTYLE_INDENT"):
        monkeypatch.delenv(name, raising=False)


class TestSingleNode:
    def test_table(self, capsys, fixtures_dir):
        code, data = _run(capsys, "table", str(fixtures_dir / "table.json"))
        assert code == 0
        assert data["grid_visible"] is True
        assert data["grid_width"] == 0.5
        assert data["grid_color"] == {"r": 0.2, "g": 0.4, "b": 0.6}
        assert data["horizontal_align"] == "center"
        assert data["vertical_align"] == "middle"

    def test_paragraph_default_font_size(self, capsys, tmp_path):
        (tmp_path / "p.yaml").write_text("params:\n  bullet: '*'\n", encoding="utf-8")
        code, data = _run(capsys, "paragraph", str(tmp_path / "p.yaml"))
        assert code == 0
        assert data["leading"] == 12.0
        assert data["bullet"] == "*"
        assert data["padding"] == [0.0, 0.0, 0.0, 0.0]

    def test_paragraph_font_size_option(self, capsys, tmp_path):
        (tmp_path / "p.json").write_text('{"params": {}}', encoding="utf-8")
        _, data = _run(capsys, "paragraph", str(tmp_path / "p.json"), "--font-size", "14")
        assert data["leading"] == 16.0

    def test_paragraph_font_size_from_env(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv("DOCSTYLE_DEFAULT_FONT_SIZE", "8")
        (tmp_path / "p.json").write_text('{"params": {}}', encoding="utf-8")
        _, data = _run(capsys, "paragraph", str(tmp_path / "p.json"))
        assert data["leading"] == 10.0

    def test_cell_without_fill(self, capsys, tmp_path):
        (tmp_path / "c.json").write_text('{"params": {"background_color": "red"}}', encoding="utf-8")
        _, data = _run(capsys, "cell", str(tmp_path / "c.json"))
        assert data == {"background_color": None}


class TestManyNodes:
    def test_paragraph_list(self, capsys, fixtures_dir):
        code, data = _run(capsys, "paragraph", str(fixtures_dir / "paragraphs.yaml"), "--all")
        assert code == 0
        assert [d["leading"] for d in data] == [14.0, 12.0, 12.0]
        assert [d["align"] for d in data] == ["right", "left", "left"]
        assert data[1]["padding"] == [1.0, 0.0, 3.0, 0.0]

    def test_cell_list(self, capsys, fixtures_dir):
        _, data = _run(capsys, "cell", str(fixtures_dir / "cells.json"), "--all")
        assert data[0]["background_color"] == {"r": 1.0, "g": 0.5, "b": 0.0}
        assert data[1]["background_color"] is None
        assert data[2]["background_color"] is None


class TestFailures:
    def test_missing_file(self, capsys, tmp_path):
        code, data = _run(capsys, "table", str(tmp_path / "missing.json"))
        assert code == 1
        assert data is None

    def test_unloadable_node(self, capsys, tmp_path):
        (tmp_path / "bad.json").write_text('{"params": {"grid": true}}', encoding="utf-8")
        code, data = _run(capsys, "table", str(tmp_path / "bad.json"))
        assert code == 1
        assert data is None

    def test_malformed_yaml(self, capsys, tmp_path):
        (tmp_path / "bad.yaml").write_text("params: [unclosed\n", encoding="utf-8")
        code, _ = _run(capsys, "table", str(tmp_path / "bad.yaml"))
        assert code == 1

    def test_scalar_node_list(self, capsys, tmp_path):
        (tmp_path / "nodes.yaml").write_text("nodes: 5\n", encoding="utf-8")
        code, data = _run(capsys, "table", str(tmp_path / "nodes.yaml"), "--all")
        assert code == 1
        assert data is None

    def test_invalid_json(self, capsys, tmp_path):
        (tmp_path / "bad.json").write_text('{"params": ', encoding="utf-8")
        code, _ = _run(capsys, "table", str(tmp_path / "bad.json"))
        assert code == 1

    def test_json_exponent_width(self, capsys, tmp_path):
        (tmp_path / "t.json").write_text('{"params": {"style": {"grid": {"width": 5e-1}}}}', encoding="utf-8")
        code, data = _run(capsys, "table", str(tmp_path / "t.json"))
        assert code == 0
        assert data["grid_width"] == 0.5

    def test_unknown_kind_rejected_by_parser(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["image", str(tmp_path / "x.json")])
