"""Tests for fleetview/utils.py and text formatting helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fleetview.exceptions import UserError
from fleetview.utils import (
    ensure_parent_dir,
    read_json_document,
    read_json_records,
    resolve_timezone,
)
from fleetview.view import Host
from fleetview.view.formatting import build_row_values, clip_cell, render_table_lines


class TestResolveTimezone:
    """Tests for resolve_timezone function."""

    def test_default_utc(self, monkeypatch):
        monkeypatch.delenv("FLEETVIEW_TZ", raising=False)
        assert resolve_timezone().key == "UTC"

    def test_env(self, monkeypatch):
        monkeypatch.setenv("FLEETVIEW_TZ", "Europe/Berlin")
        assert resolve_timezone().key == "Europe/Berlin"

    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("FLEETVIEW_TZ", "Europe/Berlin")
        assert resolve_timezone("Asia/Tokyo").key == "Asia/Tokyo"

    def test_unknown(self):
        with pytest.raises(UserError, match="Unknown time zone"):
            resolve_timezone("Nowhere/Special")


class TestReadJsonRecords:
    """Tests for read_json_records function."""

    def test_array(self, tmp_dir: Path):
        path = tmp_dir / "a.json"
        path.write_text(json.dumps([{"name": "a"}, {"name": "b"}]))
        assert read_json_records(path) == [{"name": "a"}, {"name": "b"}]

    def test_jsonl(self, tmp_dir: Path):
        path = tmp_dir / "a.jsonl"
        path.write_text('{"name": "a"}\n\n{broken\n{"name": "b"}\n')
        assert read_json_records(path) == [{"name": "a"}, {"name": "b"}]

    def test_bad_array(self, tmp_dir: Path):
        path = tmp_dir / "a.json"
        path.write_text("[{")
        with pytest.raises(UserError, match="Invalid JSON"):
            read_json_records(path)

    def test_missing(self, tmp_dir: Path):
        with pytest.raises(UserError, match="File not found"):
            read_json_records(tmp_dir / "nope.json")


class TestReadJsonDocument:
    """Tests for read_json_document function."""

    def test_reads(self, tmp_dir: Path):
        path = tmp_dir / "d.json"
        path.write_text('{"results": []}')
        assert read_json_document(path) == {"results": []}

    def test_invalid(self, tmp_dir: Path):
        path = tmp_dir / "d.json"
        path.write_text("{")
        with pytest.raises(UserError):
            read_json_document(path)


class TestEnsureParentDir:
    """Tests for ensure_parent_dir function."""

    def test_creates(self, tmp_dir: Path):
        target = tmp_dir / "a" / "b" / "c.csv"
        ensure_parent_dir(target)
        assert target.parent.is_dir()


class TestHostFromDict:
    """Tests for Host.from_dict."""

    def test_wire_keys(self, sample_records):
        host = Host.from_dict(sample_records[0])
        assert host.delta_uptime == 30
        assert host.apps == ("nginx", "telegraf")
        assert host.tags == {"dc": "us-east", "role": "frontend"}
        assert host.is_up

    def test_missing_name(self):
        with pytest.raises(ValueError):
            Host.from_dict({"cpu": 1})

    @pytest.mark.parametrize("key", ["cpu", "load", "deltaUptime", "winDeltaUptime"])
    def test_non_numeric_metric_rejected(self, key):
        """String metrics would break sorting and liveness checks."""
        with pytest.raises(ValueError, match=key):
            Host.from_dict({"name": "a", key: "5"})

    def test_bool_metric_rejected(self):
        with pytest.raises(ValueError, match="cpu"):
            Host.from_dict({"name": "a", "cpu": True})

    def test_apps_string_rejected(self):
        """A bare string is not split into characters."""
        with pytest.raises(ValueError, match="apps"):
            Host.from_dict({"name": "a", "apps": "nginx"})

    def test_apps_non_string_items_rejected(self):
        with pytest.raises(ValueError, match="apps"):
            Host.from_dict({"name": "a", "apps": ["nginx", 3]})

    def test_tags_list_rejected(self):
        with pytest.raises(ValueError, match="tags"):
            Host.from_dict({"name": "a", "tags": ["x"]})

    def test_missing_and_null_fields_allowed(self):
        host = Host.from_dict({"name": "a", "cpu": None, "apps": None, "tags": None})
        assert host.cpu is None
        assert host.apps == ()
        assert host.tags is None

    def test_round_trip_keys(self, sample_records):
        data = Host.from_dict(sample_records[2]).to_dict()
        assert data["winDeltaUptime"] == 5
        assert data["tags"] is None


class TestFormatting:
    """Tests for text formatting helpers."""

    def test_clip_cell(self):
        assert clip_cell("abc", 5) == "abc  "
        assert clip_cell("abcdefgh", 6) == "abc..."
        assert clip_cell("abcdef", 2) == "ab"
        assert clip_cell("abc", 0) == ""

    def test_row_values(self):
        values = build_row_values(Host(name="a", cpu=1.234, apps=("x", "y")))
        assert values == {
            "Host": "a",
            "Status": "down",
            "CPU": "1.23",
            "Load": "-",
            "Apps": "x, y",
        }

    def test_render_table_lines_max_width(self, sample_hosts):
        header, lines = render_table_lines(sample_hosts, max_width=4)
        assert header.split() == ["HOST", "S...", "CPU", "LOAD", "APPS"]
        assert lines[0].startswith("w...")

    def test_render_table_lines(self, sample_hosts):
        header, lines = render_table_lines(sample_hosts)
        assert header.split() == ["HOST", "STATUS", "CPU", "LOAD", "APPS"]
        assert len(lines) == 3
        assert lines[0].startswith("web-01")
        assert "up" in lines[0]
