"""Shared pytest fixtures for FleetView tests."""

from __future__ import annotations

import json
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fleetview.view import Host


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def sample_records() -> list[dict]:
    """Raw host records as delivered by the hosts endpoint."""
    return [
        {
            "name": "web-01",
            "cpu": 42.5,
            "load": 1.2,
            "apps": ["nginx", "telegraf"],
            "tags": {"dc": "us-east", "role": "frontend"},
            "deltaUptime": 30,
        },
        {
            "name": "db-01",
            "cpu": 12.0,
            "load": 0.4,
            "apps": ["influxdb"],
            "tags": {"dc": "us-west"},
            "deltaUptime": -1,
        },
        {
            "name": "win-01",
            "cpu": 42.5,
            "load": 2.5,
            "apps": [],
            "winDeltaUptime": 5,
        },
    ]


@pytest.fixture
def sample_hosts(sample_records: list[dict]) -> list[Host]:
    """Host objects for sample_records."""
    return [Host.from_dict(r) for r in sample_records]


@pytest.fixture
def hosts_file(tmp_dir: Path, sample_records: list[dict]) -> Path:
    """Write sample_records as a JSON array."""
    path = tmp_dir / "hosts.json"
    path.write_text(json.dumps(sample_records))
    return path


@pytest.fixture
def sample_results() -> list[dict]:
    """Query result with one series."""
    return [
        {
            "series": [
                {
                    "name": "cpu",
                    "columns": ["time", "value"],
                    "values": [[0, "5"], [1000, "7"]],
                }
            ]
        }
    ]
