"""Pytest configuration and fixtures for xapi-typegen tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from xapi_typegen.nodes import Root


@pytest.fixture
def root() -> Root:
    """Provide an empty declaration tree."""
    return Root()


@pytest.fixture
def sample_schema() -> dict:
    """A small schema covering commands, configs and statuses."""
    return {
        "Command": {
            "Dial": {
                "command": True,
                "params": {
                    "Number": {"valuespace": "String", "required": True},
                    "Protocol": {"valuespace": ["H323", "Sip", "Spark"]},
                },
            },
            "Audio": {
                "Volume": {
                    "Mute": {"command": True},
                },
            },
        },
        "Config": {
            "Audio": {
                "DefaultVolume": {"valuespace": "Integer"},
            },
        },
        "Status": {
            "Audio": {
                "Volume": {"valuespace": "Integer"},
            },
            "Standby": {
                "State": {"valuespace": {"type": "Literal", "values": ["Off", "Standby"]}},
            },
        },
    }


@pytest.fixture
def schema_file(tmp_path: Path, sample_schema: dict) -> Path:
    """Write the sample schema to a temporary JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(sample_schema), encoding="utf8")
    return path
