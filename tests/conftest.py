"""Shared test fixtures for dish."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Ensure the package is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dish.common.config import DishConfig, reset_config
from dish.importer.args import ImportArgs


@pytest.fixture(autouse=True)
def _clear_config_cache():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_config_data() -> dict:
    """Return the contents of a typical dish.json."""
    return {
        "dhis": {
            "baseUrl": "https://play.dhis2.org/demo",
            "username": "admin",
            "password": "district",
        }
    }


@pytest.fixture
def config(sample_config_data: dict) -> DishConfig:
    return DishConfig.model_validate(sample_config_data)


@pytest.fixture
def config_file(tmp_path: Path, sample_config_data: dict) -> Path:
    """Write dish.json into a temporary DHIS2 home directory."""
    path = tmp_path / "dish.json"
    path.write_text(json.dumps(sample_config_data), encoding="utf-8")
    return path


@pytest.fixture
def no_args() -> ImportArgs:
    return ImportArgs()


@pytest.fixture
def make_response():
    """Build a mocked requests.Response with the given status and body."""

    def _make(status_code: int, text: str = "", content: bytes | None = None) -> MagicMock:
        resp = MagicMock(spec=requests.Response)
        resp.status_code = status_code
        resp.text = text
        resp.content = text.encode("utf-8") if content is None else content
        return resp

    return _make


@pytest.fixture
def mock_session(make_response) -> MagicMock:
    """A requests.Session whose post() returns 200 with an empty JSON object."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(200, "{}")
    return session
