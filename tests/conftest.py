"""
Shared test fixtures and configuration for pytest
"""
import os
import tempfile

# Point the app directory at a throwaway location before huddle is imported
os.environ["HUDDLE_HOME"] = tempfile.mkdtemp(prefix="huddle-tests-")

import pytest

from huddle.core.message_store import MessageStore
from huddle.utils.config_manager import ConfigManager

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
GIF_BYTES = b"GIF89a" + b"\x00" * 32


@pytest.fixture(autouse=True)
def config_manager(tmp_path):
    """Fresh ConfigManager backed by a per-test config.json"""
    ConfigManager.reset_instance()
    manager = ConfigManager(config_path=tmp_path / "config.json")
    yield manager
    ConfigManager.reset_instance()


@pytest.fixture
def store():
    """Empty in-memory message store"""
    return MessageStore()


@pytest.fixture
def png_file(tmp_path):
    """Small valid PNG file"""
    path = tmp_path / "screenshot.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def gif_file(tmp_path):
    """Small valid GIF file"""
    path = tmp_path / "party.gif"
    path.write_bytes(GIF_BYTES)
    return path


@pytest.fixture
def sample_ops():
    """Document with inline and line formats"""
    return [
        {"insert": "Hello "},
        {"insert": "team", "attributes": {"bold": True}},
        {"insert": "\n"},
        {"insert": "first"},
        {"insert": "\n", "attributes": {"list": "bullet"}},
        {"insert": "second"},
        {"insert": "\n", "attributes": {"list": "bullet"}},
    ]
