"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path

from json_power_tools.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default active configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_tree(temp_dir):
    """
    Directory tree with files at several depths::

        root.json, root.txt
        subdir/sub.json, subdir/sub.jsonc
        node_modules/package.json
        level1/level2/level3/deep.json
    """
    files = {
        "root.json": {"root": True},
        "root.txt": {"txt": True},
        "subdir/sub.json": {"sub": True},
        "subdir/sub.jsonc": {"jsonc": True},
        "node_modules/package.json": {"ignored": True},
        "level1/level2/level3/deep.json": {"deep": True},
    }
    for relative, content in files.items():
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content, separators=(",", ":")), encoding="utf-8")
    return temp_dir


@pytest.fixture
def stringified_document():
    """Document whose members hold JSON serialized as strings."""
    return {
        "id": 7,
        "person": json.dumps({"name": "Flavio", "tags": ["a", "b"]}),
        "items": json.dumps([{"sku": "X1"}, {"sku": "X2"}]),
        "plain": "hello",
        "numeric": "1234567890123",
        "flag": "true",
    }


@pytest.fixture
def write_json():
    """Factory writing raw JSON text to a file, creating parent directories."""
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
