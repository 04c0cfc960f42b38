"""Pytest configuration for licensewalk tests."""
import json
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to path for the tests - conftest is in tests/, so parent.parent is project root
project_root = Path(__file__).resolve().parent.parent
src_path = project_root / "src"

# Insert at the very beginning to override any other paths
sys.path.insert(0, str(src_path))


@pytest.fixture
def temp_root():
    """Create a temporary directory to build package trees in."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


def write_package(directory, name, version="1.0.0", files=None, **manifest):
    """Create a package directory with a package.json and extra files."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    data = {"name": name, "version": version}
    data.update(manifest)
    (directory / "package.json").write_text(json.dumps(data))
    for filename, content in (files or {}).items():
        (directory / filename).write_bytes(content.encode("utf-8"))
    return directory


@pytest.fixture
def make_package():
    """Factory fixture wrapping write_package."""
    return write_package
