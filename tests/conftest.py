"""Pytest bootstrap and shared fixtures for the file tools tests."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from file_operations.accessor import LocalFileSystem  # noqa: E402
from file_operations.tools import FileSystemTools  # noqa: E402
from memory_fs import MemoryFileSystem  # noqa: E402


@pytest.fixture
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture
def tools(memory_fs):
    return FileSystemTools(memory_fs)


@pytest.fixture
def local_tools():
    return FileSystemTools(LocalFileSystem())
