"""Filesystem operations exposed as MCP tools."""

from file_operations.accessor import FileStat, FileSystemAccessor, LocalFileSystem
from file_operations.entry import Entry
from file_operations.tools import FileSystemTools

__all__ = ["Entry", "FileStat", "FileSystemAccessor", "FileSystemTools", "LocalFileSystem"]
