#!/usr/bin/env python3
"""
file_system.py - Filesystem MCP server.
Lists, reads, writes, deletes, moves, copies and links files and directories
on the machine running the server.

Dependencies (Python >=3.10):
    pip install "mcp>=1.10"

Start the server:
    python -m file_operations

Environment:
    FILE_OPERATIONS_LOG_LEVEL   logging level name (default: INFO)
    FILE_OPERATIONS_TRANSPORT   stdio, sse or streamable-http (default: stdio)
"""

import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from file_operations.accessor import LocalFileSystem
from file_operations.entry import Entry
from file_operations.tools import FileSystemTools

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TRANSPORT = "stdio"
TRANSPORTS = ("stdio", "sse", "streamable-http")

INSTRUCTIONS = """
This is a file system server.
Use its tools to interact with the file system.
You can list directories, read files, and perform other file system operations.
"""

# Initialize MCP server
mcp = FastMCP("FileSystem-Tools", instructions=INSTRUCTIONS)

_tools = FileSystemTools(LocalFileSystem())

# --- Navigation Tools ---

@mcp.tool()
def get_current_directory() -> Optional[str]:
    """Gets the current working directory."""
    return _tools.get_current_directory()

@mcp.tool()
def get_file_system_path() -> Optional[str]:
    """Gets the file system path of the current tool."""
    return _tools.get_file_system_path()

@mcp.tool()
def list_directory_contents(path: str) -> List[Optional[Entry]]:
    """
    Lists the contents of a directory returning a list of entries with their metadata.

    Only files directly inside the directory are listed. A file whose metadata
    could not be read is returned as null.

    Args:
        path: The path of the directory to list

    Returns:
        One entry per file with path, name, directory, extension, size and last_modified
    """
    return list(_tools.list_directory_contents(path))

# --- Content Tools ---

@mcp.tool()
def read_file_contents(path: str) -> str:
    """
    Reads the contents of a file.

    Returns a message instead of the contents when the file does not exist.
    """
    return _tools.read_file_contents(path)

@mcp.tool()
def write_file_contents(path: str, content: str) -> bool:
    """
    Writes content to a file, replacing anything already there.

    Args:
        path: The path of the file to write to
        content: The content to write to the file

    Returns:
        True if the file was written, otherwise false
    """
    return _tools.write_file_contents(path, content)

# --- Management Tools ---

@mcp.tool()
def delete_file_or_directory(path: str) -> bool:
    """Deletes a file or directory. Directories are deleted with everything inside them."""
    return _tools.delete_file_or_directory(path)

@mcp.tool()
def create_directory(path: str) -> bool:
    """Creates a new directory, including any missing parent directories."""
    return _tools.create_directory(path)

@mcp.tool()
def move_file_or_directory(source_path: str, destination_path: str, overwrite: bool = False) -> bool:
    """
    Moves a file or directory to a new location.

    Args:
        source_path: The current path of the file or directory
        destination_path: The new path where the file or directory should be moved
        overwrite: Replace an existing destination (default: False)

    Returns:
        True if the move was successful, otherwise false
    """
    return _tools.move_file_or_directory(source_path, destination_path, overwrite)

@mcp.tool()
def copy_file(source_path: str, destination_path: str) -> bool:
    """
    Copies a file to a new location. The destination must not already exist.

    Args:
        source_path: The path of the file to copy
        destination_path: The path of the new copy

    Returns:
        True if the copy was successful, otherwise false
    """
    return _tools.copy_file(source_path, destination_path)

@mcp.tool()
def create_symlink(source_path: str, link_path: str) -> bool:
    """
    Creates a symlink to a file or directory.

    Args:
        source_path: The path of the file or directory to link to
        link_path: The path where the symlink should be created

    Returns:
        True if the symlink was created successfully, otherwise false
    """
    return _tools.create_symlink(source_path, link_path)

# --- Metadata Tools ---

@mcp.tool()
def file_or_directory_exists(path: str) -> bool:
    """Checks if a file or directory exists at the specified path."""
    return _tools.file_or_directory_exists(path)

@mcp.tool()
def get_file_or_directory_size(path: str) -> int:
    """
    Gets the size of a file or directory in bytes.

    Directory sizes include every file in every subdirectory. Returns -1 if the
    path does not exist.
    """
    return _tools.get_file_or_directory_size(path)

@mcp.tool()
def get_file_or_directory_last_modified(path: str) -> Optional[datetime]:
    """
    Gets the last modified date and time of a file or directory.

    The value reported is the last access time. Returns null if the path does
    not exist.
    """
    return _tools.get_file_or_directory_last_modified(path)

# --- Startup ---

def configure_logging() -> None:
    """Send logs to stderr; stdout carries the stdio transport."""
    level_name = os.environ.get("FILE_OPERATIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    known = isinstance(level, int)
    logging.basicConfig(level=level if known else DEFAULT_LOG_LEVEL, stream=sys.stderr)
    if not known:
        logger.warning(f"Unknown log level {level_name!r}, using {DEFAULT_LOG_LEVEL}")

def get_transport() -> str:
    transport = os.environ.get("FILE_OPERATIONS_TRANSPORT", DEFAULT_TRANSPORT).lower()
    if transport not in TRANSPORTS:
        logger.warning(f"Unknown transport {transport!r}, using {DEFAULT_TRANSPORT}")
        return DEFAULT_TRANSPORT
    return transport

def main() -> None:
    configure_logging()
    transport = get_transport()

    print("FileSystem MCP Server starting...", file=sys.stderr)
    print("Available tools:", file=sys.stderr)
    print("  - get_current_directory / get_file_system_path", file=sys.stderr)
    print("  - list_directory_contents - List files with their metadata", file=sys.stderr)
    print("  - read_file_contents / write_file_contents", file=sys.stderr)
    print("  - delete_file_or_directory / create_directory", file=sys.stderr)
    print("  - move_file_or_directory / copy_file / create_symlink", file=sys.stderr)
    print("  - file_or_directory_exists / get_file_or_directory_size", file=sys.stderr)
    print("  - get_file_or_directory_last_modified", file=sys.stderr)

    try:
        mcp.run(transport=transport)
    except KeyboardInterrupt:
        print("\nServer shutting down...", file=sys.stderr)

if __name__ == "__main__":
    main()
