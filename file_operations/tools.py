"""
File tools - filesystem operations exposed to the MCP host.

Each operation performs one filesystem interaction (or a short check-then-act
sequence) through a FileSystemAccessor and reports failure as a sentinel
value instead of raising:

    precondition not met  -> logger.warning, sentinel
    unexpected exception  -> logger.error, sentinel
"""

import functools
import inspect
import logging
import os
from datetime import datetime
from typing import Any, Callable, Iterator, Optional

from file_operations.accessor import FileSystemAccessor
from file_operations.entry import Entry

logger = logging.getLogger(__name__)


# --- Helper Functions ---

def guarded(failure: Any, message: str) -> Callable:
    """
    Turn any exception raised by a tool into ``failure``.

    ``message`` is formatted with the call's bound arguments, so it can name
    the paths involved, e.g. ``"Failed to write file: {path}"``.
    """
    def decorator(func):
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except Exception as e:
                bound = signature.bind(self, *args, **kwargs)
                bound.apply_defaults()
                self.logger.error(f"{message.format(**bound.arguments)}: {e}")
                return failure

        return wrapper

    return decorator


# --- Tools ---

class FileSystemTools:
    """Stateless adapter from tool calls to a FileSystemAccessor."""

    def __init__(self, file_system: FileSystemAccessor, log: Optional[logging.Logger] = None):
        self.file_system = file_system
        self.logger = log or logger

    @guarded(None, "Failed to get current directory")
    def get_current_directory(self) -> Optional[str]:
        return self.file_system.get_current_directory()

    def list_directory_contents(self, path: str) -> Iterator[Optional[Entry]]:
        """
        Yield an Entry for each file directly under ``path``.

        A file whose metadata cannot be read yields None in its place and the
        enumeration carries on with the rest.
        """
        try:
            entry_paths = self.file_system.list_files(path)
        except Exception as e:
            self.logger.error(f"Failed to list directory: {path}: {e}")
            return

        for entry_path in entry_paths:
            entry = None
            try:
                entry = Entry.from_path(self.file_system, entry_path)
            except Exception as e:
                self.logger.warning(f"Failed to create entry for file: {entry_path}: {e}")
            yield entry

    def read_file_contents(self, path: str) -> str:
        """Return the text of a file, or a message saying it does not exist."""
        try:
            if self.file_system.is_file(path):
                return self.file_system.read_text(path)
        except Exception as e:
            self.logger.error(f"Failed to read file: {path}: {e}")
            return f"The file '{path}' could not be read."
        return f"The file '{path}' does not exist."

    @guarded(False, "Failed to write file: {path}")
    def write_file_contents(self, path: str, content: str) -> bool:
        self.file_system.write_text(path, content)
        return True

    @guarded(False, "Failed to delete file or directory: {path}")
    def delete_file_or_directory(self, path: str) -> bool:
        """Delete recursively; a path that does not exist counts as deleted."""
        if self.file_system.is_dir(path):
            self.file_system.delete_directory(path)
        elif self.file_system.is_file(path):
            self.file_system.delete_file(path)
        return True

    @guarded(False, "Failed to create directory: {path}")
    def create_directory(self, path: str) -> bool:
        self.file_system.create_directory(path)
        return True

    @guarded(False, "Failed to move file or directory from {source_path} to {destination_path}")
    def move_file_or_directory(self, source_path: str, destination_path: str, overwrite: bool = False) -> bool:
        """
        Move a file or directory.

        An existing destination directory is replaced only when ``overwrite``
        is set; for files the flag is handed to the accessor.
        """
        if self.file_system.is_dir(source_path):
            if self.file_system.is_dir(destination_path):
                if not overwrite:
                    self.logger.warning(f"Destination directory already exists: {destination_path}")
                    return False
                self.file_system.delete_directory(destination_path)
            self.file_system.move_directory(source_path, destination_path)
        elif self.file_system.is_file(source_path):
            self.file_system.move_file(source_path, destination_path, overwrite)
        else:
            self.logger.warning(f"Source path does not exist: {source_path}")
            return False

        return True

    @guarded(False, "Failed to copy file from {source_path} to {destination_path}")
    def copy_file(self, source_path: str, destination_path: str) -> bool:
        """Copy a single file. Directories are not copied."""
        if not self.file_system.is_file(source_path):
            self.logger.warning(f"Source path does not exist: {source_path}")
            return False

        self.file_system.copy_file(source_path, destination_path)
        return True

    @guarded(False, "Failed to check existence of {path}")
    def file_or_directory_exists(self, path: str) -> bool:
        return self.file_system.is_dir(path) or self.file_system.is_file(path)

    @guarded(-1, "Failed to get size of {path}")
    def get_file_or_directory_size(self, path: str) -> int:
        """Size in bytes; directories sum every file below them. -1 if missing."""
        if self.file_system.is_dir(path):
            return sum(self.file_system.stat(f).size for f in self.file_system.walk_files(path))
        if self.file_system.is_file(path):
            return self.file_system.stat(path).size

        self.logger.warning(f"Path does not exist: {path}")
        return -1

    @guarded(None, "Failed to get last modified date of {path}")
    def get_file_or_directory_last_modified(self, path: str) -> Optional[datetime]:
        # Reports the last access time, not the last write time.
        if self.file_system.is_dir(path) or self.file_system.is_file(path):
            return self.file_system.stat(path).accessed

        self.logger.warning(f"Path does not exist: {path}")
        return None

    @guarded(None, "Failed to get file system path")
    def get_file_system_path(self) -> Optional[str]:
        """Directory the file_operations package is installed in."""
        return os.path.dirname(os.path.abspath(__file__))

    @guarded(False, "Failed to create symlink from {source_path} to {link_path}")
    def create_symlink(self, source_path: str, link_path: str) -> bool:
        is_file = self.file_system.is_file(source_path)
        is_directory = self.file_system.is_dir(source_path)

        if not (is_file or is_directory):
            self.logger.warning(f"Source path does not exist: {source_path}")
            return False

        if self.file_system.is_file(link_path) or self.file_system.is_dir(link_path):
            self.logger.warning(f"Link path already exists: {link_path}")
            return False

        self.file_system.create_symlink(link_path, source_path, target_is_directory=is_directory)
        return True
