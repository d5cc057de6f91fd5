"""
Filesystem accessor - the capability interface the file tools call into.

Tools never touch ``os`` directly; they go through a FileSystemAccessor so the
local disk and an in-memory double can be swapped freely.
"""

import os
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, List


@dataclass(frozen=True)
class FileStat:
    """Size and timestamps of a single path."""
    size: int
    modified: datetime
    accessed: datetime


class FileSystemAccessor(ABC):
    """
    Abstract interface for filesystem operations.

    Implementations raise ordinary OSError subclasses when a primitive is
    refused (missing path, existing destination, permissions).
    """

    @abstractmethod
    def get_current_directory(self) -> str:
        """Return the process working directory."""

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if path is an existing file (symlinks followed)."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if path is an existing directory (symlinks followed)."""

    @abstractmethod
    def list_files(self, path: str) -> List[str]:
        """
        List the files directly under a directory.

        Args:
            path: Directory to scan

        Returns:
            Paths of the files (not subdirectories), joined onto ``path``
        """

    @abstractmethod
    def walk_files(self, path: str) -> Iterator[str]:
        """Yield every file below a directory, at any depth."""

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        """Get size and timestamps of a path."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a whole file as text."""

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """Create or overwrite a file with the given text."""

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete a file or a symlink."""

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """Delete a directory and everything below it."""

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create a directory and any missing parents; existing is fine."""

    @abstractmethod
    def move_file(self, source: str, destination: str, overwrite: bool = False) -> None:
        """Move a file, replacing an existing destination file only if overwrite."""

    @abstractmethod
    def move_directory(self, source: str, destination: str) -> None:
        """Move a directory; the destination must not exist."""

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file; the destination must not exist."""

    @abstractmethod
    def create_symlink(self, link_path: str, target: str, target_is_directory: bool = False) -> None:
        """Create a symbolic link at link_path pointing to target."""


def _raise(error: OSError) -> None:
    """os.walk error hook; an unreadable subdirectory fails the walk."""
    raise error


class LocalFileSystem(FileSystemAccessor):
    """FileSystemAccessor backed by the real disk."""

    def get_current_directory(self) -> str:
        return os.getcwd()

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_files(self, path: str) -> List[str]:
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries if entry.is_file()]
        return [os.path.join(path, name) for name in sorted(names)]

    def walk_files(self, path: str) -> Iterator[str]:
        for root, _, filenames in os.walk(path, onerror=_raise):
            for fname in filenames:
                file_path = os.path.join(root, fname)
                # Dangling links are not files, same as list_files
                if os.path.isfile(file_path):
                    yield file_path

    def stat(self, path: str) -> FileStat:
        st = os.stat(path)
        return FileStat(
            size=st.st_size,
            modified=datetime.fromtimestamp(st.st_mtime),
            accessed=datetime.fromtimestamp(st.st_atime),
        )

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def delete_file(self, path: str) -> None:
        os.remove(path)

    def delete_directory(self, path: str) -> None:
        # A link to a directory is removed itself, never its target's contents
        if os.path.islink(path):
            os.unlink(path)
        else:
            shutil.rmtree(path)

    def create_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def move_file(self, source: str, destination: str, overwrite: bool = False) -> None:
        if os.path.isdir(destination):
            raise IsADirectoryError(f"Destination is a directory: {destination}")
        if not overwrite and os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")
        shutil.move(source, destination)

    def move_directory(self, source: str, destination: str) -> None:
        if os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")
        shutil.move(source, destination)

    def copy_file(self, source: str, destination: str) -> None:
        if os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")
        shutil.copy2(source, destination)

    def create_symlink(self, link_path: str, target: str, target_is_directory: bool = False) -> None:
        os.symlink(target, link_path, target_is_directory=target_is_directory)
