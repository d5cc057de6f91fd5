"""
Entry - point-in-time metadata snapshot of one filesystem path.
"""

import os
from dataclasses import dataclass
from datetime import datetime

from file_operations.accessor import FileSystemAccessor


def _extension(path: str) -> str:
    """Text from the last dot of the file name; dotfiles like .bashrc count whole."""
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


@dataclass(frozen=True)
class Entry:
    """
    A file or directory as seen at construction time.

    Fields are read once, so an Entry never reflects later changes to the
    path. ``size`` is 0 and ``last_modified`` is ``datetime.min`` for anything
    that is not an existing file.
    """
    path: str
    name: str
    directory: str
    extension: str
    is_directory: bool
    is_file: bool
    size: int
    last_modified: datetime

    @classmethod
    def from_path(cls, file_system: FileSystemAccessor, path: str) -> "Entry":
        """
        Capture the metadata of a path.

        Raises whatever the accessor raises when the path disappears or its
        metadata cannot be read.
        """
        is_directory = file_system.is_dir(path)
        is_file = file_system.is_file(path)

        size = 0
        last_modified = datetime.min
        if is_file:
            st = file_system.stat(path)
            size = st.size
            last_modified = st.modified

        return cls(
            path=path,
            name=os.path.basename(path),
            directory=os.path.dirname(path),
            extension="" if is_directory else _extension(path),
            is_directory=is_directory,
            is_file=is_file,
            size=size,
            last_modified=last_modified,
        )
