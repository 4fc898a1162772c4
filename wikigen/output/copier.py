"""Recursive copy of the working folder into the output folder."""

import os
import shutil
import stat
from pathlib import Path
from typing import Optional

from wikigen.utils.config import settings
from wikigen.utils.logger import get_logger

log = get_logger(__name__)


def is_hidden(path: Path) -> bool:
    """True for dot-folders and anything carrying the Windows hidden attribute."""
    if path.name.startswith("."):
        return True
    attributes = getattr(os.stat(path), "st_file_attributes", 0)
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def _make_writable(path: Path) -> None:
    # Copies must be deletable by the next build
    mode = stat.S_IMODE(os.stat(path).st_mode)
    os.chmod(path, mode | stat.S_IREAD | stat.S_IWRITE)


class TreeCopier:
    """Copies a folder tree, skipping hidden sub-folders, and counts the files."""

    def __init__(self, progress_interval: Optional[int] = None):
        self.progress_interval = progress_interval or settings.progress_interval
        self.file_count = 0

    def copy(self, source: Path, dest: Path) -> int:
        for entry in sorted(source.iterdir()):
            if not entry.is_file():
                continue
            dest.mkdir(parents=True, exist_ok=True)
            target = dest / entry.name
            if target.exists():
                _make_writable(target)
            shutil.copyfile(entry, target)
            _make_writable(target)

            self.file_count += 1
            if self.file_count % self.progress_interval == 0:
                log.info("Copied %d files", self.file_count)

        # Hidden folders are usually source control metadata
        for entry in sorted(source.iterdir()):
            if entry.is_dir() and not is_hidden(entry):
                self.copy(entry, dest / entry.name)

        return self.file_count


def copy_tree(source: Path, dest: Path, progress_interval: Optional[int] = None) -> int:
    """Mirror *source* into *dest* and return the number of files copied."""
    log.info("Copying content to output folder...")
    file_count = TreeCopier(progress_interval).copy(source, dest)
    log.info("Finished copying %d files", file_count)
    return file_count
