from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

_logger = logging.getLogger("binary_plugins.system.files")


def is_executable(path: Path) -> bool:
    """Return True when `path` is a regular file the current user may execute."""
    return path.is_file() and os.access(path, os.X_OK)


def make_executable(path: Path) -> None:
    """
    Add owner, group and other execute permission to `path`.

    No-op when all three bits are already present. OSError propagates.
    """
    mode = path.stat().st_mode
    if mode & _EXECUTE_BITS == _EXECUTE_BITS:
        return

    _logger.warning("Adding execute permission to %s", path)
    path.chmod(stat.S_IMODE(mode) | _EXECUTE_BITS)


class FileModeExecutableSetter:
    """ExecutableAttributeSetter backed by the local filesystem."""

    def ensure_executable(self, path: Path) -> None:
        make_executable(path)
