from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from binary_plugins.system.files import is_executable

_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"

_logger = logging.getLogger("binary_plugins.system.path_locator")


class SystemPathBinaryLocator:
    """
    Find executables on the host search path.

    Directories are searched in PATH order and the first candidate that is
    executable by the current process wins. A same-named file that is not
    executable is skipped rather than returned.
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        windows: bool | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._windows = os.name == "nt" if windows is None else windows

    def search_path(self) -> list[Path]:
        raw = self._environ.get("PATH", "")
        return [Path(entry).absolute() for entry in raw.split(os.pathsep) if entry.strip()]

    def locate(self, name: str) -> Path | None:
        names = self._candidate_names(name)
        for directory in self.search_path():
            if not directory.is_dir():
                continue
            for candidate in self._candidates_in(directory, names):
                if is_executable(candidate):
                    _logger.debug("Found executable %s at %s", name, candidate)
                    return candidate
                _logger.debug("Skipping non-executable candidate %s", candidate)
        _logger.debug("Executable %s not found on the system path", name)
        return None

    def _candidate_names(self, name: str) -> list[str]:
        if not self._windows:
            return [name]
        names = [name]
        for suffix in self._path_extensions():
            names.append(f"{name}{suffix}")
        return names

    def _path_extensions(self) -> list[str]:
        raw = self._environ.get("PATHEXT") or _DEFAULT_PATHEXT
        return [ext.strip() for ext in raw.split(";") if ext.strip()]

    def _candidates_in(self, directory: Path, names: Iterable[str]) -> list[Path]:
        if not self._windows:
            return [directory / name for name in names]

        # Windows file names are case-insensitive, PATHEXT entries are upper case.
        wanted = [name.lower() for name in names]
        try:
            entries = {entry.name.lower(): entry for entry in directory.iterdir()}
        except OSError:
            return []
        return [entries[name] for name in wanted if name in entries]
