"""Host filesystem and platform helpers."""

from binary_plugins.system.files import FileModeExecutableSetter, is_executable, make_executable
from binary_plugins.system.path_locator import SystemPathBinaryLocator
from binary_plugins.system.platform import HostPlatform, detect_host_platform

__all__ = [
    "FileModeExecutableSetter",
    "HostPlatform",
    "SystemPathBinaryLocator",
    "detect_host_platform",
    "is_executable",
    "make_executable",
]
