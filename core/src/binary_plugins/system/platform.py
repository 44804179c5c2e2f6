from __future__ import annotations

import platform
import re
from dataclasses import dataclass

from binary_plugins.contracts.errors import UnsupportedPlatformError

# Classifier naming follows the os-maven-plugin conventions used by
# binaries published to Maven repositories (e.g. protoc-gen-grpc-java).
_OS_NAMES = {
    "linux": "linux",
    "darwin": "osx",
    "windows": "windows",
    "freebsd": "freebsd",
    "openbsd": "openbsd",
    "netbsd": "netbsd",
    "sunos": "sunos",
    "aix": "aix",
}

_ARCH_PATTERNS = [
    (re.compile(r"^(x8664|amd64|ia32e|em64t|x64)$"), "x86_64"),
    (re.compile(r"^(x8632|x86|i[3-6]86|ia32|x32)$"), "x86_32"),
    (re.compile(r"^(aarch64|arm64)$"), "aarch_64"),
    (re.compile(r"^(ppc64le)$"), "ppcle_64"),
    (re.compile(r"^(ppc64)$"), "ppc_64"),
    (re.compile(r"^(s390x)$"), "s390_64"),
    (re.compile(r"^(riscv64)$"), "riscv64"),
]


@dataclass(frozen=True, slots=True)
class HostPlatform:
    os_name: str
    arch: str

    @property
    def classifier(self) -> str:
        return f"{self.os_name}-{self.arch}"


def normalize_os(system: str) -> str:
    value = system.strip().lower()
    if value.startswith("win"):
        return "windows"
    try:
        return _OS_NAMES[value]
    except KeyError as e:
        raise UnsupportedPlatformError(f"Unsupported operating system: {system}") from e


def normalize_arch(machine: str) -> str:
    value = re.sub(r"[^a-z0-9]", "", machine.strip().lower())
    for pattern, arch in _ARCH_PATTERNS:
        if pattern.match(value):
            return arch
    raise UnsupportedPlatformError(f"Unsupported architecture: {machine}")


def detect_host_platform(*, system: str | None = None, machine: str | None = None) -> HostPlatform:
    """Detect the current host, optionally overriding the raw platform strings."""
    return HostPlatform(
        os_name=normalize_os(system if system is not None else platform.system()),
        arch=normalize_arch(machine if machine is not None else platform.machine()),
    )
