from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

# Opaque handle handed through to the artifact path resolver untouched.
ResolutionContext: TypeAlias = Any

DEFAULT_ARCHIVE_EXTENSION = "jar"


@dataclass(frozen=True, slots=True)
class ArtifactCoordinate:
    """
    Plugin declared as an artifact coordinate.

    `extension=None` means the resolver's default packaging type.
    """

    group_id: str
    artifact_id: str
    version: str
    classifier: str | None = None
    extension: str | None = None

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id]
        if self.extension is not None or self.classifier is not None:
            parts.append(self.extension or DEFAULT_ARCHIVE_EXTENSION)
        if self.classifier is not None:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


@dataclass(frozen=True, slots=True)
class ExecutableName:
    """Plugin declared as a bare executable name looked up on the PATH."""

    name: str

    def __str__(self) -> str:
        return self.name


PluginDeclaration: TypeAlias = ArtifactCoordinate | ExecutableName


@dataclass(frozen=True, slots=True)
class NormalizedArtifactCoordinate:
    """
    Coordinate ready for the artifact path resolver.

    `extension=None` means "no extension", never the default archive type.
    """

    group_id: str
    artifact_id: str
    version: str
    classifier: str | None = None
    extension: str | None = None

    def file_name(self) -> str:
        name = f"{self.artifact_id}-{self.version}"
        if self.classifier:
            name = f"{name}-{self.classifier}"
        if self.extension:
            name = f"{name}.{self.extension}"
        return name


@dataclass(frozen=True, slots=True)
class ResolvedPlugin:
    """
    Locally addressable, executable plugin binary.

    The id is always the final segment of the path, whatever the source.
    """

    id: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> ResolvedPlugin:
        return cls(id=path.name, path=path)
