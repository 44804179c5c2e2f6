from __future__ import annotations

from pathlib import Path

from binary_plugins.contracts.declarations import (
    ArtifactCoordinate,
    NormalizedArtifactCoordinate,
    PluginDeclaration,
)


class ResolutionError(Exception):
    """Base error for anything that stops a plugin from resolving."""

    def __init__(self, message: str, *, declaration: PluginDeclaration | None = None) -> None:
        super().__init__(message)
        self.declaration = declaration


class MissingExecutableError(ResolutionError):
    def __init__(self, name: str, *, declaration: PluginDeclaration | None = None) -> None:
        super().__init__(
            f"No executable '{name}' was found on the system path",
            declaration=declaration,
        )
        self.name = name


class ArtifactResolutionFailure(ResolutionError):
    def __init__(
        self,
        message: str,
        *,
        coordinate: ArtifactCoordinate | NormalizedArtifactCoordinate | None = None,
        declaration: PluginDeclaration | None = None,
    ) -> None:
        super().__init__(message, declaration=declaration)
        self.coordinate = coordinate


class PermissionFixupFailure(ResolutionError):
    def __init__(
        self,
        path: Path,
        *,
        declaration: PluginDeclaration | None = None,
    ) -> None:
        super().__init__(
            f"Failed to set executable bit on plugin binary {path}",
            declaration=declaration,
        )
        self.path = path


class UnsupportedPlatformError(ResolutionError):
    pass
