"""Resolve protoc-style plugin declarations into executable binaries."""

from binary_plugins.contracts import (
    ArtifactCoordinate,
    ArtifactResolutionFailure,
    ExecutableName,
    MissingExecutableError,
    PermissionFixupFailure,
    PluginDeclaration,
    ResolutionError,
    ResolvedPlugin,
)
from binary_plugins.resolver import PluginResolver

__all__ = [
    "ArtifactCoordinate",
    "ExecutableName",
    "PluginDeclaration",
    "ResolvedPlugin",
    "PluginResolver",
    "ResolutionError",
    "MissingExecutableError",
    "ArtifactResolutionFailure",
    "PermissionFixupFailure",
]
