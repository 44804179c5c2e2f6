"""Artifact coordinate handling and artifact path resolution."""

from binary_plugins.dependency.local_repository import (
    LocalRepositoryArtifactResolver,
    artifact_relative_path,
)
from binary_plugins.dependency.normalizer import normalize_coordinate
from binary_plugins.dependency.platform_factory import (
    DEFAULT_BINARY_EXTENSION,
    HostPlatformArtifactFactory,
)

__all__ = [
    "DEFAULT_BINARY_EXTENSION",
    "HostPlatformArtifactFactory",
    "LocalRepositoryArtifactResolver",
    "artifact_relative_path",
    "normalize_coordinate",
]
