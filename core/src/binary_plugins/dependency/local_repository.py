from __future__ import annotations

import logging
from pathlib import Path

from binary_plugins.contracts import (
    ArtifactResolutionFailure,
    NormalizedArtifactCoordinate,
    ResolutionContext,
)

_logger = logging.getLogger("binary_plugins.dependency.local_repository")


def artifact_relative_path(coordinate: NormalizedArtifactCoordinate) -> Path:
    """Return the repository-relative path of a coordinate in Maven layout."""
    group_dirs = Path(*coordinate.group_id.split("."))
    return group_dirs / coordinate.artifact_id / coordinate.version / coordinate.file_name()


class LocalRepositoryArtifactResolver:
    """
    ArtifactPathResolver reading from a Maven-layout local repository.

    It only looks up artifacts already present in the repository; fetching
    them is left to whatever populates the repository.
    """

    def __init__(self, repository_root: Path) -> None:
        self._root = repository_root

    @property
    def repository_root(self) -> Path:
        return self._root

    def resolve_artifact(
        self,
        context: ResolutionContext,
        coordinate: NormalizedArtifactCoordinate,
    ) -> Path:
        path = self._root / artifact_relative_path(coordinate)
        _logger.debug("Looking up %s at %s", coordinate.file_name(), path)
        if not path.is_file():
            raise ArtifactResolutionFailure(
                f"Artifact {coordinate.group_id}:{coordinate.artifact_id}:{coordinate.version} "
                f"not found in local repository: {path}",
                coordinate=coordinate,
            )
        return path.absolute()
