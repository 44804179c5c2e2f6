from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from binary_plugins.contracts.declarations import NormalizedArtifactCoordinate, ResolutionContext


@runtime_checkable
class ArtifactPathResolver(Protocol):
    def resolve_artifact(
        self,
        context: ResolutionContext,
        coordinate: NormalizedArtifactCoordinate,
    ) -> Path:
        """
        Resolve a single artifact (no transitive dependencies) to a local path.

        Raise ArtifactResolutionFailure when the artifact cannot be located.
        """
        ...


@runtime_checkable
class PlatformArtifactFactory(Protocol):
    def create_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str,
        extension: str | None,
        classifier: str | None,
    ) -> NormalizedArtifactCoordinate:
        """Apply host-platform classifier/extension rules to the coordinate fields."""
        ...


@runtime_checkable
class SystemPathLocator(Protocol):
    def locate(self, name: str) -> Path | None:
        """Return the first executable named `name` on the search path, or None."""
        ...


@runtime_checkable
class ExecutableAttributeSetter(Protocol):
    def ensure_executable(self, path: Path) -> None:
        """Set the execute bits on `path`; raise OSError when that fails."""
        ...
