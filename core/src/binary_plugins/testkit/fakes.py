from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from binary_plugins.contracts import (
    ArtifactResolutionFailure,
    NormalizedArtifactCoordinate,
    ResolutionContext,
)


@dataclass(frozen=True, slots=True)
class CollaboratorCall:
    """Record of a collaborator call for assertions in tests."""

    name: str
    args: tuple[Any, ...]


class FakeArtifactPathResolver:
    """
    In-memory ArtifactPathResolver keyed by artifact id.
    """

    def __init__(self, paths: Mapping[str, Path] | None = None) -> None:
        self._paths = dict(paths or {})
        self.calls: list[CollaboratorCall] = []

    def resolve_artifact(
        self,
        context: ResolutionContext,
        coordinate: NormalizedArtifactCoordinate,
    ) -> Path:
        self.calls.append(CollaboratorCall(name="resolve_artifact", args=(context, coordinate)))
        try:
            return self._paths[coordinate.artifact_id]
        except KeyError as e:
            raise ArtifactResolutionFailure(
                f"No fake artifact for {coordinate.artifact_id}",
                coordinate=coordinate,
            ) from e


class PassthroughPlatformArtifactFactory:
    """PlatformArtifactFactory that applies no host rules."""

    def create_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str,
        extension: str | None,
        classifier: str | None,
    ) -> NormalizedArtifactCoordinate:
        return NormalizedArtifactCoordinate(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            classifier=classifier,
            extension=extension,
        )


class FakeSystemPathLocator:
    def __init__(self, paths: Mapping[str, Path] | None = None) -> None:
        self._paths = dict(paths or {})
        self.calls: list[CollaboratorCall] = []

    def locate(self, name: str) -> Path | None:
        self.calls.append(CollaboratorCall(name="locate", args=(name,)))
        return self._paths.get(name)


class RecordingExecutableSetter:
    """
    ExecutableAttributeSetter that records paths instead of touching the disk.

    Pass `error` to make every call raise it.
    """

    def __init__(self, *, error: OSError | None = None) -> None:
        self._error = error
        self.paths: list[Path] = []

    def ensure_executable(self, path: Path) -> None:
        self.paths.append(path)
        if self._error is not None:
            raise self._error
