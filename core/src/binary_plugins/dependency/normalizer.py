from __future__ import annotations

from binary_plugins.contracts import (
    DEFAULT_ARCHIVE_EXTENSION,
    ArtifactCoordinate,
    NormalizedArtifactCoordinate,
    PlatformArtifactFactory,
)


def normalize_coordinate(
    coordinate: ArtifactCoordinate,
    factory: PlatformArtifactFactory,
) -> NormalizedArtifactCoordinate:
    """
    Prepare a declared coordinate for artifact path resolution.

    Plugin binaries are never archives, so an unset or default archive
    extension is dropped instead of letting the resolver fall back to a jar.
    """
    extension = coordinate.extension
    if extension is None or extension == DEFAULT_ARCHIVE_EXTENSION:
        extension = None

    return factory.create_artifact(
        coordinate.group_id,
        coordinate.artifact_id,
        coordinate.version,
        extension,
        coordinate.classifier,
    )
