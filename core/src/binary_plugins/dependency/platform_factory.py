from __future__ import annotations

from binary_plugins.contracts import NormalizedArtifactCoordinate
from binary_plugins.system.platform import HostPlatform, detect_host_platform

DEFAULT_BINARY_EXTENSION = "exe"


class HostPlatformArtifactFactory:
    """
    Fill in the host-specific parts of a binary artifact coordinate.

    Native binaries are published as `<artifact>-<version>-<os>-<arch>.exe`,
    so a missing classifier becomes the host classifier and a missing
    extension becomes `exe`. Explicit values are kept as declared.
    """

    def __init__(self, *, host: HostPlatform | None = None) -> None:
        self._host = host

    @property
    def host(self) -> HostPlatform:
        if self._host is None:
            self._host = detect_host_platform()
        return self._host

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
            classifier=classifier or self.host.classifier,
            extension=extension or DEFAULT_BINARY_EXTENSION,
        )
