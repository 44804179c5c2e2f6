from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from binary_plugins.contracts import (
    ArtifactCoordinate,
    ArtifactPathResolver,
    ArtifactResolutionFailure,
    ExecutableAttributeSetter,
    ExecutableName,
    MissingExecutableError,
    PermissionFixupFailure,
    PlatformArtifactFactory,
    PluginDeclaration,
    ResolutionContext,
    ResolutionError,
    ResolvedPlugin,
    SystemPathLocator,
)
from binary_plugins.dependency.normalizer import normalize_coordinate

_logger = logging.getLogger("binary_plugins.resolver")


class PluginResolver:
    """
    Resolve plugin declarations into executable binaries.

    Artifact coordinates go through the artifact path resolver and get their
    execute bits fixed up; executable names are looked up on the system path.

    Resolution is sequential and fail-fast: the first failing declaration
    raises and no partial result is returned. Side effects already applied
    for earlier declarations (cache I/O, permission changes) are kept.
    """

    def __init__(
        self,
        *,
        artifact_resolver: ArtifactPathResolver,
        platform_factory: PlatformArtifactFactory,
        path_locator: SystemPathLocator,
        executable_setter: ExecutableAttributeSetter,
    ) -> None:
        self._artifact_resolver = artifact_resolver
        self._platform_factory = platform_factory
        self._path_locator = path_locator
        self._executable_setter = executable_setter

    def resolve_all(
        self,
        context: ResolutionContext,
        declarations: Iterable[PluginDeclaration],
    ) -> list[ResolvedPlugin]:
        resolved: list[ResolvedPlugin] = []
        for declaration in declarations:
            path = self._resolve_path(context, declaration)
            plugin = ResolvedPlugin.from_path(path)
            _logger.info("Resolved plugin %s -> %s", plugin.id, plugin.path)
            resolved.append(plugin)
        return resolved

    def _resolve_path(self, context: ResolutionContext, declaration: PluginDeclaration) -> Path:
        match declaration:
            case ArtifactCoordinate():
                return self._resolve_artifact(context, declaration)
            case ExecutableName(name=name):
                return self._locate_executable(name, declaration)
            case _:
                raise TypeError(f"Unsupported plugin declaration: {declaration!r}")

    def _resolve_artifact(self, context: ResolutionContext, coordinate: ArtifactCoordinate) -> Path:
        normalized = normalize_coordinate(coordinate, self._platform_factory)
        _logger.debug("Resolving plugin artifact %s as %s", coordinate, normalized)

        try:
            path = self._artifact_resolver.resolve_artifact(context, normalized)
        except ResolutionError as exc:
            if exc.declaration is None:
                exc.declaration = coordinate
            raise
        except Exception as exc:
            raise ArtifactResolutionFailure(
                f"Failed to resolve plugin artifact {coordinate}: {exc}",
                coordinate=normalized,
                declaration=coordinate,
            ) from exc

        try:
            self._executable_setter.ensure_executable(path)
        except OSError as exc:
            raise PermissionFixupFailure(path, declaration=coordinate) from exc

        return path

    def _locate_executable(self, name: str, declaration: ExecutableName) -> Path:
        # PATH hits are already executable: the locator filters on it.
        path = self._path_locator.locate(name)
        if path is None:
            raise MissingExecutableError(name, declaration=declaration)
        return path
