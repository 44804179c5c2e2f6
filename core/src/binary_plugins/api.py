from __future__ import annotations

from pathlib import Path

from binary_plugins.configuration import load_plugin_declarations, resolve_local_repository
from binary_plugins.contracts import ResolutionContext, ResolvedPlugin
from binary_plugins.dependency import HostPlatformArtifactFactory, LocalRepositoryArtifactResolver
from binary_plugins.resolver import PluginResolver
from binary_plugins.system import FileModeExecutableSetter, SystemPathBinaryLocator


def build_default_resolver(*, local_repository: Path | None = None) -> PluginResolver:
    """Wire a PluginResolver against the host filesystem and a local repository."""
    repository_root = local_repository if local_repository is not None else resolve_local_repository()
    return PluginResolver(
        artifact_resolver=LocalRepositoryArtifactResolver(repository_root),
        platform_factory=HostPlatformArtifactFactory(),
        path_locator=SystemPathBinaryLocator(),
        executable_setter=FileModeExecutableSetter(),
    )


def resolve_from_yaml(
    path: str | Path,
    *,
    resolver: PluginResolver | None = None,
    context: ResolutionContext = None,
) -> list[ResolvedPlugin]:
    declarations = load_plugin_declarations(path)
    plugin_resolver = resolver or build_default_resolver()
    return plugin_resolver.resolve_all(context, declarations)


def describe_failure(exc: Exception) -> str:
    """Return the error message followed by its chained cause, if any."""
    message = str(exc)
    if exc.__cause__ is not None:
        message = f"{message}: {exc.__cause__}"
    return message
