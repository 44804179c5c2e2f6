from .collaborators import (
    ArtifactPathResolver,
    ExecutableAttributeSetter,
    PlatformArtifactFactory,
    SystemPathLocator,
)
from .declarations import (
    DEFAULT_ARCHIVE_EXTENSION,
    ArtifactCoordinate,
    ExecutableName,
    NormalizedArtifactCoordinate,
    PluginDeclaration,
    ResolutionContext,
    ResolvedPlugin,
)
from .errors import (
    ArtifactResolutionFailure,
    MissingExecutableError,
    PermissionFixupFailure,
    ResolutionError,
    UnsupportedPlatformError,
)

__all__ = [
    "DEFAULT_ARCHIVE_EXTENSION",
    "ArtifactCoordinate",
    "ExecutableName",
    "NormalizedArtifactCoordinate",
    "PluginDeclaration",
    "ResolutionContext",
    "ResolvedPlugin",
    "ArtifactPathResolver",
    "ExecutableAttributeSetter",
    "PlatformArtifactFactory",
    "SystemPathLocator",
    "ResolutionError",
    "MissingExecutableError",
    "ArtifactResolutionFailure",
    "PermissionFixupFailure",
    "UnsupportedPlatformError",
]
