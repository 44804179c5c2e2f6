from .fakes import (
    CollaboratorCall,
    FakeArtifactPathResolver,
    FakeSystemPathLocator,
    PassthroughPlatformArtifactFactory,
    RecordingExecutableSetter,
)

__all__ = [
    "CollaboratorCall",
    "FakeArtifactPathResolver",
    "FakeSystemPathLocator",
    "PassthroughPlatformArtifactFactory",
    "RecordingExecutableSetter",
]
