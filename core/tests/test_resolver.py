from __future__ import annotations

from pathlib import Path

import pytest

from binary_plugins.contracts import (
    ArtifactCoordinate,
    ArtifactResolutionFailure,
    ExecutableName,
    MissingExecutableError,
    PermissionFixupFailure,
    ResolutionError,
    ResolvedPlugin,
)
from binary_plugins.resolver import PluginResolver
from binary_plugins.testkit import (
    FakeArtifactPathResolver,
    FakeSystemPathLocator,
    PassthroughPlatformArtifactFactory,
    RecordingExecutableSetter,
)


def _build_resolver(
    *,
    artifacts: dict[str, Path] | None = None,
    executables: dict[str, Path] | None = None,
    setter: RecordingExecutableSetter | None = None,
) -> tuple[PluginResolver, FakeArtifactPathResolver, FakeSystemPathLocator, RecordingExecutableSetter]:
    artifact_resolver = FakeArtifactPathResolver(artifacts)
    locator = FakeSystemPathLocator(executables)
    executable_setter = setter or RecordingExecutableSetter()
    resolver = PluginResolver(
        artifact_resolver=artifact_resolver,
        platform_factory=PassthroughPlatformArtifactFactory(),
        path_locator=locator,
        executable_setter=executable_setter,
    )
    return resolver, artifact_resolver, locator, executable_setter


def test_artifact_declaration_resolves_and_sets_executable_bit_once():
    path = Path("/cache/protoc-gen-foo")
    resolver, artifact_resolver, locator, setter = _build_resolver(
        artifacts={"protoc-gen-foo": path}
    )
    declaration = ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0")

    result = resolver.resolve_all(None, [declaration])

    assert result == [ResolvedPlugin(id="protoc-gen-foo", path=path)]
    assert setter.paths == [path]
    assert locator.calls == []
    assert len(artifact_resolver.calls) == 1


def test_executable_name_declaration_uses_path_locator_without_fixup():
    path = Path("/usr/local/bin/protoc-gen-bar")
    resolver, artifact_resolver, _, setter = _build_resolver(
        executables={"protoc-gen-bar": path}
    )

    result = resolver.resolve_all(None, [ExecutableName("protoc-gen-bar")])

    assert result == [ResolvedPlugin(id="protoc-gen-bar", path=path)]
    assert setter.paths == []
    assert artifact_resolver.calls == []


def test_context_is_passed_through_to_artifact_resolver():
    context = object()
    resolver, artifact_resolver, _, _ = _build_resolver(
        artifacts={"protoc-gen-foo": Path("/cache/protoc-gen-foo")}
    )

    resolver.resolve_all(context, [ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0")])

    passed_context, _ = artifact_resolver.calls[0].args
    assert passed_context is context


def test_jar_extension_is_dropped_before_artifact_resolution():
    resolver, artifact_resolver, _, _ = _build_resolver(
        artifacts={"protoc-gen-foo": Path("/cache/protoc-gen-foo")}
    )

    resolver.resolve_all(
        None,
        [ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0", extension="jar")],
    )

    _, coordinate = artifact_resolver.calls[0].args
    assert coordinate.extension is None


def test_results_preserve_declaration_order_for_mixed_declarations():
    resolver, _, _, _ = _build_resolver(
        artifacts={
            "protoc-gen-a": Path("/cache/protoc-gen-a"),
            "protoc-gen-c": Path("/cache/protoc-gen-c"),
        },
        executables={
            "protoc-gen-b": Path("/usr/bin/protoc-gen-b"),
            "protoc-gen-d": Path("/opt/bin/protoc-gen-d"),
        },
    )
    declarations = [
        ExecutableName("protoc-gen-d"),
        ArtifactCoordinate("com.example", "protoc-gen-a", "1.0"),
        ExecutableName("protoc-gen-b"),
        ArtifactCoordinate("com.example", "protoc-gen-c", "2.0"),
    ]

    result = resolver.resolve_all(None, declarations)

    assert [plugin.id for plugin in result] == [
        "protoc-gen-d",
        "protoc-gen-a",
        "protoc-gen-b",
        "protoc-gen-c",
    ]
    for plugin in result:
        assert plugin.id == plugin.path.name


def test_id_is_derived_from_resolved_path_not_declaration():
    resolver, _, _, _ = _build_resolver(
        artifacts={"protoc-gen-foo": Path("/cache/protoc-gen-foo-1.0-linux-x86_64.exe")}
    )

    (plugin,) = resolver.resolve_all(None, [ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0")])

    assert plugin.id == "protoc-gen-foo-1.0-linux-x86_64.exe"


def test_missing_executable_raises_with_name():
    resolver, _, _, _ = _build_resolver()

    with pytest.raises(MissingExecutableError, match="protoc-gen-missing") as excinfo:
        resolver.resolve_all(None, [ExecutableName("protoc-gen-missing")])

    assert excinfo.value.name == "protoc-gen-missing"
    assert excinfo.value.declaration == ExecutableName("protoc-gen-missing")


def test_permission_fixup_failure_wraps_cause_and_stops_the_batch():
    cause = PermissionError("denied")
    resolver, artifact_resolver, locator, _ = _build_resolver(
        artifacts={"protoc-gen-foo": Path("/cache/protoc-gen-foo")},
        executables={"protoc-gen-bar": Path("/usr/bin/protoc-gen-bar")},
        setter=RecordingExecutableSetter(error=cause),
    )

    with pytest.raises(PermissionFixupFailure) as excinfo:
        resolver.resolve_all(
            None,
            [
                ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0"),
                ExecutableName("protoc-gen-bar"),
            ],
        )

    assert excinfo.value.__cause__ is cause
    assert excinfo.value.path == Path("/cache/protoc-gen-foo")
    assert locator.calls == []
    assert len(artifact_resolver.calls) == 1


def test_artifact_resolution_failure_propagates_with_declaration():
    resolver, _, _, setter = _build_resolver()
    declaration = ArtifactCoordinate("com.example", "protoc-gen-missing", "1.0")

    with pytest.raises(ArtifactResolutionFailure) as excinfo:
        resolver.resolve_all(None, [declaration])

    assert excinfo.value.declaration == declaration
    assert setter.paths == []


def test_unexpected_artifact_resolver_error_is_wrapped():
    class _BrokenResolver:
        def resolve_artifact(self, context, coordinate):
            raise ConnectionError("repository unreachable")

    resolver = PluginResolver(
        artifact_resolver=_BrokenResolver(),
        platform_factory=PassthroughPlatformArtifactFactory(),
        path_locator=FakeSystemPathLocator(),
        executable_setter=RecordingExecutableSetter(),
    )

    with pytest.raises(ArtifactResolutionFailure, match="repository unreachable") as excinfo:
        resolver.resolve_all(None, [ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0")])

    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_fail_fast_keeps_side_effects_of_earlier_declarations():
    # Resolution is fail-fast: no partial result is returned, and the
    # executable bit already set on the first artifact is not rolled back.
    path = Path("/cache/protoc-gen-foo")
    resolver, _, _, setter = _build_resolver(artifacts={"protoc-gen-foo": path})

    with pytest.raises(MissingExecutableError, match="protoc-gen-bar"):
        resolver.resolve_all(
            None,
            [
                ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0"),
                ExecutableName("protoc-gen-bar"),
            ],
        )

    assert setter.paths == [path]


def test_resolving_same_declaration_twice_repeats_the_work():
    path = Path("/cache/protoc-gen-foo")
    resolver, artifact_resolver, _, setter = _build_resolver(artifacts={"protoc-gen-foo": path})
    declaration = ArtifactCoordinate("com.example", "protoc-gen-foo", "1.0")

    result = resolver.resolve_all(None, [declaration, declaration])

    assert len(result) == 2
    assert len(artifact_resolver.calls) == 2
    assert setter.paths == [path, path]


def test_empty_declarations_resolve_to_empty_list():
    resolver, _, _, _ = _build_resolver()

    assert resolver.resolve_all(None, []) == []


def test_unknown_declaration_type_is_rejected():
    resolver, _, _, _ = _build_resolver()

    with pytest.raises(TypeError):
        resolver.resolve_all(None, ["protoc-gen-foo"])  # type: ignore[list-item]


def test_all_resolution_errors_share_a_base_class():
    assert issubclass(MissingExecutableError, ResolutionError)
    assert issubclass(ArtifactResolutionFailure, ResolutionError)
    assert issubclass(PermissionFixupFailure, ResolutionError)
