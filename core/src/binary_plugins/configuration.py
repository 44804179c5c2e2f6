from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from binary_plugins.contracts import ArtifactCoordinate, ExecutableName, PluginDeclaration
from binary_plugins.contracts.plugin_config import ArtifactConfig, PluginConfig, PluginsConfig

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_ENV_LOCAL_REPOSITORY = "BINARY_PLUGINS_LOCAL_REPOSITORY"


class ConfigError(ValueError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def load_plugins_config(path: str | Path) -> PluginsConfig:
    payload = resolve_env_vars(load_yaml(path))
    try:
        return PluginsConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("config", exc)) from exc


def load_plugin_declarations(path: str | Path) -> list[PluginDeclaration]:
    """Load the ordered plugin declarations from a YAML file."""
    config = load_plugins_config(path)
    return [to_declaration(entry) for entry in config.plugins]


def to_declaration(entry: PluginConfig) -> PluginDeclaration:
    if entry.executable_name is not None:
        return ExecutableName(name=entry.executable_name)
    if isinstance(entry.artifact, str):
        return parse_coordinate(entry.artifact)
    if isinstance(entry.artifact, ArtifactConfig):
        return ArtifactCoordinate(**entry.artifact.model_dump(mode="python"))
    raise ConfigError(f"Plugin entry has no declaration: {entry!r}")


def parse_coordinate(text: str) -> ArtifactCoordinate:
    """
    Parse `group:artifact[:extension[:classifier]]:version`.
    """
    parts = [part.strip() for part in text.strip().split(":")]
    if len(parts) not in (3, 4, 5) or any(not part for part in parts):
        raise ConfigError(
            f"Invalid artifact coordinate '{text}', expected "
            "group:artifact[:extension[:classifier]]:version"
        )

    group_id, artifact_id, *middle, version = parts
    extension = middle[0] if len(middle) >= 1 else None
    classifier = middle[1] if len(middle) == 2 else None
    return ArtifactCoordinate(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        classifier=classifier,
        extension=extension,
    )


def resolve_local_repository() -> Path:
    env_value = os.environ.get(_ENV_LOCAL_REPOSITORY)
    if env_value:
        return Path(env_value).expanduser()
    return Path.home() / ".m2" / "repository"


def resolve_env_vars(payload: Any) -> Any:
    return _resolve_env_vars(payload, path="$")


def _resolve_env_vars(payload: Any, *, path: str) -> Any:
    if isinstance(payload, Mapping):
        return {
            str(key): _resolve_env_vars(value, path=f"{path}.{key}")
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [
            _resolve_env_vars(value, path=f"{path}[{index}]") for index, value in enumerate(payload)
        ]
    if isinstance(payload, str):
        return _substitute_env(payload, path=path)
    return payload


def _substitute_env(value: str, *, path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        env_value = os.environ.get(key)
        if env_value is None:
            raise ConfigError(f"Missing environment variable '{key}' at {path}")
        return env_value

    return _ENV_VAR_PATTERN.sub(replace, value)


def _format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}")
    return "; ".join(details)
