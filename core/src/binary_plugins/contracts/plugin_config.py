from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ArtifactConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    version: str = Field(min_length=1)
    classifier: str | None = None
    extension: str | None = None


class PluginConfig(BaseModel):
    """One plugin entry: either an artifact or an executable name, never both."""

    model_config = ConfigDict(extra="forbid")

    # Coordinate strings are parsed into ArtifactConfig by the loader.
    artifact: ArtifactConfig | str | None = None
    executable_name: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _validate_exactly_one(self) -> PluginConfig:
        if (self.artifact is None) == (self.executable_name is None):
            raise ValueError("exactly one of 'artifact' or 'executable_name' must be set")
        return self


class PluginsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plugins: list[PluginConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce_plugins_list(cls, value: Any) -> Any:
        if isinstance(value, dict) and value.get("plugins") is None:
            return {**value, "plugins": []}
        return value
