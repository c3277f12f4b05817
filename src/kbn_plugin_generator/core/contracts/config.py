"""Plugin configuration contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from kbn_plugin_generator.core.naming import camel_case, snake_case, start_case

DEFAULT_DESCRIPTION = "An awesome Kibana plugin"

LATEST_VERSION_TAG = "master"
LATEST_VERSION_ALIAS = "kibana"
TARGET_VERSION_CHOICES: tuple[str, ...] = (
    LATEST_VERSION_TAG,
    "6.0.0",
    "5.2.2",
    "5.2.1",
    "5.2.0",
    "5.1.2",
    "5.1.1",
    "5.0.2",
    "5.0.1",
    "5.0.0",
)


def resolve_target_version(choice: str) -> str:
    """Map a selected version tag to the value written into the plugin."""
    if choice not in TARGET_VERSION_CHOICES:
        raise ValueError(f"unsupported target version: {choice!r}")
    if choice == LATEST_VERSION_TAG:
        return LATEST_VERSION_ALIAS
    return choice


class PluginConfig(BaseModel):
    """Final answers for one generator run.

    ``title`` and ``camelCaseName`` are derived from the normalized ``name``
    and are never set directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = DEFAULT_DESCRIPTION
    target_version: str = Field(alias="targetVersion")
    include_app: bool = Field(alias="includeApp")
    include_translations: bool = Field(alias="includeTranslations")
    include_hack_component: bool = Field(alias="includeHackComponent")
    include_api: bool = Field(alias="includeApi")

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        normalized = snake_case(value)
        if not normalized:
            raise ValueError(f"plugin name {value!r} has no usable characters")
        return normalized

    @field_validator("description")
    @classmethod
    def default_blank_description(cls, value: str) -> str:
        return value.strip() or DEFAULT_DESCRIPTION

    @field_validator("target_version")
    @classmethod
    def validate_target_version(cls, value: str) -> str:
        if value == LATEST_VERSION_ALIAS or (value in TARGET_VERSION_CHOICES and value != LATEST_VERSION_TAG):
            return value
        raise ValueError(f"target version must be one of the supported tags or {LATEST_VERSION_ALIAS!r}")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        return start_case(self.name)

    @computed_field(alias="camelCaseName")  # type: ignore[prop-decorator]
    @property
    def camel_case_name(self) -> str:
        return camel_case(self.name)

    def template_variables(self, **extra: Any) -> dict[str, Any]:
        """Flat variable mapping handed to the template renderer."""
        variables = self.model_dump(by_alias=True)
        variables.update(extra)
        return variables
