"""Typed configuration models for Planner runtime settings."""

from __future__ import annotations

import os
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "planner" / "planner.yaml"

# Unprefixed variables set by the deployment environment.
DEPLOYMENT_ENV_ALIASES: dict[str, tuple[str, str]] = {
    "API_KEY": ("auth", "api_key"),
    "SUPABASE_INSTANCE_URL": ("supabase", "instance_url"),
    "SUPABASE_INSTANCE_ANON_KEY": ("supabase", "anon_key"),
    "SUPABASE_SERVICE_ROLE_KEY": ("supabase", "service_role_key"),
}

_CONFIG_PATH: ContextVar[Path] = ContextVar(
    "planner_config_path", default=DEFAULT_CONFIG_PATH
)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "planner"
    environment: str = "dev"


class HttpSettings(BaseModel):
    """Inbound HTTP listener settings."""

    host: str = "127.0.0.1"
    port: int = Field(default=3000, gt=0, le=65535)
    title: str = "Planner API"


class AuthSettings(BaseModel):
    """Shared-secret API key gate settings."""

    api_key: str = ""
    header_name: str = "apikey"

    def permissible_keys(self) -> frozenset[str]:
        """Return the set of accepted API keys; blank keys are never accepted."""
        key = self.api_key.strip()
        return frozenset({key}) if key else frozenset()


class SupabaseSettings(BaseModel):
    """Supabase project URL, keys and request timeout for the store client."""

    instance_url: str = ""
    anon_key: str = ""
    service_role_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0)

    @property
    def access_key(self) -> str:
        """Return the key used for store calls, preferring the service role."""
        return self.service_role_key or self.anon_key


class ComponentNamespaceSettings(BaseModel):
    """Namespace map for grouped component settings under ``components.<kind>``."""

    model_config = ConfigDict(extra="allow")


class ComponentsSettings(BaseModel):
    """Typed ``components`` subtree holding component-local settings."""

    model_config = ConfigDict(extra="allow")

    service: ComponentNamespaceSettings = Field(
        default_factory=ComponentNamespaceSettings
    )
    substrate: ComponentNamespaceSettings = Field(
        default_factory=ComponentNamespaceSettings
    )


class DeploymentEnvSettingsSource(PydanticBaseSettingsSource):
    """Map well-known unprefixed deployment env vars onto nested settings."""

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        del field
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        output: dict[str, Any] = {}
        for env_name, (section, key) in DEPLOYMENT_ENV_ALIASES.items():
            value = os.environ.get(env_name, "").strip()
            if value == "":
                continue
            output.setdefault(section, {})[key] = value
        return output


class PlannerSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    supabase: SupabaseSettings = Field(default_factory=SupabaseSettings)
    components: ComponentsSettings = Field(default_factory=ComponentsSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > prefixed env > deployment env > yaml."""
        return (
            init_settings,
            env_settings,
            DeploymentEnvSettingsSource(settings_cls),
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=_CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )


TComponentSettings = TypeVar("TComponentSettings", bound=BaseModel)


def resolve_component_settings(
    *,
    settings: PlannerSettings,
    component_id: str,
    model: type[TComponentSettings],
) -> TComponentSettings:
    """Resolve one component settings object from grouped ``components`` keys.

    ``service_schedule`` resolves ``components.service.schedule``.
    """
    raw_components = settings.components.model_dump(mode="python")
    kind, separator, name = component_id.partition("_")
    if not separator or kind not in {"service", "substrate"}:
        raise ValueError(f"component id must be '<service|substrate>_<name>': {component_id}")

    namespace = raw_components.get(kind, {})
    if not isinstance(namespace, dict):
        raise TypeError(f"components.{kind} must resolve to an object mapping")
    resolved = namespace.get(name, {})
    if not isinstance(resolved, dict):
        raise TypeError(f"components.{kind}.{name} must resolve to an object mapping")
    return model.model_validate(resolved)
