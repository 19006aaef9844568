import os
import re
from pathlib import Path
from typing import Any, Type

import yaml
from humps import decamelize
from pydantic import BaseSettings
from pydantic.env_settings import EnvSettingsSource, InitSettingsSource
from pydantic.main import BaseModel

PROVIDER_WRAPPER_PATTERN = r"^{{ from (\w+) (.+) }}$"


def load_from_config_provider(provider_type: str, value: str) -> str:
    if provider_type != "env":
        raise ValueError(f"Invalid provider type: {provider_type}")
    result = os.environ.get(value)
    if result is None:
        raise ValueError(f"Environment variable not found: {value}")
    return result


def _nested_model(model: Type[BaseModel] | None, key: str) -> Type[BaseModel] | None:
    field = model.__fields__.get(key) if model else None
    if field and isinstance(field.type_, type) and issubclass(field.type_, BaseModel):
        return field.type_
    return None


def merge_yaml_config(
    model: Type[BaseModel] | None,
    config: dict[str, Any],
    existing_data: dict[str, Any],
) -> dict[str, Any]:
    """
    Merge the yaml config under the values other sources already set.

    camelCase keys are decamelized down to the model's nested settings, and
    `{{ from env NAME }}` references are resolved. A reference that cannot be
    resolved is left out so the field falls back to its default or fails validation.
    """
    for key, value in config.items():
        key = decamelize(key) if model else key
        if isinstance(value, dict):
            existing_data[key] = merge_yaml_config(
                _nested_model(model, key), value, existing_data.get(key, {})
            )
            continue
        if key in existing_data:
            continue
        if not isinstance(value, str) or not (
            match := re.match(PROVIDER_WRAPPER_PATTERN, value)
        ):
            existing_data[key] = value
            continue
        try:
            existing_data[key] = load_from_config_provider(*match.groups())
        except ValueError:
            pass
    return existing_data


def yaml_config_settings_source(
    settings: "BaseProviderSettings", existing_data: dict[str, Any]
) -> dict[str, Any]:
    path = Path(settings.__config__.yaml_file)  # type: ignore[attr-defined]
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text("utf-8")) or {}
    return merge_yaml_config(type(settings), data, existing_data)


class BaseProviderSettings(BaseSettings):
    def get_sensitive_fields_data(self) -> set[str]:
        return _get_sensitive_information(self)

    class Config:
        yaml_file = "./config.yaml"
        env_prefix = "PORT_PROVIDER__"
        env_nested_delimiter = "__"
        env_file = ".env"
        env_file_encoding = "utf-8"

        @classmethod
        def customise_sources(  # type: ignore
            cls,
            init_settings: InitSettingsSource,
            env_settings: EnvSettingsSource,
            *_,
            **__,
        ):
            return (
                init_settings,
                env_settings,
                lambda s: yaml_config_settings_source(
                    s, {**env_settings(s), **init_settings(s)}
                ),
            )


class BaseProviderModel(BaseModel):
    def get_sensitive_fields_data(self) -> set[str]:
        return _get_sensitive_information(self)


def _get_sensitive_information(model: BaseModel) -> set[str]:
    sensitive_set = set()
    for field_name, field in model.__fields__.items():
        value = getattr(model, field_name)
        if field.field_info.extra.get("sensitive", False):
            sensitive_set.add(str(value))
        if isinstance(value, BaseProviderModel):
            sensitive_set.update(value.get_sensitive_fields_data())
    return sensitive_set
