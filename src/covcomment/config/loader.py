"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (COVCOMMENT__KEY)
3. GitHub Actions inputs (INPUT_COVERAGE_OUTPUT_DIRECTORY, ...)
4. Repo config (.covcomment.yaml)
5. Built-in defaults (lowest priority)
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from covcomment.config.constants import ActionInput
from covcomment.config.models import ActionConfig
from covcomment.core.errors import ConfigError

REPO_CONFIG_FILENAME = ".covcomment.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


def read_action_inputs(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect non-empty ``INPUT_<NAME>`` values the Actions runner exports."""
    environ = os.environ if environ is None else environ
    inputs: dict[str, str] = {}
    for action_input in ActionInput:
        value = environ.get(f"INPUT_{action_input.value.upper()}", "").strip()
        if value:
            inputs[action_input.value] = value
    return inputs


class _DictSource(PydanticBaseSettingsSource):
    """Settings source that reads from a pre-loaded dict (YAML file or action inputs)."""

    def __init__(self, settings_cls: type[BaseSettings], values: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._values = values

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._values.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._values


def _make_settings_class(
    yaml_config: dict[str, Any], action_inputs: dict[str, str]
) -> type[BaseSettings]:
    """Create a Settings class bound to this invocation's file and input sources."""

    class CovCommentSettings(BaseSettings, ActionConfig):
        """Root config. Env vars: COVCOMMENT__GITHUB_TOKEN, COVCOMMENT__LOGGING__LEVEL, etc."""

        model_config = SettingsConfigDict(
            env_prefix="COVCOMMENT__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > action inputs > yaml file
            return (
                init_settings,
                env_settings,
                _DictSource(settings_cls, dict(action_inputs)),
                _DictSource(settings_cls, yaml_config),
            )

    return CovCommentSettings


def load_config(
    work_dir: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **kwargs: Any,
) -> ActionConfig:
    """Load config: defaults < .covcomment.yaml < action inputs < env vars < kwargs.

    Args:
        work_dir: Directory to look for .covcomment.yaml in.
                  Defaults to current working directory.
        environ: Environment to read action inputs from (defaults to os.environ).
        **kwargs: Override values (highest precedence). ``None`` values are ignored
                  so unset CLI options fall through to lower sources.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    work_dir = work_dir or Path.cwd()
    yaml_config = _load_yaml(work_dir / REPO_CONFIG_FILENAME)
    overrides = {key: value for key, value in kwargs.items() if value is not None}

    settings_cls = _make_settings_class(yaml_config, read_action_inputs(environ))
    try:
        return settings_cls(**overrides)  # type: ignore[return-value]
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
