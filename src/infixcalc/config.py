from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from infixcalc.exceptions import ConfigError
from infixcalc.logging import get_logger

__all__ = [
    "CalculatorConfig",
    "ReplConfig",
    "OutputConfig",
    "load_config",
    "get_user_config_path",
    "PROJECT_CONFIG_NAME",
]

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "infixcalc.yaml"


class ReplConfig(BaseModel):
    """Settings for the interactive loop.

    Attributes:
        prompt: Text shown before each input line.
        quit_command: Input line that ends the session.
        show_banner: Print the supported syntax when the session starts.
    """

    prompt: str = "> "
    quit_command: str = "quit"
    show_banner: bool = True

    @field_validator("quit_command")
    @classmethod
    def check_quit_command(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("quit_command must not be blank")
        return value


class OutputConfig(BaseModel):
    """Settings for result display.

    Attributes:
        precision: Significant digits for results; None prints the shortest
            representation that round-trips.
        format: Default output format of the eval command.
    """

    precision: int | None = Field(default=None, ge=1, le=17)
    format: Literal["text", "json"] = "text"


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads values from a YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                ) from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class CalculatorConfig(BaseSettings):
    """Root configuration object containing all infixcalc settings."""

    model_config = SettingsConfigDict(
        env_prefix="INFIXCALC_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    repl: ReplConfig = Field(default_factory=ReplConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Environment variables (INFIXCALC_*)
        2. Init arguments (load_config passes the project YAML here)
        3. User YAML config (~/.config/infixcalc/config.yaml)
        4. Model defaults

        Note: pydantic-settings gives earlier sources higher priority.
        """
        return (
            env_settings,
            init_settings,
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/infixcalc/config.yaml
    """
    return Path.home() / ".config" / "infixcalc" / "config.yaml"


def load_config(config_path: Path | None = None) -> CalculatorConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to the project config file. Defaults to
            ./infixcalc.yaml, which may be absent; an explicit path must exist.

    Returns:
        CalculatorConfig instance with merged configuration.

    Raises:
        ConfigError: If a config file is missing, unreadable or invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_NAME
        if not config_path.exists():
            logger.info("no_project_config", path=str(config_path))
    elif not config_path.exists():
        raise ConfigError(
            message=f"Config file not found: {config_path}",
            value=str(config_path),
        )

    project_settings = YamlConfigSource(CalculatorConfig, config_path)()
    try:
        return CalculatorConfig(**project_settings)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
