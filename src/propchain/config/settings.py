"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with PROPCHAIN_ prefix
3. User config file: ~/.config/propchain/config.yaml (or PROPCHAIN_CONFIG_DIR)

The chain functions themselves take plain arguments; Settings only supplies
the defaults the CLI passes to them.
"""

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import propchain.config.sources as sources
import propchain.constants as constants


class Settings(_pydantic_settings.BaseSettings):
    """
    propchain configuration settings.

    All settings can be overridden via environment variables with the
    PROPCHAIN_ prefix, e.g. PROPCHAIN_DELIMITER=/ or PROPCHAIN_LOG_LEVEL=DEBUG.

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (PROPCHAIN_*)
    3. User config (~/.config/propchain/config.yaml)
    4. Field defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        extra="ignore",
    )

    delimiter: str = _pydantic.Field(default=constants.DEFAULT_DELIMITER)
    """Separator between segments of hierarchical property names."""

    log_level: str = _pydantic.Field(default=constants.DEFAULT_LOG_LEVEL)
    """Root logger level used by the CLI."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) - highest
        2. env_settings (PROPCHAIN_* env vars)
        3. yaml_settings (user config.yaml)
        4. (defaults via Field definitions) - lowest
        """
        return (
            init_settings,
            env_settings,
            sources.YamlSettingsSource(settings_cls),
        )

    @classmethod
    def construct_without_user_config(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from arguments and environment variables only.

        Useful for test isolation: the user's config.yaml cannot leak in.
        """
        return _EnvOnlySettings(**kwargs)

    @_pydantic.field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value

    @_pydantic.field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(_logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def config_dir(self) -> _pathlib.Path:
        """User config directory."""
        return sources.get_user_config_dir()

    @property
    def config_path(self) -> _pathlib.Path:
        """User config file path."""
        return sources.get_user_config_path()

    def to_dict(self) -> dict[str, _typing.Any]:
        """Settings values as a plain dict."""
        return self.model_dump()


class _EnvOnlySettings(Settings):
    """Settings variant that skips the user config file."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],  # noqa: ARG003
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings)
