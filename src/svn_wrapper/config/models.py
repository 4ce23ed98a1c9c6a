"""Configuration models."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from svn_wrapper.config.exceptions import InvalidConfigurationError

# Later files take precedence
DEFAULT_ENV_FILES = [".env", ".env.svnwrapper"]


class StatusSplitMode(str, Enum):
    """How `svn status` lines are split into columns."""

    COLLAPSE_SPACES = "collapse-spaces"
    SINGLE_SPACE = "single-space"

    @property
    def display_name(self) -> str:
        """Get human-readable display name.

        Returns:
            Display name for the split mode
        """
        return {
            StatusSplitMode.COLLAPSE_SPACES: "Runs of spaces",
            StatusSplitMode.SINGLE_SPACE: "Single space characters",
        }[self]


class SvnWrapperConfig(BaseSettings):
    """Configuration for svn-wrapper."""

    svn_executable: str = Field(
        default="svn",
        description="Name or path of the svn executable (looked up on PATH)",
    )
    commit_message: str = Field(
        default="Committed changes",
        description="Message used for every commit made through the wrapper",
    )
    status_split: StatusSplitMode = Field(
        default=StatusSplitMode.COLLAPSE_SPACES,
        description="Column splitting used when parsing `svn status` output",
    )

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILES,
        env_file_encoding="utf-8",
        env_prefix="SVN_WRAPPER_",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(
        self,
        _env_file: str | Path | None = None,
        _settings_customise_sources_was_called: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            _settings_customise_sources_was_called: Internal flag
            **kwargs: Additional configuration values

        Raises:
            InvalidConfigurationError: If the custom env file does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use the custom env file, when one was given, in place of the default dotenv files.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("svn_executable", "commit_message")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only values.

        Args:
            v: Value to check

        Returns:
            The value unchanged

        Raises:
            InvalidConfigurationError: If the value is blank
        """
        if not v.strip():
            raise InvalidConfigurationError("svn_executable and commit_message must not be empty")
        return v

    @field_validator("status_split", mode="before")
    @classmethod
    def parse_status_split(cls, v: str | StatusSplitMode) -> StatusSplitMode:
        """Parse the status split mode from string or enum.

        Args:
            v: Split mode value

        Returns:
            Parsed StatusSplitMode

        Raises:
            InvalidConfigurationError: If the value is not a known split mode
        """
        if isinstance(v, StatusSplitMode):
            return v
        if isinstance(v, str):
            try:
                return StatusSplitMode(v.lower())
            except ValueError as e:
                valid_modes = [m.value for m in StatusSplitMode]
                raise InvalidConfigurationError(f"Invalid status split mode: {v}. Valid options: {valid_modes}") from e
        raise InvalidConfigurationError(f"Invalid status split mode type: {type(v)}")

    @staticmethod
    def find_env_file() -> Path | None:
        """Find the environment file being used.

        Checks for .env.svnwrapper and .env in current directory in that order.

        Returns:
            Path to the env file if found, None otherwise
        """
        for env_file in reversed(DEFAULT_ENV_FILES):
            path = Path(env_file)
            if path.exists():
                return path.absolute()
        return None
