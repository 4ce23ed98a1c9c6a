"""Configuration management for svn-wrapper."""

from svn_wrapper.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
)
from svn_wrapper.config.models import StatusSplitMode, SvnWrapperConfig

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "StatusSplitMode",
    "SvnWrapperConfig",
]
