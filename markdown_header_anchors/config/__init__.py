"""Configuration loading and validation."""

from .configuration_manager import (
    ConfigurationManager,
    Configuration,
    ProcessorConfig,
    MarkupConfig,
    LoggingConfig
)

__all__ = [
    "ConfigurationManager",
    "Configuration",
    "ProcessorConfig",
    "MarkupConfig",
    "LoggingConfig"
]
