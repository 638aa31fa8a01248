"""Configuration management for Markdown Header Anchors."""

import os
import yaml
import json
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict
from dotenv import load_dotenv


COPY_MODES = ["attribute", "inline"]


@dataclass
class ProcessorConfig:
    """Header processor configuration."""
    fallback_slug: str = "header"
    warn_on_explicit_id_collision: bool = True


@dataclass
class MarkupConfig:
    """Anchored heading markup configuration."""
    copy_mode: str = "attribute"  # attribute, inline
    copy_handler: str = "copyHeaderLink"
    header_class: str = "doc-header"
    text_class: str = "header-text"
    button_class: str = "header-link-btn"
    icon_class: str = "pi pi-link"
    button_title: str = "Copy link to this section"
    escape_text: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Configuration:
    """Main configuration class."""
    processor: ProcessorConfig = None
    markup: MarkupConfig = None
    logging: LoggingConfig = None

    def __post_init__(self):
        if self.processor is None:
            self.processor = ProcessorConfig()
        if self.markup is None:
            self.markup = MarkupConfig()
        if self.logging is None:
            self.logging = LoggingConfig()


class ConfigurationManager:
    """Manages configuration loading, validation, and persistence."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default.
        """
        self.config_path = config_path or "config/default.yaml"
        self.config = Configuration()

        load_dotenv()

        if os.path.exists(self.config_path):
            self.load_from_file(self.config_path)
        elif config_path is not None:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self._load_from_environment()

    def load_from_file(self, path: str) -> None:
        """Load configuration from YAML or JSON file.

        Args:
            path: Path to configuration file.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            ValueError: If configuration file is invalid.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.endswith('.yaml') or path.endswith('.yml'):
                    data = yaml.safe_load(f)
                elif path.endswith('.json'):
                    data = json.load(f)
                else:
                    raise ValueError(f"Unsupported configuration file format: {path}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid configuration file format: {e}")

        try:
            self._update_config_from_dict(data or {})
        except TypeError as e:
            raise ValueError(f"Invalid configuration section in {path}: {e}")
        self.config_path = path

    def save_to_file(self, path: str) -> None:
        """Save configuration to YAML or JSON file.

        Args:
            path: Path where to save configuration.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        config_dict = asdict(self.config)

        with open(path, 'w', encoding='utf-8') as f:
            if path.endswith('.yaml') or path.endswith('.yml'):
                yaml.dump(config_dict, f, default_flow_style=False, indent=2)
            elif path.endswith('.json'):
                json.dump(config_dict, f, indent=2)
            else:
                raise ValueError(f"Unsupported configuration file format: {path}")

    def _load_from_environment(self) -> None:
        """Load configuration from environment variables."""
        if os.getenv('HEADER_ANCHORS_LOG_LEVEL'):
            self.config.logging.level = os.getenv('HEADER_ANCHORS_LOG_LEVEL')

        if os.getenv('HEADER_ANCHORS_COPY_MODE'):
            self.config.markup.copy_mode = os.getenv('HEADER_ANCHORS_COPY_MODE')
        if os.getenv('HEADER_ANCHORS_COPY_HANDLER'):
            self.config.markup.copy_handler = os.getenv('HEADER_ANCHORS_COPY_HANDLER')

        if os.getenv('HEADER_ANCHORS_FALLBACK_SLUG'):
            self.config.processor.fallback_slug = os.getenv('HEADER_ANCHORS_FALLBACK_SLUG')

    def _update_config_from_dict(self, data: Dict[str, Any]) -> None:
        """Update configuration from dictionary."""
        if 'processor' in data:
            self.config.processor = ProcessorConfig(**data['processor'])

        if 'markup' in data:
            self.config.markup = MarkupConfig(**data['markup'])

        if 'logging' in data:
            self.config.logging = LoggingConfig(**data['logging'])

    def validate_config(self) -> bool:
        """Validate configuration settings.

        Returns:
            True if configuration is valid.

        Raises:
            ValueError: If configuration is invalid with detailed error message.
        """
        errors = []

        if not self.config.processor.fallback_slug:
            errors.append("Fallback slug must not be empty")
        elif self.config.processor.fallback_slug != self.config.processor.fallback_slug.strip():
            errors.append("Fallback slug must not contain surrounding whitespace")

        if self.config.markup.copy_mode not in COPY_MODES:
            errors.append(f"Invalid copy mode. Must be one of: {COPY_MODES}")

        if not self.config.markup.copy_handler.isidentifier():
            errors.append("Copy handler must be a valid identifier")

        if self.config.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.config.logging.level}")

        if errors:
            raise ValueError("Configuration validation failed:\n" + "\n".join(f"- {error}" for error in errors))

        return True

    def get_config(self) -> Configuration:
        """Get current configuration."""
        return self.config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values.

        Args:
            **kwargs: Configuration sections to replace.
        """
        for key, value in kwargs.items():
            if hasattr(self.config, key):
                setattr(self.config, key, value)

    def get_summary(self) -> str:
        """Get configuration summary as string."""
        summary = []
        summary.append("Markdown Header Anchors Configuration")
        summary.append("=" * 40)
        summary.append(f"Fallback Slug: {self.config.processor.fallback_slug}")
        summary.append(f"Copy Mode: {self.config.markup.copy_mode}")
        summary.append(f"Copy Handler: {self.config.markup.copy_handler}")
        summary.append(f"Escape Text: {'Enabled' if self.config.markup.escape_text else 'Disabled'}")
        summary.append(f"Log Level: {self.config.logging.level}")

        return "\n".join(summary)
