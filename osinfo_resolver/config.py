"""
Configuration management for the osinfo resolver.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Optional

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger('config')

OUTPUT_FORMATS = ('text', 'json', 'excel')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ResolverConfig:
    """Configuration for batch resolution."""
    # 'record' notes fact sets with missing data, 'error' stops at the first one
    on_insufficient_data: str = "record"


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    default_format: str = "text"
    pretty_print: bool = True
    include_metadata: bool = True
    use_colors: Optional[bool] = None  # None auto-detects


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError("Configuration file must contain a mapping")
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    validate_config(config)
    return config


def _update_config_from_dict(config: Config, config_data: Dict) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    sections = {
        'resolver': config.resolver,
        'output': config.output,
        'logging': config.logging,
    }
    for section_name, section in sections.items():
        section_data = config_data.get(section_name)
        if section_data is None:
            continue
        if not isinstance(section_data, dict):
            raise ConfigurationError(f"Section '{section_name}' must be a mapping")
        for key, value in section_data.items():
            if not hasattr(section, key):
                logger.warning(f"Ignoring unknown configuration key '{section_name}.{key}'")
                continue
            setattr(section, key, value)


def validate_config(config: Config) -> None:
    """
    Check configuration values.

    Raises:
        ConfigurationError: If any value is out of range
    """
    errors = []
    if config.resolver.on_insufficient_data not in ('record', 'error'):
        errors.append(f"resolver.on_insufficient_data must be 'record' or 'error', "
                      f"got '{config.resolver.on_insufficient_data}'")
    if config.output.default_format not in OUTPUT_FORMATS:
        errors.append(f"output.default_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                      f"got '{config.output.default_format}'")
    if not isinstance(config.logging.level, str) or config.logging.level.upper() not in LOG_LEVELS:
        errors.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}, "
                      f"got '{config.logging.level}'")
    for name in ('pretty_print', 'include_metadata'):
        if not isinstance(getattr(config.output, name), bool):
            errors.append(f"output.{name} must be a boolean")
    if config.output.use_colors is not None and not isinstance(config.output.use_colors, bool):
        errors.append("output.use_colors must be a boolean or null")

    if errors:
        raise ConfigurationError("Invalid configuration:\n" + "\n".join(errors))


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'osinfo_resolver.yaml',
        'osinfo_resolver.yml',
        os.path.expanduser('~/.osinfo_resolver.yaml'),
        os.path.expanduser('~/.osinfo_resolver.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
