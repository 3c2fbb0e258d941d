"""Configuration manager for the valuefuzz engine."""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from valuefuzz.data_models import ValidationResult
from valuefuzz.exceptions import ConfigurationError
from valuefuzz.storage import (
    ProcessorStore,
    FileProcessorStore,
    SqliteProcessorStore,
    MemoryProcessorStore,
)
from valuefuzz.utils.logger import get_logger
from .constants import STORAGE, DEFAULTS

logger = get_logger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class EngineConfig:
    """Engine configuration."""
    # Storage
    storage_backend: str = STORAGE.BACKEND
    storage_directory: str = STORAGE.DIRECTORY
    storage_extension: str = STORAGE.EXTENSION
    sqlite_path: str = STORAGE.SQLITE_PATH

    # Processing
    persist_processors: bool = True
    default_max_values: int = DEFAULTS.MAX_VALUES

    # Logging
    log_level: str = DEFAULTS.LOG_LEVEL
    log_to_file: bool = False
    log_dir: str = DEFAULTS.LOG_DIR

    def validate(self) -> ValidationResult:
        """Validate the configuration."""
        result = ValidationResult(is_valid=True)

        if self.storage_backend not in STORAGE.BACKENDS:
            result.add_error(
                f"storage.backend must be one of {', '.join(STORAGE.BACKENDS)}, got {self.storage_backend!r}"
            )
        if self.storage_backend == "file" and not self.storage_extension:
            result.add_error("storage.extension cannot be empty")
        if self.default_max_values < 0:
            result.add_error("processing.default_max_values must not be negative")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            result.add_error(f"logging.level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")

        if self.storage_backend == "memory" and self.persist_processors:
            result.add_warning("memory storage does not survive a restart")

        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            'storage': {
                'backend': self.storage_backend,
                'directory': self.storage_directory,
                'extension': self.storage_extension,
                'sqlite_path': self.sqlite_path,
            },
            'processing': {
                'persist_processors': self.persist_processors,
                'default_max_values': self.default_max_values,
            },
            'logging': {
                'level': self.log_level,
                'log_to_file': self.log_to_file,
                'log_dir': self.log_dir,
            },
        }


def build_store(config: EngineConfig) -> ProcessorStore:
    """Create the ProcessorStore selected by the configuration."""
    if config.storage_backend == "sqlite":
        return SqliteProcessorStore(config.sqlite_path)
    if config.storage_backend == "memory":
        return MemoryProcessorStore()
    return FileProcessorStore(config.storage_directory, config.storage_extension)


class EngineConfigManager:
    """Manages the engine configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default.
        """
        self.config_path = Path(config_path) if config_path else Path(DEFAULTS.CONFIG_FILE)
        self._config_cache: Optional[EngineConfig] = None
        self._raw_config: Optional[Dict[str, Any]] = None

    def load_config(self, reload: bool = False) -> EngineConfig:
        """Load engine configuration from file.

        Args:
            reload: Force reload from file even if cached

        Returns:
            EngineConfig instance

        Raises:
            yaml.YAMLError: If config file is invalid YAML
            ConfigurationError: If configuration values are invalid
        """
        if self._config_cache is not None and not reload:
            return self._config_cache

        logger.debug(f"Loading engine configuration from {self.config_path}")

        if not self.config_path.exists():
            logger.warning(f"Config file not found: {self.config_path}. Using default configuration.")
            self._config_cache = EngineConfig()
            return self._config_cache

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(f"Config file {self.config_path} must contain a mapping")

        config = self._parse_config(self._raw_config)

        validation = config.validate()
        if not validation.is_valid:
            error_msg = f"Invalid configuration: {'; '.join(validation.errors)}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        for warning in validation.warnings:
            logger.warning(f"Configuration warning: {warning}")

        self._config_cache = config
        logger.debug("Engine configuration loaded successfully")
        return self._config_cache

    def _parse_config(self, config_dict: Dict[str, Any]) -> EngineConfig:
        """Parse configuration from dictionary with environment variable substitution."""
        storage_config = config_dict.get('storage') or {}
        processing_config = config_dict.get('processing') or {}
        logging_config = config_dict.get('logging') or {}

        return EngineConfig(
            storage_backend=str(storage_config.get('backend', STORAGE.BACKEND)).lower(),
            storage_directory=self._substitute_env_vars(storage_config.get('directory'), STORAGE.DIRECTORY),
            storage_extension=storage_config.get('extension', STORAGE.EXTENSION),
            sqlite_path=self._substitute_env_vars(storage_config.get('sqlite_path'), STORAGE.SQLITE_PATH),

            persist_processors=bool(processing_config.get('persist_processors', True)),
            default_max_values=int(processing_config.get('default_max_values', DEFAULTS.MAX_VALUES)),

            log_level=str(logging_config.get('level', DEFAULTS.LOG_LEVEL)).upper(),
            log_to_file=bool(logging_config.get('log_to_file', False)),
            log_dir=self._substitute_env_vars(logging_config.get('log_dir'), DEFAULTS.LOG_DIR),
        )

    def _substitute_env_vars(self, value: Optional[str], default: str) -> str:
        """Substitute ``${VAR}`` references in a configuration value.

        Args:
            value: Configuration value that may reference an environment variable
            default: Value used when ``value`` is empty or the variable is unset

        Returns:
            Value with the environment variable substituted
        """
        if not value:
            return default

        value = str(value)
        if value.startswith('${') and value.endswith('}'):
            env_var = value[2:-1]  # Remove ${ and }
            env_value = os.getenv(env_var)
            if env_value is None:
                logger.warning(f"Environment variable {env_var} not found, using {default}")
                return default
            return env_value

        return value

    def save_config(self, config: EngineConfig, config_path: Optional[str] = None) -> None:
        """Save engine configuration to file.

        Args:
            config: EngineConfig to save
            config_path: Optional path to save to. If None, uses current config path.
        """
        save_path = Path(config_path) if config_path else self.config_path

        validation = config.validate()
        if not validation.is_valid:
            error_msg = f"Cannot save invalid configuration: {'; '.join(validation.errors)}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        config_dict = config.to_dict()

        # If we have existing raw config, merge with it to preserve other sections
        if self._raw_config:
            merged_config = self._raw_config.copy()
            merged_config.update(config_dict)
            config_dict = merged_config

        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

        logger.info(f"Engine configuration saved to {save_path}")

        self._config_cache = config

    def get_config(self) -> EngineConfig:
        """Get current configuration, loading if necessary."""
        if self._config_cache is None:
            return self.load_config()
        return self._config_cache

    def update_config(self, **kwargs) -> EngineConfig:
        """Update configuration with new values.

        Args:
            **kwargs: EngineConfig fields to update

        Returns:
            Updated EngineConfig instance
        """
        current_config = self.get_config()
        unknown = set(kwargs) - set(current_config.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        values = {name: getattr(current_config, name) for name in current_config.__dataclass_fields__}
        values.update(kwargs)
        updated_config = EngineConfig(**values)

        validation = updated_config.validate()
        if not validation.is_valid:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(validation.errors)}")

        self._config_cache = updated_config
        return updated_config


# Global configuration manager instance
_config_manager: Optional[EngineConfigManager] = None


def get_config_manager(config_path: Optional[str] = None) -> EngineConfigManager:
    """Get global configuration manager instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        EngineConfigManager instance
    """
    global _config_manager
    if _config_manager is None or config_path is not None:
        _config_manager = EngineConfigManager(config_path)
    return _config_manager


def get_engine_config(config_path: Optional[str] = None) -> EngineConfig:
    """Get engine configuration.

    Args:
        config_path: Optional path to configuration file

    Returns:
        EngineConfig instance
    """
    manager = get_config_manager(config_path)
    return manager.get_config()
