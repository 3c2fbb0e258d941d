"""Constants grouped by concern."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageDefaults:
    """Default persistence settings."""
    BACKEND: str = "file"
    DIRECTORY: str = "processors"
    EXTENSION: str = ".processor.json"
    SQLITE_PATH: str = "data/valuefuzz.db"
    BACKENDS: tuple = ("file", "sqlite", "memory")


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    CONFIG_FILE: str = "config/config.yaml"
    MAX_VALUES: int = 100
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    JSON_INDENT: int = 2


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata and system constants."""
    VERSION: str = "valuefuzz 1.0.0"
    EXIT_SUCCESS: int = 0
    EXIT_FAILURE: int = 1
    RECORD_FORMAT: int = 1


# Singleton instances for easy access
STORAGE = StorageDefaults()
DEFAULTS = ApplicationDefaults()
APP = ApplicationMetadata()
