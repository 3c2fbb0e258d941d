"""Configuration management module."""

from .constants import STORAGE, DEFAULTS, APP
from .config_manager import (
    EngineConfig,
    EngineConfigManager,
    build_store,
    get_config_manager,
    get_engine_config,
)
from .argument_parser import parse_arguments

__all__ = [
    'STORAGE',
    'DEFAULTS',
    'APP',
    'EngineConfig',
    'EngineConfigManager',
    'build_store',
    'get_config_manager',
    'get_engine_config',
    'parse_arguments',
]
