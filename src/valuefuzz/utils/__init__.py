"""Utility modules for the valuefuzz engine."""

from .logger import get_logger, configure_logging, Logger

format_value = Logger.format_value
format_heuristic_summary = Logger.format_heuristic_summary
format_names = Logger.format_names

__all__ = [
    'get_logger',
    'configure_logging',
    'Logger',
    'format_value',
    'format_heuristic_summary',
    'format_names',
]
