"""Logging utility for the valuefuzz engine."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Any, Iterable


ROOT_LOGGER_NAME = "valuefuzz"


class Logger:
    """Centralized logging utility.

    All module loggers live below the ``valuefuzz`` logger and propagate to it,
    so handlers are attached exactly once, on the package logger.
    """

    _configured: bool = False

    @classmethod
    def configure(cls, level: str = "INFO",
                  log_to_file: bool = False,
                  log_dir: str = "logs") -> logging.Logger:
        """Configure the package logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_dir: Directory for log files

        Returns:
            The configured package logger
        """
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_path / f"valuefuzz_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file}")

        logger.propagate = False
        cls._configured = True
        return logger

    @classmethod
    def get_logger(cls, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
        """Get a logger below the package logger, configuring defaults on first use."""
        if not cls._configured:
            cls.configure()
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @classmethod
    def format_value(cls, value: Any, max_length: int = 60) -> str:
        """Format a fuzzed value for logging."""
        if value is None:
            return "<none>"
        raw = getattr(value, "value", value)
        source = getattr(value, "source_name", None)

        text = repr(raw)
        if len(text) > max_length:
            text = text[:max_length] + f"... ({len(text)} chars)"

        if source:
            return f"{text} | src={source}"
        return text

    @classmethod
    def format_heuristic_summary(cls, heuristic: Any) -> str:
        """Format a heuristic summary for logging."""
        if heuristic is None:
            return "<no heuristic>"
        name = getattr(heuristic, "name", "unknown")
        kind = getattr(heuristic, "kind", None)
        kind_label = getattr(kind, "value", kind) or "unknown"
        parts = [f"{name} ({kind_label})"]

        parameters = getattr(heuristic, "parameters", None)
        if parameters:
            parts.append("params=" + ",".join(f"{k}={v}" for k, v in sorted(parameters.items())))
        valid_values = getattr(heuristic, "valid_values", None)
        if valid_values:
            parts.append(f"valid_values={len(valid_values)}")
        consumed = getattr(heuristic, "consumed", None)
        if consumed:
            parts.append(f"consumed={consumed}")

        return " | ".join(parts)

    @classmethod
    def format_names(cls, names: Iterable[str]) -> str:
        """Format a list of heuristic names for logging."""
        names = list(names)
        return ", ".join(names) if names else "<none>"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Convenience function to get logger.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Logger instance
    """
    return Logger.get_logger(name)


def configure_logging(level: str = "INFO", log_to_file: bool = False, log_dir: str = "logs") -> logging.Logger:
    """Convenience function to (re)configure package logging."""
    return Logger.configure(level=level, log_to_file=log_to_file, log_dir=log_dir)
