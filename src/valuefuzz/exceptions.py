"""Exception hierarchy for request processing and persistence."""

from typing import Optional, List


class FuzzingError(Exception):
    """Base class for all valuefuzz errors."""

    error_code = "fuzzing_error"

    def __init__(self, message: str, suggestions: Optional[List[str]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
        if error_code is not None:
            self.error_code = error_code


class UnknownHeuristicError(FuzzingError):
    """A named generator or operator is not registered for the target type."""

    error_code = "unknown_heuristic"

    def __init__(self, name: str, kind: str = "heuristic"):
        super().__init__(f"Unknown {kind}: {name}")
        self.name = name
        self.kind = kind


class UnknownValueTypeError(FuzzingError, ValueError):
    """A request names a target type without a registered ValueType."""

    error_code = "unknown_value_type"

    def __init__(self, type_name: str, known: Optional[List[str]] = None):
        known = known or []
        super().__init__(
            f"Unknown value type: {type_name!r}",
            suggestions=[f"use one of: {', '.join(known)}"] if known else None,
        )
        self.type_name = type_name


class InvalidContinuationError(FuzzingError, ValueError):
    """A continued request does not refer to the stored processor."""

    error_code = "invalid_continuation"


class DeleteFailedError(FuzzingError):
    """The persisted processor record is absent or could not be removed."""

    error_code = "delete_failed"

    def __init__(self, processor_id: str, reason: str):
        super().__init__(f"Could not delete processor {processor_id}: {reason}")
        self.processor_id = processor_id
        self.reason = reason


class LoadFailedError(FuzzingError):
    """The persisted processor record is absent or unreadable."""

    error_code = "load_failed"

    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"

    def __init__(self, processor_id: str, cause: str, detail: str = ""):
        message = f"Could not load processor {processor_id}: {cause}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.processor_id = processor_id
        self.cause = cause
        self.detail = detail

    @property
    def not_found(self) -> bool:
        return self.cause == self.NOT_FOUND

    @property
    def corrupt(self) -> bool:
        return self.cause == self.CORRUPT


class PersistFailedError(FuzzingError):
    """The processor state could not be written to the store."""

    error_code = "persist_failed"


class ConfigurationError(FuzzingError):
    """The engine configuration is invalid."""

    error_code = "configuration_error"
