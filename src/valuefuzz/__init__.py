"""valuefuzz - deterministic, resumable fuzz value generation."""

from .data_models import (
    FuzzedValue,
    Request,
    GeneratorRequest,
    OperatorRequest,
    ValidValuesSection,
    Response,
    WarningsSection,
    IllegalHeuristic,
)
from .exceptions import (
    FuzzingError,
    UnknownHeuristicError,
    UnknownValueTypeError,
    InvalidContinuationError,
    DeleteFailedError,
    LoadFailedError,
    PersistFailedError,
    ConfigurationError,
)
from .processor import RequestProcessor, ProcessorState
from .dispatcher import RequestDispatcher
from .value_types import ValueType, get_value_type, available_value_types

__version__ = "1.0.0"

__all__ = [
    'FuzzedValue',
    'Request',
    'GeneratorRequest',
    'OperatorRequest',
    'ValidValuesSection',
    'Response',
    'WarningsSection',
    'IllegalHeuristic',
    'FuzzingError',
    'UnknownHeuristicError',
    'UnknownValueTypeError',
    'InvalidContinuationError',
    'DeleteFailedError',
    'LoadFailedError',
    'PersistFailedError',
    'ConfigurationError',
    'RequestProcessor',
    'ProcessorState',
    'RequestDispatcher',
    'ValueType',
    'get_value_type',
    'available_value_types',
]
