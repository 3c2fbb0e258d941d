"""Per-type capabilities used by the generic request processor.

A ValueType knows how to read the raw valid values and the specification of a
request for one target type, and which heuristic factories serve that type. The
processor itself is type-agnostic.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from valuefuzz.exceptions import UnknownValueTypeError
from valuefuzz.heuristics import (
    HeuristicFactory,
    FuzzingHeuristic,
    INTEGER_GENERATORS,
    INTEGER_OPERATORS,
    IntegerSpecification,
    STRING_GENERATORS,
    STRING_OPERATORS,
    StringSpecification,
)

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1


class ValueType(ABC):
    """Capability interface for one target value type."""

    name: str = ""
    generator_factory: HeuristicFactory
    operator_factory: HeuristicFactory

    @abstractmethod
    def parse_valid_value(self, raw: str) -> Optional[Any]:
        """Convert a raw valid value, or return None if it does not parse."""
        pass

    @abstractmethod
    def build_specification(self, data: Dict[str, Any]) -> Any:
        """Build the type's specification from the request's specification dict."""
        pass

    def parse_valid_values(self, raw_values: Iterable[str]) -> List[Any]:
        """Parse raw valid values, silently dropping entries that do not parse."""
        parsed = []
        for raw in raw_values:
            value = self.parse_valid_value(raw)
            if value is not None:
                parsed.append(value)
        return parsed

    def default_generators(self, specification: Any, seed: int) -> List[FuzzingHeuristic]:
        return self.generator_factory.create_all(specification, seed)

    def default_operators(self, valid_values: List[Any], specification: Any, seed: int) -> List[FuzzingHeuristic]:
        return self.operator_factory.create_all(specification, seed, valid_values)

    def describe(self) -> Dict[str, Any]:
        return {
            "type": self.name,
            "generators": self.generator_factory.describe(),
            "operators": self.operator_factory.describe(),
        }


class IntegerType(ValueType):
    """Base-10 integers of a given bit width and signedness."""

    name = "integer"
    generator_factory = INTEGER_GENERATORS
    operator_factory = INTEGER_OPERATORS

    def parse_valid_value(self, raw: str) -> Optional[int]:
        text = str(raw).strip()
        # int() accepts digit separators, plain decimal literals do not
        if "_" in text:
            return None
        try:
            value = int(text, 10)
        except ValueError:
            return None
        # Valid values are signed 64-bit integers
        if not LONG_MIN <= value <= LONG_MAX:
            return None
        return value

    def build_specification(self, data: Dict[str, Any]) -> IntegerSpecification:
        return IntegerSpecification.from_dict(data or {})


class StringType(ValueType):
    """Arbitrary text."""

    name = "string"
    generator_factory = STRING_GENERATORS
    operator_factory = STRING_OPERATORS

    def parse_valid_value(self, raw: str) -> Optional[str]:
        return None if raw is None else str(raw)

    def build_specification(self, data: Dict[str, Any]) -> StringSpecification:
        return StringSpecification.from_dict(data or {})


_VALUE_TYPES: Dict[str, ValueType] = {}


def register_value_type(value_type: ValueType) -> ValueType:
    _VALUE_TYPES[value_type.name] = value_type
    return value_type


def get_value_type(name: str) -> ValueType:
    """Look up the ValueType registered under ``name``.

    Raises:
        UnknownValueTypeError: If no such type is registered
    """
    value_type = _VALUE_TYPES.get((name or "").lower())
    if value_type is None:
        raise UnknownValueTypeError(name, known=available_value_types())
    return value_type


def available_value_types() -> List[str]:
    return sorted(_VALUE_TYPES)


INTEGER = register_value_type(IntegerType())
STRING = register_value_type(StringType())
