"""Data models for requests, responses and fuzzed values."""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


# Constants for validation
class ValidationConstants:
    """Constants used in request validation."""
    MIN_SEED = -(2 ** 63)
    MAX_SEED = 2 ** 64 - 1
    LARGE_MAX_VALUES = 1_000_000
    FALSE_WORDS = ("false", "no", "off", "0", "")


def parse_flag(value: Any) -> bool:
    """Read a boolean that may arrive as a string from YAML or JSON."""
    if isinstance(value, str):
        return value.strip().lower() not in ValidationConstants.FALSE_WORDS
    return bool(value)


@dataclass
class ValidationResult:
    """Result of validation with errors and warnings."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error to the validation result."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning to the validation result."""
        self.warnings.append(warning)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class ValidationMixin:
    """Mixin class providing common validation utilities."""

    @staticmethod
    def _validate_non_empty_string(value: Optional[str], field_name: str) -> List[str]:
        """Validate that a string field is not empty."""
        errors = []
        if not value or not value.strip():
            errors.append(f"{field_name} cannot be empty")
        return errors

    @staticmethod
    def _validate_non_negative(value: int, field_name: str) -> List[str]:
        errors = []
        if value < 0:
            errors.append(f"{field_name} must not be negative")
        return errors


@dataclass(frozen=True)
class FuzzedValue:
    """A produced test value together with the heuristic that produced it."""
    value: Any
    source_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "source": self.source_name}


@dataclass
class HeuristicRequest:
    """A generator or operator named in a request."""
    name: str
    parameters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'HeuristicRequest':
        if isinstance(data, str):
            return cls(name=data)
        return cls(name=str(data.get('name', '')), parameters=dict(data.get('parameters') or {}))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "parameters": dict(self.parameters)}


class GeneratorRequest(HeuristicRequest):
    """A generator named in a request."""


class OperatorRequest(HeuristicRequest):
    """An operator named in a request."""


@dataclass
class ValidValuesSection:
    """Known valid values and the operators to apply to them."""
    values: List[str] = field(default_factory=list)
    operators: List[OperatorRequest] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidValuesSection':
        return cls(
            values=[str(v) for v in data.get('values') or []],
            operators=[OperatorRequest.from_dict(o) for o in data.get('operators') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": list(self.values),
            "operators": [o.to_dict() for o in self.operators],
        }


@dataclass
class Request(ValidationMixin):
    """A request for fuzzed values of one target type.

    Attributes:
        name: Caller-chosen name, echoed in the response
        type: Target value type key ('integer', 'string')
        max_values: Maximum number of values to produce over the request's lifetime
        seed: Seed for all heuristics; generated by the processor when None
        id: Identifier of the processor; None for a new request
        generators: Generators to use; empty means all unless no_generators is set
        valid_values: Known valid values and operators to mutate them
        no_generators: Suppress every generator
        specification: Type-specific context, e.g. {'bits': 16, 'signed': False}
    """
    name: str
    type: str = "integer"
    max_values: int = 100
    seed: Optional[int] = None
    id: Optional[str] = None
    generators: List[GeneratorRequest] = field(default_factory=list)
    valid_values: Optional[ValidValuesSection] = None
    no_generators: bool = False
    specification: Dict[str, Any] = field(default_factory=dict)

    @property
    def requested_operators(self) -> List[OperatorRequest]:
        if self.valid_values is None:
            return []
        return self.valid_values.operators

    def validate(self) -> ValidationResult:
        """Validate the request."""
        result = ValidationResult(is_valid=True)

        for error in self._validate_non_empty_string(self.name, "name"):
            result.add_error(error)
        for error in self._validate_non_negative(self.max_values, "max_values"):
            result.add_error(error)

        if self.seed is not None and not (ValidationConstants.MIN_SEED <= self.seed <= ValidationConstants.MAX_SEED):
            result.add_error("seed must fit in 64 bits")

        if self.max_values == 0:
            result.add_warning("max_values is 0, no values will be generated")
        elif self.max_values > ValidationConstants.LARGE_MAX_VALUES:
            result.add_warning(f"max_values {self.max_values} is very large")

        if self.no_generators and self.generators:
            result.add_warning("no_generators is set, requested generators are ignored")

        if self.valid_values is not None and not self.valid_values.values:
            result.add_warning("valid values section contains no values")

        names = [g.name.lower() for g in self.generators]
        for name in sorted({n for n in names if names.count(n) > 1}):
            result.add_warning(f"generator {name} is requested more than once")

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_max_values: int = 100) -> 'Request':
        """Build a request from its dictionary form (parsed YAML or JSON)."""
        valid_values = data.get('valid_values')
        seed = data.get('seed')
        return cls(
            name=str(data.get('name', '')),
            type=str(data.get('type', 'integer')).lower(),
            max_values=int(data.get('max_values', default_max_values)),
            seed=int(seed) if seed is not None else None,
            id=data.get('id'),
            generators=[GeneratorRequest.from_dict(g) for g in data.get('generators') or []],
            valid_values=ValidValuesSection.from_dict(valid_values) if valid_values is not None else None,
            no_generators=parse_flag(data.get('no_generators', False)),
            specification=dict(data.get('specification') or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "max_values": self.max_values,
            "seed": self.seed,
            "id": self.id,
            "generators": [g.to_dict() for g in self.generators],
            "valid_values": self.valid_values.to_dict() if self.valid_values is not None else None,
            "no_generators": self.no_generators,
            "specification": dict(self.specification),
        }


@dataclass(frozen=True)
class IllegalHeuristic:
    """A requested heuristic that could not be used."""
    name: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "reason": self.reason}


@dataclass
class WarningsSection:
    """Non-fatal conditions reported alongside a response."""
    illegal_generators: List[IllegalHeuristic] = field(default_factory=list)
    illegal_operators: List[IllegalHeuristic] = field(default_factory=list)
    request_warnings: List[str] = field(default_factory=list)
    request_errors: List[str] = field(default_factory=list)

    def add_illegal_generator(self, name: str, reason: str = "unknown generator") -> None:
        self.illegal_generators.append(IllegalHeuristic(name, reason))

    def add_illegal_operator(self, name: str, reason: str = "unknown operator") -> None:
        self.illegal_operators.append(IllegalHeuristic(name, reason))

    def add_validation(self, validation: ValidationResult) -> None:
        self.request_warnings.extend(validation.warnings)
        self.request_errors.extend(validation.errors)

    def copy(self) -> 'WarningsSection':
        return WarningsSection(
            illegal_generators=list(self.illegal_generators),
            illegal_operators=list(self.illegal_operators),
            request_warnings=list(self.request_warnings),
            request_errors=list(self.request_errors),
        )

    def is_empty(self) -> bool:
        return not (self.illegal_generators or self.illegal_operators
                    or self.request_warnings or self.request_errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "illegal_generators": [g.to_dict() for g in self.illegal_generators],
            "illegal_operators": [o.to_dict() for o in self.illegal_operators],
            "request_warnings": list(self.request_warnings),
            "request_errors": list(self.request_errors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WarningsSection':
        return cls(
            illegal_generators=[IllegalHeuristic(g['name'], g['reason']) for g in data.get('illegal_generators', [])],
            illegal_operators=[IllegalHeuristic(o['name'], o['reason']) for o in data.get('illegal_operators', [])],
            request_warnings=list(data.get('request_warnings', [])),
            request_errors=list(data.get('request_errors', [])),
        )


@dataclass
class Response:
    """Response to a request: header, warnings and produced values."""
    name: str
    id: str
    seed: int
    type: str = "integer"
    warnings: WarningsSection = field(default_factory=WarningsSection)
    values: List[FuzzedValue] = field(default_factory=list)

    @property
    def raw_values(self) -> List[Any]:
        return [v.value for v in self.values]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "seed": self.seed,
            "type": self.type,
            "warnings": self.warnings.to_dict(),
            "values": [v.to_dict() for v in self.values],
        }
