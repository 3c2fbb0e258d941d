"""Base classes for fuzzing heuristics.

A heuristic produces a lazy, finite sequence of FuzzedValue. There are two kinds:

- generators produce values from their own strategy alone,
- operators derive values from a snapshot of known valid values.

Every heuristic draws its randomness from a private ``random.Random`` seeded from
the request seed and its own name, so that re-running a heuristic with the same
inputs reproduces the same sequence. Sequences are not restartable: a value handed
out by ``next()`` is never handed out again by the same instance.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple

from valuefuzz.data_models import FuzzedValue
from .seeding import random_for


class HeuristicKind(Enum):
    """Kinds of heuristics."""
    GENERATOR = "generator"
    OPERATOR = "operator"


class FuzzingHeuristic(ABC):
    """Abstract base class for heuristics."""

    KIND: HeuristicKind
    NAME: str = ""
    DESCRIPTION: str = ""
    # Accepted parameters and their defaults
    DEFAULT_PARAMETERS: Dict[str, Any] = {}

    def __init__(
        self,
        specification: Any,
        seed: int,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the heuristic.

        Args:
            specification: Type-specific context (bit width, maximum length, ...)
            seed: Request seed shared by all heuristics of a request
            parameters: Heuristic parameters from the request
        """
        self.name = self.NAME
        self.kind = self.KIND
        self.seed = seed
        self.specification = specification
        self.parameters: Dict[str, Any] = dict(parameters or {})
        self.random = random_for(seed, self.kind.value, self.name)
        self.consumed = 0
        self.exhausted = False
        self._iterator: Optional[Iterator[Any]] = None

    @abstractmethod
    def _generate(self) -> Iterator[Any]:
        """Yield the raw values of this heuristic.

        Must be finite and must only use ``self.random`` for randomness.
        """
        pass

    def parameter(self, key: str, convert=int) -> Any:
        """Return a parameter converted with ``convert``, falling back to its default."""
        default = self.DEFAULT_PARAMETERS.get(key)
        value = self.parameters.get(key)
        if value is None:
            return default
        try:
            return convert(value)
        except (TypeError, ValueError):
            return default

    def __iter__(self) -> 'FuzzingHeuristic':
        return self

    def __next__(self) -> FuzzedValue:
        if self.exhausted:
            raise StopIteration
        if self._iterator is None:
            self._iterator = self._generate()
        try:
            value = next(self._iterator)
        except StopIteration:
            self.exhausted = True
            raise
        self.consumed += 1
        return FuzzedValue(value=value, source_name=self.name)

    def skip(self, count: int) -> int:
        """Advance past ``count`` values without returning them.

        Returns:
            Number of values actually skipped
        """
        skipped = 0
        for _ in range(count):
            try:
                next(self)
            except StopIteration:
                break
            skipped += 1
        return skipped

    def to_record(self) -> Dict[str, Any]:
        """Describe this heuristic and its position for persistence."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "parameters": dict(self.parameters),
            "consumed": self.consumed,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name} seed={self.seed} consumed={self.consumed}>"


class Generator(FuzzingHeuristic):
    """A heuristic producing values from nothing but its own strategy."""

    KIND = HeuristicKind.GENERATOR


class Operator(FuzzingHeuristic):
    """A heuristic deriving values from known valid values."""

    KIND = HeuristicKind.OPERATOR

    def __init__(
        self,
        valid_values: Sequence[Any],
        specification: Any,
        seed: int,
        parameters: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(specification, seed, parameters)
        self.valid_values: Tuple[Any, ...] = tuple(valid_values)

    def to_record(self) -> Dict[str, Any]:
        record = super().to_record()
        record["valid_values"] = list(self.valid_values)
        return record


def unique(values: Iterable[Any]) -> Iterator[Any]:
    """Yield values in order, dropping repeats."""
    seen = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        yield value
