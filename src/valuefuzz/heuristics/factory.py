"""Heuristic factories: resolve heuristic names into instances."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type

from valuefuzz.exceptions import UnknownHeuristicError
from valuefuzz.utils.logger import get_logger
from .base_heuristic import FuzzingHeuristic, HeuristicKind

logger = get_logger(__name__)


class HeuristicFactory:
    """Registry of the heuristics of one kind for one value type.

    Names are matched case-insensitively. Registration order is the order in which
    ``create_all`` instantiates heuristics.
    """

    def __init__(self, kind: HeuristicKind, type_name: str):
        self.kind = kind
        self.type_name = type_name
        self._registry: Dict[str, Type[FuzzingHeuristic]] = {}

    def register(self, heuristic_class: Type[FuzzingHeuristic]) -> Type[FuzzingHeuristic]:
        """Register a heuristic class; usable as a class decorator."""
        if heuristic_class.KIND is not self.kind:
            raise TypeError(
                f"{heuristic_class.__name__} is a {heuristic_class.KIND.value}, "
                f"not a {self.kind.value}"
            )
        key = heuristic_class.NAME.lower()
        if key in self._registry:
            raise ValueError(f"{self.kind.value} {heuristic_class.NAME} is already registered")
        self._registry[key] = heuristic_class
        return heuristic_class

    def names(self) -> List[str]:
        return [cls.NAME for cls in self._registry.values()]

    def describe(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": cls.NAME,
                "kind": self.kind.value,
                "description": cls.DESCRIPTION,
                "parameters": dict(cls.DEFAULT_PARAMETERS),
            }
            for cls in self._registry.values()
        ]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._registry

    def _instantiate(
        self,
        heuristic_class: Type[FuzzingHeuristic],
        parameters: Optional[Dict[str, Any]],
        specification: Any,
        seed: int,
        valid_values: Optional[Sequence[Any]],
    ) -> FuzzingHeuristic:
        if self.kind is HeuristicKind.OPERATOR:
            return heuristic_class(valid_values or (), specification, seed, parameters)
        return heuristic_class(specification, seed, parameters)

    def try_create(
        self,
        name: str,
        parameters: Optional[Dict[str, Any]],
        specification: Any,
        seed: int,
        valid_values: Optional[Sequence[Any]] = None,
    ) -> Optional[FuzzingHeuristic]:
        """Create the named heuristic, or return None when the name is unknown."""
        heuristic_class = self._registry.get((name or "").lower())
        if heuristic_class is None:
            logger.debug(f"Unknown {self.type_name} {self.kind.value}: {name}")
            return None
        return self._instantiate(heuristic_class, parameters, specification, seed, valid_values)

    def create(
        self,
        name: str,
        parameters: Optional[Dict[str, Any]],
        specification: Any,
        seed: int,
        valid_values: Optional[Sequence[Any]] = None,
    ) -> FuzzingHeuristic:
        """Create the named heuristic.

        Raises:
            UnknownHeuristicError: If no heuristic with this name is registered
        """
        heuristic = self.try_create(name, parameters, specification, seed, valid_values)
        if heuristic is None:
            raise UnknownHeuristicError(name, kind=f"{self.type_name} {self.kind.value}")
        return heuristic

    def create_all(
        self,
        specification: Any,
        seed: int,
        valid_values: Optional[Sequence[Any]] = None,
    ) -> List[FuzzingHeuristic]:
        """Create every registered heuristic with default parameters.

        Operators are meaningless without reference values, so an operator factory
        returns an empty list when ``valid_values`` is empty.
        """
        if self.kind is HeuristicKind.OPERATOR and not valid_values:
            return []
        return [
            self._instantiate(cls, None, specification, seed, valid_values)
            for cls in self._registry.values()
        ]
