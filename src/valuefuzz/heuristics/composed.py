"""Ordered composition of heuristics into one bounded, resumable stream."""

from typing import Any, Dict, Iterable, List

from valuefuzz.data_models import FuzzedValue
from valuefuzz.utils.logger import get_logger, Logger
from .base_heuristic import FuzzingHeuristic, HeuristicKind
from .factory import HeuristicFactory

logger = get_logger(__name__)


class ComposedHeuristic:
    """Concatenates the sequences of its heuristics in insertion order.

    The first heuristic is drained completely before the second one is asked for a
    value, and so on. The cursor (current index and values emitted) only moves
    forward.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self.heuristics: List[FuzzingHeuristic] = []
        self.index = 0
        self.emitted = 0

    def add(self, heuristic: FuzzingHeuristic) -> None:
        self.heuristics.append(heuristic)
        logger.debug(f"Added heuristic {Logger.format_heuristic_summary(heuristic)}")

    def extend(self, heuristics: Iterable[FuzzingHeuristic]) -> None:
        for heuristic in heuristics:
            self.add(heuristic)

    def __len__(self) -> int:
        return len(self.heuristics)

    @property
    def names(self) -> List[str]:
        return [h.name for h in self.heuristics]

    @property
    def is_exhausted(self) -> bool:
        return self.index >= len(self.heuristics)

    def next(self, bound: int) -> List[FuzzedValue]:
        """Pull up to ``bound`` further values.

        Returns fewer than ``bound`` values only when every heuristic is exhausted.
        """
        values: List[FuzzedValue] = []
        try:
            while len(values) < bound and self.index < len(self.heuristics):
                heuristic = self.heuristics[self.index]
                try:
                    values.append(next(heuristic))
                except StopIteration:
                    logger.debug(f"Heuristic {heuristic.name} exhausted after {heuristic.consumed} values")
                    self.index += 1
        finally:
            # Keep the cursor equal to the sum of consumed counts even if a heuristic fails
            self.emitted += len(values)
        return values

    def to_record(self) -> Dict[str, Any]:
        """Snapshot of the heuristic list and the cursor."""
        return {
            "seed": self.seed,
            "index": self.index,
            "emitted": self.emitted,
            "heuristics": [h.to_record() for h in self.heuristics],
        }

    @classmethod
    def from_record(
        cls,
        record: Dict[str, Any],
        generator_factory: HeuristicFactory,
        operator_factory: HeuristicFactory,
        specification: Any,
    ) -> 'ComposedHeuristic':
        """Rebuild a composed heuristic from ``to_record`` output.

        Each heuristic is re-created with the same seed and inputs, then
        fast-forwarded by the number of values it had already produced.

        Raises:
            UnknownHeuristicError: If a recorded heuristic is no longer registered
            KeyError, ValueError: If the record is malformed
        """
        composed = cls(int(record["seed"]))
        factories = {
            HeuristicKind.GENERATOR: generator_factory,
            HeuristicKind.OPERATOR: operator_factory,
        }
        for entry in record["heuristics"]:
            kind = HeuristicKind(entry["kind"])
            heuristic = factories[kind].create(
                entry["name"],
                entry.get("parameters") or {},
                specification,
                composed.seed,
                entry.get("valid_values"),
            )
            consumed = int(entry.get("consumed", 0))
            skipped = heuristic.skip(consumed)
            if skipped != consumed:
                raise ValueError(
                    f"heuristic {heuristic.name} produced {skipped} values, record says {consumed}"
                )
            composed.heuristics.append(heuristic)

        composed.index = int(record["index"])
        composed.emitted = int(record["emitted"])
        if composed.emitted != sum(h.consumed for h in composed.heuristics):
            raise ValueError("emitted count does not match the heuristic positions")
        return composed

