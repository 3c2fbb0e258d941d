"""Integer operators that mutate known valid values."""

from typing import Iterator

from ..base_heuristic import Operator, unique
from ..seeding import shuffle_deterministic


class NumericalVarianceOperator(Operator):
    """Adds small random offsets to every valid value.

    Parameters:
        range: Largest absolute offset (default 10)
        count: Values produced per valid value (default 5)
    """

    NAME = "NumericalVariance"
    DESCRIPTION = "Valid values shifted by small random offsets"
    DEFAULT_PARAMETERS = {"range": 10, "count": 5}

    def _generate(self) -> Iterator[int]:
        spread = max(1, abs(self.parameter("range")))
        count = max(0, self.parameter("count"))
        for value in self.valid_values:
            for _ in range(count):
                offset = 0
                while offset == 0:
                    offset = self.random.randint(-spread, spread)
                yield value + offset


class ArithmeticNeighborsOperator(Operator):
    """Direct arithmetic relatives of every valid value: +-1, negation, doubling, halving."""

    NAME = "ArithmeticNeighbors"
    DESCRIPTION = "Neighbours, negation, doubling and halving of valid values"

    def _generate(self) -> Iterator[int]:
        for value in self.valid_values:
            yield from unique([value - 1, value + 1, -value, value * 2, value // 2])


class BitFlipOperator(Operator):
    """Flips single bits of every valid value.

    Parameters:
        count: Number of distinct bit positions flipped per valid value (default 4)
    """

    NAME = "BitFlip"
    DESCRIPTION = "Valid values with single random bits flipped"
    DEFAULT_PARAMETERS = {"count": 4}

    def _generate(self) -> Iterator[int]:
        bits = self.specification.bits
        count = min(bits, max(0, self.parameter("count")))
        for value in self.valid_values:
            positions = shuffle_deterministic(self.random, range(bits))[:count]
            for position in positions:
                yield value ^ (1 << position)
