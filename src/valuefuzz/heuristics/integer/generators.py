"""Integer generators.

Generators:
1. BoundaryNumbersGenerator - limits of the common integer widths and their neighbours
2. PowersOfTwoGenerator - signed powers of two and their predecessors
3. RandomNumbersGenerator - seeded uniform values inside the target range
"""

from typing import Iterator, List

from ..base_heuristic import Generator, unique
from .specification import SUPPORTED_BITS


class BoundaryNumbersGenerator(Generator):
    """Boundary values of 8/16/32/64-bit integers up to the target width.

    For every width the signed and unsigned limits are produced together with the
    values just inside and just outside of them, so overflows into the next width
    are covered too.
    """

    NAME = "BoundaryNumbers"
    DESCRIPTION = "Limits of integer widths and their direct neighbours"

    def _boundaries(self) -> List[int]:
        values = [0, -1, 1]
        for bits in SUPPORTED_BITS:
            if bits > self.specification.bits:
                break
            signed_min = -(1 << (bits - 1))
            signed_max = (1 << (bits - 1)) - 1
            unsigned_max = (1 << bits) - 1
            values.extend([
                signed_min - 1, signed_min, signed_min + 1,
                signed_max - 1, signed_max, signed_max + 1,
                unsigned_max - 1, unsigned_max, unsigned_max + 1,
            ])
        return values

    def _generate(self) -> Iterator[int]:
        yield from unique(self._boundaries())


class PowersOfTwoGenerator(Generator):
    """Powers of two, their predecessors and negations up to the target width."""

    NAME = "PowersOfTwo"
    DESCRIPTION = "Powers of two up to the target bit width"

    def _generate(self) -> Iterator[int]:
        values = []
        for exponent in range(1, self.specification.bits + 1):
            power = 1 << exponent
            values.extend([power, power - 1, -power, -(power - 1)])
        yield from unique(values)


class RandomNumbersGenerator(Generator):
    """Uniformly distributed values inside the target range.

    Parameters:
        count: Number of values to produce (default 50)
    """

    NAME = "RandomNumbers"
    DESCRIPTION = "Seeded random values inside the target range"
    DEFAULT_PARAMETERS = {"count": 50}

    def _generate(self) -> Iterator[int]:
        count = max(0, self.parameter("count"))
        low = self.specification.min_value
        high = self.specification.max_value
        for _ in range(count):
            yield self.random.randint(low, high)
