"""String operators that mutate known valid values."""

from typing import Iterator

from ..base_heuristic import Operator, unique
from .data import INSERTION_CHARACTERS


class StringCaseOperator(Operator):
    """Upper, lower, swapped and title case variants of each valid value."""

    NAME = "StringCase"
    DESCRIPTION = "Case variants of valid values"

    def _generate(self) -> Iterator[str]:
        for value in self.valid_values:
            variants = [value.upper(), value.lower(), value.swapcase(), value.title()]
            yield from unique(v for v in variants if v != value)


class StringRepetitionOperator(Operator):
    """Each valid value repeated several times, capped at the maximum length.

    Parameters:
        factors: Comma-separated repetition factors (default '2,10,100,1000')
    """

    NAME = "StringRepetition"
    DESCRIPTION = "Valid values repeated to grow their length"
    DEFAULT_PARAMETERS = {"factors": "2,10,100,1000"}

    def _factors(self):
        raw = self.parameters.get("factors", self.DEFAULT_PARAMETERS["factors"])
        parts = raw if isinstance(raw, (list, tuple)) else str(raw).split(",")
        factors = []
        for part in parts:
            try:
                factor = int(part)
            except (TypeError, ValueError):
                continue
            if factor > 1:
                factors.append(factor)
        return factors

    def _generate(self) -> Iterator[str]:
        limit = self.specification.max_length
        for value in self.valid_values:
            if not value:
                continue
            for factor in self._factors():
                if len(value) * factor > limit:
                    continue
                yield value * factor


class RandomCharacterInsertionOperator(Operator):
    """Inserts a random special character at a random position of each valid value.

    Parameters:
        count: Values produced per valid value (default 3)
    """

    NAME = "RandomCharacterInsertion"
    DESCRIPTION = "Special characters inserted into valid values"
    DEFAULT_PARAMETERS = {"count": 3}

    def _generate(self) -> Iterator[str]:
        count = max(0, self.parameter("count"))
        for value in self.valid_values:
            for _ in range(count):
                position = self.random.randint(0, len(value))
                character = self.random.choice(INSERTION_CHARACTERS)
                yield value[:position] + character + value[position:]
