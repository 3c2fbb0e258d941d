"""String generators."""

from typing import Iterator, List

from ..base_heuristic import Generator, unique
from .data import FORMAT_STRINGS, SPECIAL_CHARACTERS


class FormatStringsGenerator(Generator):
    """Long runs of printf-style conversion specifiers."""

    NAME = "FormatStrings"
    DESCRIPTION = "Repeated %n and %s format specifiers"

    def _generate(self) -> Iterator[str]:
        for value in FORMAT_STRINGS:
            if len(value) <= self.specification.max_length:
                yield value


class SpecialCharactersGenerator(Generator):
    """Control characters, quoting, traversal and injection payloads."""

    NAME = "SpecialCharacters"
    DESCRIPTION = "Strings with special meaning to parsers and interpreters"

    def _generate(self) -> Iterator[str]:
        yield from SPECIAL_CHARACTERS


class LongStringsGenerator(Generator):
    """Strings of increasing length around typical buffer sizes.

    Parameters:
        character: Character to repeat (default 'A')

    Each length is produced once as a run of ``character`` and once as random
    printable text.
    """

    NAME = "LongStrings"
    DESCRIPTION = "Long strings around common buffer sizes"
    DEFAULT_PARAMETERS = {"character": "A"}

    LENGTHS = (127, 128, 255, 256, 1023, 1024, 4096, 65535, 65536)
    ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

    def _lengths(self) -> List[int]:
        limit = self.specification.max_length
        return list(unique([n for n in self.LENGTHS if n <= limit] + [limit]))

    def _generate(self) -> Iterator[str]:
        character = self.parameter("character", str) or "A"
        for length in self._lengths():
            yield (character * length)[:length]
            yield "".join(self.random.choice(self.ALPHABET) for _ in range(length))
