"""Specification of the string type a request targets."""

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_MAX_LENGTH = 65536


@dataclass(frozen=True)
class StringSpecification:
    """Largest string length the heuristics may produce."""
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StringSpecification':
        try:
            max_length = int(data.get('max_length', DEFAULT_MAX_LENGTH))
        except (TypeError, ValueError):
            max_length = DEFAULT_MAX_LENGTH
        if max_length <= 0:
            max_length = DEFAULT_MAX_LENGTH
        return cls(max_length=max_length)

    def to_dict(self) -> Dict[str, Any]:
        return {"max_length": self.max_length}
