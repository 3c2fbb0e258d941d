"""Specification of the integer type a request targets."""

from dataclasses import dataclass
from typing import Any, Dict

SUPPORTED_BITS = (8, 16, 32, 64)


@dataclass(frozen=True)
class IntegerSpecification:
    """Bit width and signedness of the target integer."""
    bits: int = 32
    signed: bool = True

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IntegerSpecification':
        """Build a specification, falling back to defaults for unsupported values."""
        bits = data.get('bits', cls.bits)
        try:
            bits = int(bits)
        except (TypeError, ValueError):
            bits = cls.bits
        if bits not in SUPPORTED_BITS:
            bits = cls.bits
        signed = data.get('signed', cls.signed)
        if isinstance(signed, str):
            signed = signed.strip().lower() not in ('false', 'no', '0', 'unsigned')
        return cls(bits=bits, signed=bool(signed))

    def to_dict(self) -> Dict[str, Any]:
        return {"bits": self.bits, "signed": self.signed}
