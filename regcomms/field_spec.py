"""Bit fields inside a register."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from regcomms.casing import pascal_case, snake_case
from regcomms.errors import SpecError

_U8 = re.compile(r"\+?[0-9]+")


def _parse_u8(text: str) -> int:
    if not _U8.fullmatch(text):
        raise SpecError(f"invalid digit found in string: {text!r}")
    value = int(text)
    if value > 255:
        raise SpecError(f"number too large to fit in target type: {text!r}")
    return value


@dataclass(frozen=True)
class FieldPos:
    """A single bit (``is_bit``) or an inclusive bit range ``[high:low]``."""

    high: int
    low: int
    is_bit: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.low <= self.high <= 255:
            raise SpecError(f"invalid field position [{self.high}:{self.low}]")
        if self.is_bit and self.high != self.low:
            raise SpecError("a single-bit position must have high == low")

    @classmethod
    def parse(cls, text) -> "FieldPos":
        """Parse ``"4"`` as a single bit or ``"[6:4]"`` as a range."""
        if isinstance(text, bool):
            raise SpecError(f"invalid FieldPos format: {text}")
        if isinstance(text, int):
            text = str(text)
        if not isinstance(text, str):
            raise SpecError(f"invalid FieldPos format: {text!r}")
        if _U8.fullmatch(text) and int(text) <= 255:
            bit = int(text)
            return cls(bit, bit, is_bit=True)
        if text.startswith("[") and text.endswith("]") and len(text) >= 2:
            parts = text[1:-1].split(":")
            if len(parts) == 2:
                high = _parse_u8(parts[0])
                low = _parse_u8(parts[1])
                if low > high:
                    raise SpecError(
                        "Bitfield spec in [from:to], 'from' must be greater than 'to', "
                        f"got [{high}:{low}]"
                    )
                return cls(high, low)
        raise SpecError(f"invalid FieldPos format: {text}")

    def word(self) -> str:
        """Smallest unsigned word type that holds the field."""
        if self.is_bit:
            return "u8"
        field_len = self.high - self.low + 1
        for bits, name in ((8, "u8"), (16, "u16"), (32, "u32"), (64, "u64")):
            if field_len <= bits:
                return name
        raise SpecError(
            f"Unsupported field len longer than 64: {field_len}, based on {self.high}:{self.low}"
        )

    def __str__(self) -> str:
        if self.is_bit:
            return str(self.high)
        return f"[{self.high}:{self.low}]"


@dataclass
class FieldSpec:
    """A named field of a register."""

    name: str
    field_pos: FieldPos

    @classmethod
    def from_dict(cls, data) -> "FieldSpec":
        if not isinstance(data, Mapping):
            raise SpecError(f"field spec must be a mapping, got {data!r}")
        for key in ("name", "field_pos"):
            if key not in data:
                raise SpecError(f"missing field `{key}`")
        name = data["name"]
        if not isinstance(name, str):
            raise SpecError(f"field `name` must be a string, got {name!r}")
        return cls(name, FieldPos.parse(data["field_pos"]))

    def to_dict(self) -> dict:
        return {"name": self.name, "field_pos": str(self.field_pos)}

    def method_name(self) -> str:
        return snake_case(self.name)

    def struct_name(self) -> str:
        return f"Field{pascal_case(self.name)}"