"""Generic members held by a generated peripheral."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from regcomms.casing import pascal_case, snake_case
from regcomms.errors import SpecError


@dataclass
class TraitMember:
    """A peripheral member of a generic type with a trait bound."""

    name: str
    generic_type: str
    trait_bound: str

    @classmethod
    def from_dict(cls, data) -> "TraitMember":
        if not isinstance(data, Mapping):
            raise SpecError(f"trait member must be a mapping, got {data!r}")
        values = {}
        for key in ("name", "generic_type", "trait_bound"):
            if key not in data:
                raise SpecError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise SpecError(f"field `{key}` must be a string, got {data[key]!r}")
            values[key] = data[key]
        return cls(**values)

    def to_dict(self) -> dict:
        return {"name": self.name, "generic_type": self.generic_type, "trait_bound": self.trait_bound}

    def member_name(self) -> str:
        return snake_case(self.name)

    def generic(self) -> str:
        return pascal_case(self.generic_type)

    def bound(self) -> str:
        return self.trait_bound