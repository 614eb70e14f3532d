"""Named register access procedures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from regcomms.casing import macro_case, snake_case
from regcomms.errors import SpecError


@dataclass
class AccessProcSpec:
    """An access procedure and the path of the type implementing it."""

    proc_name: str
    struct_path: str

    @classmethod
    def from_dict(cls, data) -> "AccessProcSpec":
        if not isinstance(data, Mapping):
            raise SpecError(f"access proc spec must be a mapping, got {data!r}")
        values = {}
        for key in ("proc_name", "struct_path"):
            if key not in data:
                raise SpecError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise SpecError(f"field `{key}` must be a string, got {data[key]!r}")
            values[key] = data[key]
        return cls(**values)

    def to_dict(self) -> dict:
        return {"proc_name": self.proc_name, "struct_path": self.struct_path}

    def member_name(self) -> str:
        return snake_case(self.proc_name)

    def static_name(self) -> str:
        return macro_case(self.proc_name)