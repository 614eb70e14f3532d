"""Register byte order."""

from enum import Enum

from regcomms.errors import SpecError


class Endian(Enum):
    """Byte order of register values on the wire."""

    BIG = "Big"
    LITTLE = "Little"

    def abbrev(self) -> str:
        """Short suffix used in generated byte conversions."""
        return "be" if self is Endian.BIG else "le"

    @classmethod
    def parse(cls, value) -> "Endian":
        """Read a byte order as written in a specification."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise SpecError(f"unknown variant {value!r}, expected `Big` or `Little`") from None