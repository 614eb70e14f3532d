"""Register transports over an I2C bus.

The bus is any object with ``write_read(i2c_address, data, buf)``, which
writes ``data`` and then fills ``buf``, and ``transaction(i2c_address,
operations)``, which performs a list of write operations given as bytes.
For the asynchronous transport both methods are coroutines.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from regcomms.comms import ADDRESS_SIZES, RegComms, RegCommsError, block_on, to_big_endian


def _check_address_size(address_size: int) -> None:
    if address_size not in ADDRESS_SIZES:
        raise ValueError(f"unsupported address size {address_size}, expected one of {ADDRESS_SIZES}")


@dataclass
class I2cComms(RegComms):
    """Blocking I2C register transport; register addresses are sent big-endian."""

    bus: Any
    address_size: int
    i2c_address: int = 0

    def __post_init__(self) -> None:
        _check_address_size(self.address_size)

    def with_address(self, i2c_address: int) -> "I2cComms":
        """Return a copy on the same bus addressing ``i2c_address``."""
        return dataclasses.replace(self, i2c_address=i2c_address)

    def set_address(self, i2c_address: int) -> None:
        """Change the device address in place."""
        self.i2c_address = i2c_address

    def comms_read(self, reg_address: int, buf: Any) -> int:
        reg_bytes = to_big_endian(reg_address, self.address_size)
        try:
            self.bus.write_read(self.i2c_address, reg_bytes, buf)
        except Exception as exc:
            raise RegCommsError(f"i2c read at {reg_address:#x} failed") from exc
        return len(buf)

    def comms_write(self, reg_address: int, buf: bytes) -> int:
        reg_bytes = to_big_endian(reg_address, self.address_size)
        try:
            self.bus.transaction(self.i2c_address, [reg_bytes, bytes(buf)])
        except Exception as exc:
            raise RegCommsError(f"i2c write at {reg_address:#x} failed") from exc
        return len(buf)


@dataclass
class I2cCommsAsync(RegComms):
    """Asynchronous I2C register transport; blocking calls run it to completion."""

    bus: Any
    address_size: int
    i2c_address: int = 0

    def __post_init__(self) -> None:
        _check_address_size(self.address_size)

    def with_address(self, i2c_address: int) -> "I2cCommsAsync":
        """Return a copy on the same bus addressing ``i2c_address``."""
        return dataclasses.replace(self, i2c_address=i2c_address)

    def set_address(self, i2c_address: int) -> None:
        """Change the device address in place."""
        self.i2c_address = i2c_address

    def comms_read(self, reg_address: int, buf: Any) -> int:
        return block_on(self.comms_read_async(reg_address, buf))

    def comms_write(self, reg_address: int, buf: bytes) -> int:
        return block_on(self.comms_write_async(reg_address, buf))

    async def comms_read_async(self, reg_address: int, buf: Any) -> int:
        reg_bytes = to_big_endian(reg_address, self.address_size)
        try:
            await self.bus.write_read(self.i2c_address, reg_bytes, buf)
        except Exception as exc:
            raise RegCommsError(f"i2c read at {reg_address:#x} failed") from exc
        return len(buf)

    async def comms_write_async(self, reg_address: int, buf: bytes) -> int:
        reg_bytes = to_big_endian(reg_address, self.address_size)
        try:
            await self.bus.transaction(self.i2c_address, [reg_bytes, bytes(buf)])
        except Exception as exc:
            raise RegCommsError(f"i2c write at {reg_address:#x} failed") from exc
        return len(buf)