"""Register transport interfaces, address byte codecs and a minimal awaitable runner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, TypeVar

T = TypeVar("T")

ADDRESS_SIZES = (1, 2, 4, 8)


class RegCommsError(Exception):
    """A register transfer failed."""


class IncompleteTransferError(RegCommsError):
    """A register transfer moved fewer bytes than requested."""


def _check_size(size: int) -> None:
    if size not in ADDRESS_SIZES:
        raise ValueError(f"unsupported address size {size}, expected one of {ADDRESS_SIZES}")


def _encode(address: int, size: int, byteorder: str) -> bytes:
    _check_size(size)
    try:
        return address.to_bytes(size, byteorder)
    except OverflowError as exc:
        raise ValueError(f"address {address:#x} does not fit in {size} byte(s)") from exc


def _decode(data: bytes, byteorder: str) -> int:
    _check_size(len(data))
    return int.from_bytes(data, byteorder)


def to_big_endian(address: int, size: int) -> bytes:
    """Encode an unsigned address as ``size`` big-endian bytes."""
    return _encode(address, size, "big")


def to_little_endian(address: int, size: int) -> bytes:
    """Encode an unsigned address as ``size`` little-endian bytes."""
    return _encode(address, size, "little")


def from_big_endian(data: bytes) -> int:
    """Decode a 1, 2, 4 or 8 byte big-endian address."""
    return _decode(bytes(data), "big")


def from_little_endian(data: bytes) -> int:
    """Decode a 1, 2, 4 or 8 byte little-endian address."""
    return _decode(bytes(data), "little")


def block_on(awaitable: Awaitable[T]) -> T:
    """Drive an awaitable to completion without an event loop.

    Bare suspensions are resumed immediately; an awaitable that waits on an
    event-loop future cannot be driven and raises ``RuntimeError``.
    """
    iterator = awaitable.__await__()
    while True:
        try:
            yielded = iterator.send(None)
        except StopIteration as stop:
            return stop.value
        if yielded is not None:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()
            raise RuntimeError("awaitable is waiting on an event loop and cannot be run by block_on")


class RegComms(ABC):
    """Transport that reads and writes bytes at a register address.

    ``comms_read`` fills the writable buffer ``buf`` like ``readinto`` and
    returns the number of bytes transferred.
    """

    @abstractmethod
    def comms_read(self, reg_address: int, buf: Any) -> int:
        """Read into ``buf`` starting at ``reg_address``."""

    @abstractmethod
    def comms_write(self, reg_address: int, buf: bytes) -> int:
        """Write ``buf`` starting at ``reg_address``."""

    async def comms_read_async(self, reg_address: int, buf: Any) -> int:
        """Asynchronous read; defaults to the blocking read."""
        return self.comms_read(reg_address, buf)

    async def comms_write_async(self, reg_address: int, buf: bytes) -> int:
        """Asynchronous write; defaults to the blocking write."""
        return self.comms_write(reg_address, buf)


class AccessProc(ABC):
    """Procedure a peripheral uses to reach a register."""

    @abstractmethod
    def proc_read(self, peripheral: Any, reg_address: int, buf: Any) -> int:
        """Read into ``buf`` from ``reg_address`` through ``peripheral``."""

    @abstractmethod
    def proc_write(self, peripheral: Any, reg_address: int, buf: bytes) -> int:
        """Write ``buf`` to ``reg_address`` through ``peripheral``."""

    async def proc_read_async(self, peripheral: Any, reg_address: int, buf: Any) -> int:
        """Asynchronous read; defaults to the blocking procedure."""
        return self.proc_read(peripheral, reg_address, buf)

    async def proc_write_async(self, peripheral: Any, reg_address: int, buf: bytes) -> int:
        """Asynchronous write; defaults to the blocking procedure."""
        return self.proc_write(peripheral, reg_address, buf)