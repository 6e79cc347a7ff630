"""Little-endian integer encoding and a cursor over a byte buffer."""

from __future__ import annotations

_WRITABLE_SIZES = (2, 4, 8)


def to_little_endian(value: int, size: int) -> bytes:
    """Encode ``value`` on ``size`` bytes (2, 4 or 8), truncating like an unsigned cast."""
    if size not in _WRITABLE_SIZES:
        raise ValueError(f"unsupported integer width: {size}")
    mask = (1 << (8 * size)) - 1
    return (value & mask).to_bytes(size, "little")


def from_little_endian(data: bytes, size: int) -> int:
    """Decode an unsigned integer from the first ``size`` bytes of ``data``."""
    if size <= 0:
        raise ValueError(f"invalid integer width: {size}")
    if len(data) < size:
        raise ValueError(f"need {size} bytes, got {len(data)}")
    return int.from_bytes(bytes(data[:size]), "little")


class BufferStreamer:
    """Sequential reader over the first ``size`` bytes of a buffer."""

    __slots__ = ("_view", "_pos", "_left")

    def __init__(self, buffer, size: int | None = None):
        view = memoryview(buffer).cast("B")
        if size is None:
            size = len(view)
        if size < 0 or size > len(view):
            raise ValueError(f"size {size} does not fit a buffer of {len(view)} bytes")
        self._view = view
        self._pos = 0
        self._left = size

    def read_uint(self, size: int) -> int:
        """Read an unsigned little-endian integer of ``size`` bytes."""
        if size > self._left:
            raise ValueError(f"cannot read {size} bytes, only {self._left} left")
        value = from_little_endian(self._view[self._pos:self._pos + size], size)
        self.skip(size)
        return value

    def skip(self, nbytes: int) -> None:
        """Advance the cursor by ``nbytes``."""
        if nbytes < 0 or nbytes > self._left:
            raise ValueError(f"cannot skip {nbytes} bytes, only {self._left} left")
        self._pos += nbytes
        self._left -= nbytes

    def current(self) -> memoryview:
        """The bytes not yet consumed."""
        return self._view[self._pos:self._pos + self._left]

    def left(self) -> int:
        """Number of bytes not yet consumed."""
        return self._left