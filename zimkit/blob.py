"""An immutable chunk of data read from or written to an archive."""

from __future__ import annotations


class Blob:
    """A read-only sequence of bytes, empty by default."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview = b""):
        self._data = data if isinstance(data, bytes) else bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Blob({len(self._data)} bytes)"