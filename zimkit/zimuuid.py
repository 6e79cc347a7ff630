"""The 16-byte identifier of a ZIM archive."""

from __future__ import annotations

import hashlib
import uuid as _uuid


class Uuid:
    """An immutable 16-byte archive identifier; all zeros by default."""

    __slots__ = ("_data",)

    SIZE = 16

    def __init__(self, data: bytes | bytearray | memoryview | None = None):
        if data is None:
            raw = bytes(self.SIZE)
        else:
            raw = bytes(data)
            if len(raw) != self.SIZE:
                raise ValueError(f"a uuid needs {self.SIZE} bytes, got {len(raw)}")
        self._data = raw

    @classmethod
    def generate(cls, value: str = "") -> "Uuid":
        """A new identifier: derived from ``value`` when given, random otherwise."""
        if value:
            return cls(hashlib.md5(value.encode("utf-8")).digest())
        return cls(_uuid.uuid4().bytes)

    @property
    def data(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return str(_uuid.UUID(bytes=self._data))

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return self.SIZE

    def __repr__(self) -> str:
        return f"Uuid('{self}')"