"""String keys that carry a precomputed SDBM hash."""

from __future__ import annotations

from typing import Union

Key = Union[str, bytes, bytearray]

_MASK64 = (1 << 64) - 1


def sdbm_hash(key: Key) -> int:
    """Return the 64-bit SDBM hash of ``key``.

    Text is hashed as its UTF-8 bytes. Bytes of 0x80 and above count as
    negative (signed) characters, as they do on common platforms.
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    value = 0
    for byte in data:
        c = byte - 256 if byte >= 0x80 else byte
        value = (c + (value << 6) + (value << 16) - value) & _MASK64
    return value


class HashString:
    """An immutable key whose SDBM hash is computed once, on creation.

    Two keys are equal when their hashes match and their bytes match.
    """

    __slots__ = ("_value", "_data", "_hash")

    def __init__(self, value: Key) -> None:
        if isinstance(value, str):
            data = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray)):
            data = bytes(value)
            value = data
        else:
            raise TypeError(f"key must be str or bytes, got {type(value).__name__}")
        if b"\0" in data:
            raise ValueError("key must not contain a zero byte")
        self._value = value
        self._data = data
        self._hash = sdbm_hash(data)

    @property
    def value(self) -> Key:
        """The key as it was given."""
        return self._value

    @property
    def data(self) -> bytes:
        """The key's bytes."""
        return self._data

    @property
    def sdbm(self) -> int:
        """The 64-bit SDBM hash of the key."""
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashString):
            return NotImplemented
        return self._hash == other._hash and self._data == other._data

    def __hash__(self) -> int:
        return self._hash

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"HashString({self._value!r})"