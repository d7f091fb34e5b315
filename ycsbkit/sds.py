"""Binary-safe growable byte strings with explicit spare capacity."""

from __future__ import annotations

from typing import Union

MAX_PREALLOC = 1024 * 1024
"""Above this size, growth adds a fixed amount instead of doubling."""

HEADER_SIZE = 8
"""Size of the bookkeeping header (length and free counters)."""

BytesLike = Union[bytes, bytearray, memoryview, str, "DynamicString"]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, DynamicString):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes-like or str, got {type(data).__name__}")


class DynamicString:
    """A mutable byte string that tracks its length and preallocated free space.

    The buffer always holds ``len(self) + self.avail()`` bytes; growth
    preallocates extra room so repeated appends are cheap.
    """

    __slots__ = ("_buf", "_len", "_free")

    def __init__(self, init: BytesLike | None = None, length: int | None = None) -> None:
        if init is None:
            size = 0 if length is None else length
            if size < 0:
                raise ValueError("length must not be negative")
            content = bytes(size)
        else:
            data = _as_bytes(init)
            if length is None:
                content = data
            else:
                if length < 0:
                    raise ValueError("length must not be negative")
                if length > len(data):
                    raise ValueError("length exceeds the size of the initial data")
                content = data[:length]
        self._buf = bytearray(content)
        self._len = len(content)
        self._free = 0

    @classmethod
    def empty(cls) -> DynamicString:
        """Return a new zero-length string."""
        return cls(b"")

    def __len__(self) -> int:
        return self._len

    def __bytes__(self) -> bytes:
        return bytes(self._buf[: self._len])

    def __repr__(self) -> str:
        return f"DynamicString({bytes(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicString):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray)):
            return bytes(self) == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (DynamicString, bytes, bytearray)):
            return self.compare(other) < 0
        return NotImplemented

    def avail(self) -> int:
        """Number of spare bytes available past the end of the content."""
        return self._free

    def alloc_size(self) -> int:
        """Total allocation size: header, content, free space and terminator."""
        return HEADER_SIZE + self._len + self._free + 1

    def dup(self) -> DynamicString:
        """Return an independent copy holding the same content."""
        return DynamicString(bytes(self))

    def _capacity(self) -> int:
        return self._len + self._free

    def _set_content(self, content: bytes) -> None:
        """Replace the content, keeping the capacity unchanged."""
        capacity = self._capacity()
        size = len(content)
        self._buf = bytearray(content) + bytearray(capacity - size)
        self._len = size
        self._free = capacity - size

    def make_room_for(self, addlen: int) -> None:
        """Ensure at least ``addlen`` spare bytes, preallocating extra room."""
        if addlen < 0:
            raise ValueError("addlen must not be negative")
        if self._free >= addlen:
            return
        newlen = self._len + addlen
        if newlen < MAX_PREALLOC:
            newlen *= 2
        else:
            newlen += MAX_PREALLOC
        self._buf.extend(bytes(newlen - len(self._buf)))
        self._free = newlen - self._len

    def incr_len(self, incr: int) -> None:
        """Move the end of the content by ``incr`` bytes into or out of free space."""
        if incr > self._free:
            raise ValueError("increment exceeds the available free space")
        if self._len + incr < 0:
            raise ValueError("decrement exceeds the current length")
        old_len = self._len
        self._len += incr
        self._free -= incr
        if incr < 0:
            self._buf[self._len : old_len] = bytes(old_len - self._len)

    def remove_free_space(self) -> None:
        """Drop all spare capacity."""
        del self._buf[self._len :]
        self._free = 0

    def grow_zero(self, length: int) -> None:
        """Grow to ``length`` bytes, filling new bytes with zeros."""
        current = self._len
        if length <= current:
            return
        self.make_room_for(length - current)
        total = self._capacity()
        self._buf[current:length] = bytes(length - current)
        self._len = length
        self._free = total - length

    def cat(self, data: BytesLike) -> None:
        """Append ``data`` to the end of the content."""
        chunk = _as_bytes(data)
        size = len(chunk)
        self.make_room_for(size)
        self._buf[self._len : self._len + size] = chunk
        self._len += size
        self._free -= size

    def copy_from(self, data: BytesLike) -> None:
        """Replace the content with ``data``, reusing the buffer when possible."""
        chunk = _as_bytes(data)
        size = len(chunk)
        if self._capacity() < size:
            self.make_room_for(size - self._len)
        self._set_content(chunk)

    def update_len(self) -> None:
        """Cut the logical length at the first zero byte, if any."""
        content = bytes(self)
        nul = content.find(b"\0")
        if nul != -1:
            self._set_content(content[:nul])

    def clear(self) -> None:
        """Make the string empty, keeping the buffer as free space."""
        self._set_content(b"")

    def trim(self, cset: BytesLike) -> None:
        """Remove bytes found in ``cset`` from both ends; zero bytes always match."""
        chars = _as_bytes(cset) + b"\0"
        self._set_content(bytes(self).strip(chars))

    def range(self, start: int, end: int) -> None:
        """Keep only the inclusive slice ``start..end``; negatives count from the end."""
        size = self._len
        if size == 0:
            return
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = max(size + end, 0)
        newlen = 0 if start > end else end - start + 1
        if newlen:
            if start >= size:
                newlen = 0
            elif end >= size:
                end = size - 1
                newlen = 0 if start > end else end - start + 1
        else:
            start = 0
        content = bytes(self._buf[start : start + newlen]) if newlen else b""
        self._set_content(content)

    def lower(self) -> None:
        """Convert ASCII letters to lower case in place."""
        self._buf[: self._len] = bytes(self).lower()

    def upper(self) -> None:
        """Convert ASCII letters to upper case in place."""
        self._buf[: self._len] = bytes(self).upper()

    def map_chars(self, from_chars: BytesLike, to_chars: BytesLike) -> None:
        """Replace every byte of ``from_chars`` with the byte at the same position in ``to_chars``."""
        src = _as_bytes(from_chars)
        dst = _as_bytes(to_chars)
        if len(src) != len(dst):
            raise ValueError("from_chars and to_chars must have the same length")
        table = bytearray(range(256))
        # The first occurrence of a byte in from_chars wins.
        for s, d in reversed(list(zip(src, dst))):
            table[s] = d
        self._buf[: self._len] = bytes(self).translate(bytes(table))

    def compare(self, other: BytesLike) -> int:
        """Compare bytewise; a longer string with an equal prefix is greater.

        Returns a negative number, zero or a positive number.
        """
        a = bytes(self)
        b = _as_bytes(other)
        minlen = min(len(a), len(b))
        pa, pb = a[:minlen], b[:minlen]
        if pa == pb:
            return len(a) - len(b)
        return -1 if pa < pb else 1