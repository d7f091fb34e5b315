"""Formatting, quoting, splitting and joining helpers for dynamic strings."""

from __future__ import annotations

from typing import Iterable

from ycsbkit.sds import BytesLike, DynamicString, _as_bytes

_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1
_ULLONG_MAX = 2**64 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MAX = 2**32 - 1

# Characters accepted by isspace() in the C locale.
_SPACE = frozenset(b" \t\n\v\f\r")
# Characters that end an unquoted token.
_TOKEN_END = frozenset(b" \n\r\t\0")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")

_ESCAPES = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x07: "\\a",
    0x08: "\\b",
}

_UNESCAPES = {
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
    ord("b"): 0x08,
    ord("a"): 0x07,
}

_BACKSLASH = ord("\\")
_DQUOTE = ord('"')
_SQUOTE = ord("'")


def _check_range(value: int, low: int, high: int, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} expects an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {what}")
    return value


def ll_to_str(value: int) -> str:
    """Decimal text of a signed 64-bit integer."""
    _check_range(value, _LLONG_MIN, _LLONG_MAX, "a signed 64-bit integer")
    return str(value)


def ull_to_str(value: int) -> str:
    """Decimal text of an unsigned 64-bit integer."""
    _check_range(value, 0, _ULLONG_MAX, "an unsigned 64-bit integer")
    return str(value)


def from_long_long(value: int) -> DynamicString:
    """A new dynamic string holding the decimal text of ``value``."""
    return DynamicString(ll_to_str(value).encode("ascii"))


def _format_arg(spec: str, arg: object) -> bytes:
    if spec == "s":
        if isinstance(arg, str):
            return arg.encode("utf-8")
        if isinstance(arg, (bytes, bytearray, memoryview)):
            return bytes(arg)
        raise TypeError(f"%s expects str or bytes, got {type(arg).__name__}")
    if spec == "S":
        if isinstance(arg, (DynamicString, bytes, bytearray, memoryview)):
            return bytes(arg)
        raise TypeError(f"%S expects a dynamic string, got {type(arg).__name__}")
    if spec == "i":
        return _check_range(arg, _INT_MIN, _INT_MAX, "%i").__str__().encode()
    if spec == "I":
        return ll_to_str(arg).encode()
    if spec == "u":
        return _check_range(arg, 0, _UINT_MAX, "%u").__str__().encode()
    # %U and %T
    return ull_to_str(arg).encode()


def cat_fmt(prefix: BytesLike, fmt: str, *args: object) -> DynamicString:
    """Append ``fmt`` expanded with ``args`` to a copy of ``prefix``.

    Supported: %s (text), %S (dynamic string), %i/%I (signed 32/64-bit),
    %u/%U (unsigned 32/64-bit), %T (size) and %%. Any other character after
    % is copied verbatim.
    """
    result = prefix.dup() if isinstance(prefix, DynamicString) else DynamicString(prefix)
    remaining = list(args)
    out = bytearray()
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out += ch.encode("utf-8")
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec in "sSiIuUT":
            if not remaining:
                raise TypeError(f"not enough arguments for format %{spec}")
            out += _format_arg(spec, remaining.pop(0))
        else:
            out += spec.encode("utf-8")
    if remaining:
        raise TypeError("too many arguments for format string")
    result.cat(bytes(out))
    return result


def cat_repr(data: BytesLike) -> str:
    """Quoted, escaped representation of ``data`` that ``split_args`` reads back."""
    parts = ['"']
    for byte in _as_bytes(data):
        escape = _ESCAPES.get(byte)
        if escape is not None:
            parts.append(escape)
        elif 0x20 <= byte <= 0x7E:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    parts.append('"')
    return "".join(parts)


def split_len(data: BytesLike, sep: BytesLike) -> list[bytes]:
    """Split ``data`` on the (possibly multi-byte) separator ``sep``.

    Empty input gives an empty list; an empty separator is an error.
    """
    content = _as_bytes(data)
    separator = _as_bytes(sep)
    if not separator:
        raise ValueError("separator must not be empty")
    if not content:
        return []
    return content.split(separator)


def split_args(line: BytesLike) -> list[bytes]:
    """Split a line into arguments, honouring double and single quotes.

    Double-quoted arguments understand \\n, \\r, \\t, \\b, \\a and \\xHH
    escapes; single-quoted ones understand \\'. Raises ValueError for
    unbalanced quotes or a closing quote followed by a non-space character.
    """
    data = _as_bytes(line)
    nul = data.find(b"\0")
    if nul != -1:
        data = data[:nul]
    size = len(data)

    def at(k: int) -> int:
        return data[k] if k < size else 0

    args: list[bytes] = []
    pos = 0
    while True:
        while pos < size and data[pos] in _SPACE:
            pos += 1
        if pos >= size:
            return args
        current = bytearray()
        in_double = in_single = done = False
        while not done:
            c = at(pos)
            if in_double:
                if (
                    c == _BACKSLASH
                    and at(pos + 1) == ord("x")
                    and at(pos + 2) in _HEX_DIGITS
                    and at(pos + 3) in _HEX_DIGITS
                ):
                    current.append(int(bytes((at(pos + 2), at(pos + 3))), 16))
                    pos += 3
                elif c == _BACKSLASH and at(pos + 1):
                    pos += 1
                    current.append(_UNESCAPES.get(data[pos], data[pos]))
                elif c == _DQUOTE:
                    following = at(pos + 1)
                    if following and following not in _SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif c == 0:
                    raise ValueError("unterminated double quote")
                else:
                    current.append(c)
            elif in_single:
                if c == _BACKSLASH and at(pos + 1) == _SQUOTE:
                    pos += 1
                    current.append(_SQUOTE)
                elif c == _SQUOTE:
                    following = at(pos + 1)
                    if following and following not in _SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif c == 0:
                    raise ValueError("unterminated single quote")
                else:
                    current.append(c)
            elif c in _TOKEN_END:
                done = True
            elif c == _DQUOTE:
                in_double = True
            elif c == _SQUOTE:
                in_single = True
            else:
                current.append(c)
            if pos < size:
                pos += 1
        args.append(bytes(current))


def join(parts: Iterable[BytesLike], sep: BytesLike) -> DynamicString:
    """Join ``parts`` with ``sep`` into a new dynamic string."""
    separator = _as_bytes(sep)
    result = DynamicString.empty()
    for index, part in enumerate(parts):
        if index:
            result.cat(separator)
        result.cat(part)
    return result