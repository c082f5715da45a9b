"""Forbidden character handling utilities for OS-facing strings.

This module defines the character-set constants and the low-level byte
helpers used by RestrictedStr: normalizing a set of forbidden characters,
coercing a single character to a byte value, locating and removing
forbidden bytes, and escaping a byte for error messages.

Characters are single bytes. They may be given as an int in range(256),
a length-1 bytes/bytearray, or a str that encodes to exactly one byte
with the filesystem encoding.
"""
from __future__ import annotations

import os
from collections.abc import Iterable

__all__ = ["NUL_CHAR", "NUL_CHARS_SET", "CharLike", "CharSetLike", "to_byte",
           "to_bytes_like", "normalize_char_set", "find_forbidden_char",
           "contains_forbidden_chars", "remove_forbidden_chars",
           "escape_char"]

# The NUL character, illegal in file paths, process arguments and
# environment values on every mainstream operating system.
NUL_CHAR = b"\x00"

# Forbidden set of PathStr.
NUL_CHARS_SET = frozenset(NUL_CHAR)

CharLike = int | bytes | bytearray | str
CharSetLike = bytes | bytearray | str | Iterable[CharLike]


def to_byte(c: CharLike) -> int:
    """Coerce a single character to its byte value.

    Args:
        c (CharLike): An int in range(256), a length-1 bytes/bytearray,
            or a str that encodes to exactly one byte.

    Returns:
        int: The byte value of the character.

    Raises:
        TypeError: If c has an unsupported type.
        ValueError: If c does not denote exactly one byte.
    """
    if isinstance(c, bool):
        raise TypeError("A character can not be a bool")
    if isinstance(c, int):
        if not 0 <= c < 256:
            raise ValueError(f"Byte value must be in range(0, 256), got {c}")
        return c
    if isinstance(c, str):
        c = os.fsencode(c)
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(
                f"A character must be exactly one byte, got {len(c)}")
        return c[0]
    raise TypeError(f"Invalid character type: {type(c)}")


def to_bytes_like(s) -> bytes | bytearray:
    """Return the raw bytes of a plain string.

    Args:
        s: bytes, bytearray, memoryview or str. A str is encoded with
            the filesystem encoding.

    Returns:
        bytes | bytearray: A buffer holding the raw bytes. bytes and
            bytearray inputs are returned as is.

    Raises:
        TypeError: If s is not a supported string type.
    """
    if isinstance(s, (bytes, bytearray)):
        return s
    if isinstance(s, memoryview):
        return s.tobytes()
    if isinstance(s, str):
        return os.fsencode(s)
    raise TypeError(f"Invalid string type: {type(s)}")


def normalize_char_set(chars: CharSetLike) -> frozenset[int]:
    """Build a frozen set of byte values from a character collection.

    A bytes or str argument is treated as a collection of its characters,
    so ``b"\\0/"`` and ``["\\0", "/"]`` denote the same set.

    Args:
        chars (CharSetLike): Characters to include.

    Returns:
        frozenset[int]: The byte values of the characters.
    """
    if isinstance(chars, (bytes, bytearray, str)):
        return frozenset(to_bytes_like(chars))
    return frozenset(to_byte(c) for c in chars)


def find_forbidden_char(data, forbidden: frozenset[int], start: int = 0) -> int:
    """Locate the first forbidden byte.

    Args:
        data: A bytes-like buffer to scan.
        forbidden (frozenset[int]): Forbidden byte values.
        start (int): Position to start scanning from.

    Returns:
        int: Position of the first forbidden byte at or after start,
            or -1 if there is none.
    """
    if len(forbidden) == 1:
        (only,) = forbidden
        return data.find(only, start)
    for pos in range(start, len(data)):
        if data[pos] in forbidden:
            return pos
    return -1


def contains_forbidden_chars(data, forbidden: frozenset[int]) -> bool:
    """Check if a buffer contains any forbidden byte.

    Args:
        data: A bytes-like buffer or str to check.
        forbidden (frozenset[int]): Forbidden byte values.

    Returns:
        bool: True if any byte of data is in forbidden, False otherwise.
    """
    return find_forbidden_char(to_bytes_like(data), forbidden) != -1


def remove_forbidden_chars(buffer: bytearray, forbidden: frozenset[int]) -> int:
    """Remove forbidden bytes from a buffer in place.

    Kept bytes are compacted towards the front in a single left-to-right
    pass, so their relative order is preserved, then the tail is truncated.

    Args:
        buffer (bytearray): Buffer to filter in place.
        forbidden (frozenset[int]): Forbidden byte values.

    Returns:
        int: Number of bytes removed.
    """
    write = 0
    for read in range(len(buffer)):
        b = buffer[read]
        if b not in forbidden:
            if write != read:
                buffer[write] = b
            write += 1
    removed = len(buffer) - write
    del buffer[write:]
    return removed


def escape_char(b: int) -> str:
    """Render a byte as a quoted, printable character literal.

    Args:
        b (int): Byte value.

    Returns:
        str: ``'a'`` for printable ASCII, ``'\\x00'`` style otherwise.
    """
    if 0x20 <= b < 0x7f and b not in (0x27, 0x5c):
        return f"'{chr(b)}'"
    return f"'\\x{b:02x}'"
