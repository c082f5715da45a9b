"""Strings that are guaranteed not to contain a set of forbidden characters.

This module defines RestrictedStr, a mutable byte string wrapper whose
class carries a fixed set of forbidden characters. Every public operation
keeps the invariant that no byte of the content belongs to that set:
checked conversions reject bad input, checked mutations leave the
receiver untouched on failure, and the filtering constructor silently
drops forbidden characters.

While mutating APIs are provided, they are limited to simple operations.
For heavy editing it is cheaper to work on plain bytes or str and convert
back once with a checked constructor.
"""
from __future__ import annotations

import logging
import os
import types
from collections.abc import MutableSequence
from typing import Any, ClassVar

from parameterizable import ParameterizableClass, sort_dict_by_keys

from .exceptions import InvalidCharacterError, InvalidContentError
from .forbidden_chars import (CharLike, CharSetLike, find_forbidden_char,
                              normalize_char_set, remove_forbidden_chars,
                              to_byte, to_bytes_like)

logger = logging.getLogger(__name__)

_PLAIN_STRING_TYPES = (bytes, bytearray, memoryview, str)

# First class registered for each forbidden set; used by without().
_classes_by_char_set: dict[frozenset[int], type[RestrictedStr]] = {}


def _raw_bytes(values) -> bytes | bytearray:
    """Return the raw bytes of a plain string or an iterable of characters."""
    if isinstance(values, RestrictedStr):
        return values._buffer
    if isinstance(values, _PLAIN_STRING_TYPES):
        return to_bytes_like(values)
    return bytes(to_byte(c) for c in values)


class RestrictedStr(MutableSequence, ParameterizableClass):
    """A mutable byte string without the characters of a forbidden set.

    RestrictedStr itself is abstract. Concrete classes fix the forbidden
    set either by subclassing with a class keyword::

        class NoSlashStr(RestrictedStr, forbidden_chars=b"/"):
            pass

    or through the cached factory ``RestrictedStr.without(b"/")``.
    Instances of two classes are interoperable (comparable, concatenable)
    only if their forbidden sets are equal.

    Items are single bytes: reading returns a length-1 bytes, writing
    accepts an int in range(256), a length-1 bytes, or a one-byte str.

    Attributes:
        forbidden_chars (frozenset[int] | None): Byte values that never
            appear in the content. None for the abstract base.
    """

    forbidden_chars: ClassVar[frozenset[int] | None] = None
    _buffer: bytearray

    def __init_subclass__(cls, forbidden_chars: CharSetLike | None = None,
                          **kwargs):
        super().__init_subclass__(**kwargs)
        if forbidden_chars is not None:
            cls.forbidden_chars = normalize_char_set(forbidden_chars)
            _classes_by_char_set.setdefault(cls.forbidden_chars, cls)

    def __init__(self, content: Any = b""):
        """Checked conversion of a plain string.

        Args:
            content: bytes, bytearray, memoryview, str (encoded with the
                filesystem encoding) or another RestrictedStr. The content
                is copied; the input is never modified.

        Raises:
            TypeError: If the class has no forbidden set or content has an
                unsupported type.
            InvalidContentError: If content contains a forbidden character.
                The error carries the first such character and its position.
        """
        forbidden = self._concrete_char_set()
        if (isinstance(content, RestrictedStr)
                and content.forbidden_chars == forbidden):
            self._buffer = bytearray(content._buffer)
        else:
            data = (content._buffer if isinstance(content, RestrictedStr)
                    else to_bytes_like(content))
            pos = find_forbidden_char(data, forbidden)
            if pos != -1:
                raise InvalidContentError(bytes(data[pos:pos + 1]), pos)
            self._buffer = bytearray(data)
        ParameterizableClass.__init__(self)

    @classmethod
    def _concrete_char_set(cls) -> frozenset[int]:
        if cls.forbidden_chars is None:
            raise TypeError(
                f"{cls.__name__} has no forbidden character set; use"
                " RestrictedStr.without() or subclass it with forbidden_chars=")
        return cls.forbidden_chars

    @classmethod
    def _adopt(cls, buffer: bytearray) -> RestrictedStr:
        # buffer must already be free of forbidden bytes and unshared
        result = cls.__new__(cls)
        result._buffer = buffer
        ParameterizableClass.__init__(result)
        return result

    @classmethod
    def without(cls, chars: CharSetLike) -> type[RestrictedStr]:
        """Return the RestrictedStr class for a forbidden set.

        The same class is returned for the same set on every call,
        including named classes such as PathStr.

        Args:
            chars: Forbidden characters, e.g. ``b"\\0/"``.

        Returns:
            type[RestrictedStr]: A concrete class.
        """
        char_set = normalize_char_set(chars)
        found = _classes_by_char_set.get(char_set)
        if found is None:
            name = "RestrictedStr_without_" + "_".join(
                f"{b:02x}" for b in sorted(char_set))
            found = types.new_class(
                name, (RestrictedStr,), {"forbidden_chars": char_set},
                lambda ns: ns.update(__module__=__name__))
        return found

    @classmethod
    def filter(cls, content: Any) -> RestrictedStr:
        """Build an instance by removing every forbidden character.

        Never fails on content. Remaining characters keep their order.

        Args:
            content: bytes, bytearray, memoryview, str or RestrictedStr.

        Returns:
            RestrictedStr: A new instance of cls.
        """
        forbidden = cls._concrete_char_set()
        buffer = bytearray(_raw_bytes(content))
        removed = remove_forbidden_chars(buffer, forbidden)
        if removed:
            logger.debug("Dropped %d forbidden character(s) building %s",
                         removed, cls.__name__)
        return cls._adopt(buffer)

    def _check_char(self, c: CharLike) -> int:
        b = to_byte(c)
        if b in self.forbidden_chars:
            raise InvalidCharacterError(bytes((b,)))
        return b

    def _check_same_char_set(self, other: RestrictedStr) -> None:
        if other.forbidden_chars != self.forbidden_chars:
            raise TypeError(
                f"Can not combine {type(self).__name__} with"
                f" {type(other).__name__}: forbidden character sets differ")

    def get_params(self) -> dict[str, Any]:
        """Return the parameters needed to rebuild this string.

        Returns:
            dict[str, Any]: A sorted dict with the content as bytes.
        """
        params = dict(content=bytes(self._buffer))
        sorted_params = sort_dict_by_keys(params)
        return sorted_params

    def __copy__(self) -> RestrictedStr:
        """Return an independent copy with the same content."""
        params = self.get_params()
        return self.__class__(**params)

    def copy(self) -> RestrictedStr:
        return self.__copy__()

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        """Return the byte at index, or a new instance for a slice.

        Raises:
            IndexError: If index is out of range.
        """
        if isinstance(index, slice):
            return self._adopt(self._buffer[index])
        return bytes((self._buffer[index],))

    def __setitem__(self, index, value: CharLike) -> None:
        """Overwrite the byte at index with value.

        Raises:
            InvalidCharacterError: If value is forbidden. Nothing is written.
            IndexError: If index is out of range.
            TypeError: If index is a slice.
        """
        if isinstance(index, slice):
            raise TypeError(
                f"{type(self).__name__} does not support slice assignment")
        self._buffer[index] = self._check_char(value)

    def __delitem__(self, index) -> None:
        del self._buffer[index]

    def insert(self, index: int, value: CharLike) -> None:
        """Insert a character before index.

        Raises:
            InvalidCharacterError: If value is forbidden.
        """
        self._buffer.insert(index, self._check_char(value))

    def append(self, value: CharLike) -> None:
        """Append a single character.

        Raises:
            InvalidCharacterError: If value is forbidden.
        """
        self._buffer.append(self._check_char(value))

    def extend(self, values) -> None:
        """Append a string.

        A RestrictedStr with the same forbidden set is appended without
        checks. Any other input is copied in, then the appended region is
        validated; on failure it is cut off again, so the receiver keeps
        its previous content and length.

        Args:
            values: RestrictedStr, bytes, bytearray, memoryview, str or an
                iterable of characters.

        Raises:
            TypeError: If values is a RestrictedStr with another forbidden
                set.
            InvalidCharacterError: If values contains a forbidden character.
        """
        if isinstance(values, RestrictedStr):
            self._check_same_char_set(values)
            self._buffer.extend(values._buffer)
            return
        data = _raw_bytes(values)
        orig_len = len(self._buffer)
        self._buffer += data
        pos = find_forbidden_char(self._buffer, self.forbidden_chars, orig_len)
        if pos != -1:
            char = bytes((self._buffer[pos],))
            del self._buffer[orig_len:]
            logger.debug("Rolled back append of %d byte(s) to %s",
                         len(data), type(self).__name__)
            raise InvalidCharacterError(char)

    def clear(self) -> None:
        self._buffer.clear()

    def reverse(self) -> None:
        self._buffer.reverse()

    def _needle(self, value) -> int | bytes | bytearray:
        if isinstance(value, int):
            return to_byte(value)
        if isinstance(value, RestrictedStr):
            self._check_same_char_set(value)
        return _raw_bytes(value)

    def index(self, value, start: int = 0, stop: int | None = None) -> int:
        """Return the first position of a character or substring.

        Raises:
            ValueError: If value is not present.
        """
        return self._buffer.index(self._needle(value), start, stop)

    def remove(self, value) -> None:
        """Remove the first occurrence of a character or substring.

        Raises:
            ValueError: If value is not present.
        """
        needle = self._needle(value)
        pos = self._buffer.index(needle)
        size = 1 if isinstance(needle, int) else len(needle)
        del self._buffer[pos:pos + size]

    def count(self, value) -> int:
        return self._buffer.count(self._needle(value))

    def __contains__(self, value) -> bool:
        return self._needle(value) in self._buffer

    def __iter__(self):
        for b in self._buffer:
            yield bytes((b,))

    def __add__(self, other) -> RestrictedStr:
        if not isinstance(other, (RestrictedStr, *_PLAIN_STRING_TYPES)):
            return NotImplemented
        result = self.copy()
        result.extend(other)
        return result

    def __radd__(self, other) -> RestrictedStr:
        if not isinstance(other, _PLAIN_STRING_TYPES):
            return NotImplemented
        result = self.__class__(other)
        result.extend(self)
        return result

    def __eq__(self, other) -> bool:
        """Compare content byte for byte.

        Plain strings are compared by their raw bytes without validation.
        A RestrictedStr with another forbidden set is not comparable.
        """
        if isinstance(other, RestrictedStr):
            if other.forbidden_chars != self.forbidden_chars:
                return NotImplemented
            return self._buffer == other._buffer
        if isinstance(other, _PLAIN_STRING_TYPES):
            try:
                return self._buffer == to_bytes_like(other)
            except UnicodeEncodeError:
                return False
        return NotImplemented

    __hash__ = None

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def to_bytes(self) -> bytes:
        """Return a copy of the content as bytes."""
        return bytes(self._buffer)

    def __str__(self) -> str:
        return os.fsdecode(bytes(self._buffer))

    def __repr__(self) -> str:
        """Return a reproducible string representation.

        Returns:
            str: Representation including class name and constructor parameters.
        """
        params = self.get_params()
        params_str = ', '.join(f'{k}={v!r}' for k, v in params.items())
        return f'{self.__class__.__name__}({params_str})'


def to_without(content: Any, chars: CharSetLike) -> RestrictedStr:
    """Checked conversion of content to the RestrictedStr class for chars.

    Raises:
        InvalidContentError: If content contains a character from chars.
    """
    return RestrictedStr.without(chars)(content)


def filter_without(content: Any, chars: CharSetLike) -> RestrictedStr:
    """Remove the characters in chars from content and wrap the result."""
    return RestrictedStr.without(chars).filter(content)
