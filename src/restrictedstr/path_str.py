"""NUL-free strings for file paths, process arguments and environment values."""
from __future__ import annotations

from typing import Any

from .forbidden_chars import NUL_CHARS_SET
from .restricted_str import RestrictedStr


class PathStr(RestrictedStr, forbidden_chars=NUL_CHARS_SET):
    """A string without the NUL character.

    Instances are os.PathLike: ``os.fspath()`` returns the raw bytes, so a
    PathStr can be handed directly to ``open()`` and the ``os`` functions.
    """

    def __fspath__(self) -> bytes:
        return bytes(self._buffer)


def to_path_str(content: Any) -> PathStr:
    """Checked conversion to PathStr.

    Args:
        content: bytes, bytearray, memoryview, str or RestrictedStr.

    Returns:
        PathStr: The validated string.

    Raises:
        InvalidContentError: If content contains a NUL character.
    """
    return PathStr(content)
