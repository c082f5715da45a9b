"""Custom exception types for the restrictedstr error-handling taxonomy.

Defines three exception classes:

- ``ForbiddenCharacterError`` — common base, a forbidden character was met.
- ``InvalidCharacterError`` — a single character was rejected at a write
  or append site.
- ``InvalidContentError`` — bulk validation found a forbidden character
  at a known position.

All of them are ``ValueError`` subclasses. Bounds violations are reported
with the builtin ``IndexError``.
"""

from __future__ import annotations

from .forbidden_chars import escape_char


class ForbiddenCharacterError(ValueError):
    """A character from the forbidden set was encountered.

    Args:
        message: Human-readable description of the failure.
        char: The offending character as a length-1 bytes.

    Attributes:
        char: The offending character as a length-1 bytes.
    """

    def __init__(self, message: str, char: bytes) -> None:
        super().__init__(message)
        self.char = char


class InvalidCharacterError(ForbiddenCharacterError):
    """A forbidden character was rejected by a checked mutation.

    The receiver of the mutation is left unchanged.

    Args:
        char: The offending character as a length-1 bytes.
    """

    def __init__(self, char: bytes) -> None:
        super().__init__(
            f"{escape_char(char[0])} is not a valid character"
            " for this type of string.", char)


class InvalidContentError(ForbiddenCharacterError):
    """A checked conversion found a forbidden character.

    Args:
        char: The first offending character as a length-1 bytes.
        position: Zero-based byte offset of char in the input.

    Attributes:
        char: The first offending character.
        position: Zero-based byte offset of char in the input.
    """

    def __init__(self, char: bytes, position: int) -> None:
        super().__init__(
            f"Invalid character ({escape_char(char[0])})"
            f" found at position {position}", char)
        self.position = position
