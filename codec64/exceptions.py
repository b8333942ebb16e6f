"""Exception classes for codec64.

This module defines custom exception types used throughout the codec64 library.
"""

from __future__ import annotations


class Base64Error(Exception):
    """Base exception class for all codec64 errors."""

    pass


class InvalidCharacterError(Base64Error, ValueError):
    """Exception raised when decode input contains a byte outside the alphabet.

    Also raised when anything other than ``=`` follows the first padding
    character.

    Attributes:
        position: Offset of the offending byte in the input.
        character: The offending byte value.
    """

    def __init__(self, position: int, character: int) -> None:
        """Initialize the error.

        Args:
            position: Offset of the offending byte in the input.
            character: The offending byte value.
        """
        super().__init__(
            f"invalid base64 character {chr(character)!r} at position {position}"
        )
        self.position = position
        self.character = character


class InvalidLengthError(Base64Error, ValueError):
    """Exception raised when decode input holds a dangling 6-bit symbol.

    A symbol count of 1 modulo 4 cannot be reassembled into whole bytes.

    Attributes:
        length: Number of alphabet symbols accepted before the input ended.
    """

    def __init__(self, length: int) -> None:
        """Initialize the error.

        Args:
            length: Number of alphabet symbols accepted before the input ended.
        """
        super().__init__(f"invalid base64 length: {length} symbols")
        self.length = length


class ConfigurationError(Base64Error, ValueError):
    """Exception raised when a Config is constructed with invalid fields."""

    pass
