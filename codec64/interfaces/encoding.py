"""Encoding interfaces for codec64.

This module defines protocols for converting bytes to base64 text and back,
so callers can accept any compatible codec.
"""

from __future__ import annotations

from typing import Protocol

from codec64.validation import Input


class IEncoder(Protocol):
    """Interface for base64 encoding operations."""

    def encode(self, data: Input) -> str:
        """Encode a value to base64 text.

        Args:
            data: The bytes to encode, or a string to encode as UTF-8.

        Returns:
            The encoded text.
        """
        ...


class IDecoder(Protocol):
    """Interface for base64 decoding operations."""

    def decode(self, data: Input) -> bytes:
        """Decode base64 text to bytes.

        Args:
            data: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text is not valid base64.
        """
        ...


class ICodec(IEncoder, IDecoder, Protocol):
    """Interface for objects that both encode and decode.

    Extends IEncoder with IDecoder.
    """

    pass
