"""Base64 codec objects.

This module provides the Base64 class, which binds a Config to the encoder
and decoder functions.
"""

from __future__ import annotations

from codec64.config import MIME, STANDARD, URL_SAFE, Config
from codec64.decoder import decode
from codec64.encoder import encode
from codec64.interfaces.encoding import ICodec
from codec64.validation import Input


class Base64(ICodec):
    """Base64 codec bound to one encoding configuration.

    Encoding follows the bound Config. Decoding ignores it and accepts any
    base64 variant, so a codec can always read back what another codec wrote.

    Attributes:
        config: The configuration used for encoding.
    """

    def __init__(self, config: Config = STANDARD) -> None:
        """Initialize a codec.

        Args:
            config: The configuration used for encoding.
        """
        self.config = config

    @classmethod
    def standard(cls) -> Base64:
        """Create a codec for RFC 4648 standard base64.

        Returns:
            A codec using the STANDARD preset.
        """
        return cls(STANDARD)

    @classmethod
    def url_safe(cls) -> Base64:
        """Create a codec for unpadded RFC 4648 base64url.

        Returns:
            A codec using the URL_SAFE preset.
        """
        return cls(URL_SAFE)

    @classmethod
    def mime(cls) -> Base64:
        """Create a codec for RFC 2045 MIME base64 with 76-character lines.

        Returns:
            A codec using the MIME preset.
        """
        return cls(MIME)

    def encode(self, data: Input) -> str:
        """Encode bytes to base64 text using the bound config.

        Args:
            data: The bytes to encode, or a string to encode as UTF-8.

        Returns:
            The encoded text.
        """
        return encode(data, self.config)

    def decode(self, data: Input) -> bytes:
        """Decode base64 text of any variant to bytes.

        Args:
            data: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            InvalidCharacterError: If the text contains a non-base64 character.
            InvalidLengthError: If the text has a dangling symbol.
        """
        return decode(data)

    def __repr__(self) -> str:
        return f"Base64({self.config!r})"
