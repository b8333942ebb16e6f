"""Codec64 Python implementation.

This package provides a Base64 codec covering standard RFC 4648 base64, the
URL-safe variant and line-wrapped MIME base64.

Main Components:
    - encode / decode: Pure conversion functions
    - Config: Alphabet, padding and line wrapping policy, with presets
    - Base64: Codec object bound to a Config
    - Interfaces: Protocol definitions for encoders and decoders

Example:
    >>> from codec64 import MIME, decode, encode
    >>> text = encode(b"hello", MIME)
    >>> decode(text)
    b'hello'
"""

import logging

from codec64.codec import Base64
from codec64.config import MIME, STANDARD, URL_SAFE, Config
from codec64.decoder import decode, from_base64
from codec64.encoder import encode, to_base64
from codec64.exceptions import (
    Base64Error,
    ConfigurationError,
    InvalidCharacterError,
    InvalidLengthError,
)
from codec64.interfaces import ICodec, IDecoder, IEncoder

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # API
    "encode",
    "decode",
    "to_base64",
    "from_base64",
    "Base64",
    # Configuration
    "Config",
    "STANDARD",
    "URL_SAFE",
    "MIME",
    # Interfaces
    "ICodec",
    "IDecoder",
    "IEncoder",
    # Exceptions
    "Base64Error",
    "ConfigurationError",
    "InvalidCharacterError",
    "InvalidLengthError",
]
