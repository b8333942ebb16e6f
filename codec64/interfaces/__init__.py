"""Codec64 interfaces package.

This package provides protocol definitions for encoding and decoding.
"""

from .encoding import ICodec, IDecoder, IEncoder

__all__ = [
    "ICodec",
    "IDecoder",
    "IEncoder",
]
