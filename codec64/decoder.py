"""Base64 decoder.

This module converts base64 text back to bytes. Decoding takes no Config:
both alphabets are accepted through one merged lookup table, CR and LF are
skipped wherever they appear, and the first '=' ends the data.
"""

from __future__ import annotations

import logging

import structlog

from codec64.constants import DECODE_TABLE, PAD, PAD_CHAR, SKIP
from codec64.exceptions import InvalidCharacterError, InvalidLengthError
from codec64.validation import Input, as_bytes

# Routed through stdlib logging; handlers belong to the host application.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
    processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
)

_PAD_BYTE = ord(PAD_CHAR)


def decode(data: Input) -> bytes:
    """Decode base64 text into the bytes it represents.

    Every 4 symbols become 3 bytes; a trailing group of 2 or 3 symbols
    becomes 1 or 2 bytes. Standard and URL-safe symbols may be mixed.

    Args:
        data: The base64 text, as str or bytes-like. A str is read as its
            UTF-8 bytes, so any non-ASCII character is rejected.

    Returns:
        The decoded bytes.

    Raises:
        InvalidCharacterError: If a byte is outside the merged alphabet, or
            anything other than '=' follows the first '='.
        InvalidLengthError: If the symbol count leaves exactly one dangling
            symbol.
        TypeError: If data is not a str or bytes-like object.

    Example:
        >>> decode("Zm9v\\r\\nYmFy")
        b'foobar'
        >>> decode("-_8") == decode("+/8=")
        True
    """
    source = as_bytes(data)
    out = bytearray()
    buf = 0
    modulus = 0
    symbols = 0
    stop = len(source)

    for position, byte in enumerate(source):
        value = DECODE_TABLE[byte]

        if value >= 0:
            buf = ((buf | value) << 6) & 0xFFFFFFFF
        elif value == SKIP:
            continue
        elif value == PAD:
            stop = position
            break
        else:
            logger.debug("decode_rejected", reason="invalid_character", position=position)
            raise InvalidCharacterError(position, byte)

        symbols += 1
        modulus += 1
        if modulus == 4:
            modulus = 0
            out.append((buf >> 22) & 0xFF)
            out.append((buf >> 14) & 0xFF)
            out.append((buf >> 6) & 0xFF)

    for position in range(stop, len(source)):
        if source[position] != _PAD_BYTE:
            logger.debug("decode_rejected", reason="data_after_padding", position=position)
            raise InvalidCharacterError(position, source[position])

    if modulus == 0:
        pass
    elif modulus == 2:
        out.append((buf >> 10) & 0xFF)
    elif modulus == 3:
        out.append((buf >> 16) & 0xFF)
        out.append((buf >> 8) & 0xFF)
    else:
        logger.debug("decode_rejected", reason="invalid_length", symbols=symbols)
        raise InvalidLengthError(symbols)

    return bytes(out)


from_base64 = decode
