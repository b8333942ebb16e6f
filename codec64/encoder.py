"""Base64 encoder.

This module converts byte sequences to base64 text under a Config, choosing
the alphabet, padding and CRLF line wrapping the config describes.
"""

from __future__ import annotations

from codec64.config import STANDARD, Config
from codec64.constants import LINE_SEPARATOR, PAD_CHAR, STANDARD_ALPHABET, URL_SAFE_ALPHABET
from codec64.validation import Input, as_bytes


def encode(data: Input, config: Config = STANDARD) -> str:
    """Encode bytes (or the UTF-8 bytes of a string) as base64 text.

    Every 3 input bytes become one 4-character codon. When line wrapping is
    enabled a CRLF is inserted before a codon once the current line holds at
    least ``config.line_length`` characters, so codons are never split and a
    line may overrun the limit by up to 3 characters when the limit is not a
    multiple of 4.

    Args:
        data: The bytes to encode. A str is encoded from its UTF-8 bytes.
        config: Alphabet, padding and line wrapping policy.

    Returns:
        The base64 text. Empty input gives an empty string.

    Raises:
        TypeError: If data is not a str or bytes-like object.

    Example:
        >>> encode(b"foobar")
        'Zm9vYmFy'
        >>> encode(b"f", STANDARD.replace(pad=False))
        'Zg'
    """
    source = as_bytes(data)
    chars = URL_SAFE_ALPHABET if config.url_safe else STANDARD_ALPHABET
    line_length = config.line_length

    out: list[str] = []
    cur_length = 0
    length = len(source)
    remainder = length % 3
    full = length - remainder

    for i in range(0, full, 3):
        if line_length is not None and cur_length >= line_length:
            out.append(LINE_SEPARATOR)
            cur_length = 0

        n = source[i] << 16 | source[i + 1] << 8 | source[i + 2]

        # 24 bits -> four 6-bit symbols
        out.append(chars[(n >> 18) & 63])
        out.append(chars[(n >> 12) & 63])
        out.append(chars[(n >> 6) & 63])
        out.append(chars[n & 63])

        cur_length += 4

    if remainder and line_length is not None and cur_length >= line_length:
        out.append(LINE_SEPARATOR)

    if remainder == 0:
        pass
    elif remainder == 1:
        n = source[full] << 16
        out.append(chars[(n >> 18) & 63])
        out.append(chars[(n >> 12) & 63])
        if config.pad:
            out.append(PAD_CHAR * 2)
    elif remainder == 2:
        n = source[full] << 16 | source[full + 1] << 8
        out.append(chars[(n >> 18) & 63])
        out.append(chars[(n >> 12) & 63])
        out.append(chars[(n >> 6) & 63])
        if config.pad:
            out.append(PAD_CHAR)
    else:
        raise AssertionError(f"unreachable: {length} % 3 == {remainder}")

    return "".join(out)


to_base64 = encode
