"""Alphabet and lookup table constants for codec64."""

from __future__ import annotations

_LETTERS_AND_DIGITS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)

STANDARD_ALPHABET = _LETTERS_AND_DIGITS + "+/"
URL_SAFE_ALPHABET = _LETTERS_AND_DIGITS + "-_"

PAD_CHAR = "="
LINE_SEPARATOR = "\r\n"

MIME_LINE_LENGTH = 76

# Sentinels for non-symbol entries of DECODE_TABLE. Symbols occupy 0-63.
INVALID = -1
SKIP = -2
PAD = -3


def _build_decode_table() -> tuple[int, ...]:
    table = [INVALID] * 256

    for alphabet in (STANDARD_ALPHABET, URL_SAFE_ALPHABET):
        for value, char in enumerate(alphabet):
            table[ord(char)] = value

    table[ord("\r")] = SKIP
    table[ord("\n")] = SKIP
    table[ord(PAD_CHAR)] = PAD

    return tuple(table)


# Byte value -> 6-bit value or sentinel. Both alphabets are merged.
DECODE_TABLE = _build_decode_table()
