"""Input coercion shared by the encoder and decoder."""

from __future__ import annotations

from typing import Union

Input = Union[bytes, bytearray, memoryview, str]


def as_bytes(data: Input) -> bytes:
    """Return the raw byte representation of an encoder or decoder input.

    Strings are taken as their UTF-8 bytes. Byte sequences are copied so the
    caller's buffer is never touched again.

    Args:
        data: The value to coerce.

    Returns:
        The input as immutable bytes.

    Raises:
        TypeError: If data is not a str or bytes-like object.
    """
    if isinstance(data, str):
        return data.encode("utf-8")

    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    raise TypeError(
        f"data must be str, bytes, bytearray or memoryview, not {type(data).__name__}"
    )
