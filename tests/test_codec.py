"""Tests for the Base64 codec class."""

from __future__ import annotations

from codec64 import MIME, STANDARD, URL_SAFE, Base64, ICodec


def roundtrip(codec: ICodec, data: bytes) -> bytes:
    """Encode and decode data through any codec.

    Args:
        codec: The codec to use.
        data: The bytes to encode.

    Returns:
        The decoded bytes.
    """
    return codec.decode(codec.encode(data))


def test_constructors_bind_presets() -> None:
    """Test that the named constructors use the matching presets."""
    assert Base64().config == STANDARD
    assert Base64.standard().config == STANDARD
    assert Base64.url_safe().config == URL_SAFE
    assert Base64.mime().config == MIME


def test_codec_encodes_with_bound_config() -> None:
    """Test that encode honours the bound config."""
    data = bytes([251, 255])

    assert Base64.standard().encode(data) == "+/8="
    assert Base64.url_safe().encode(data) == "-_8"
    assert Base64(STANDARD.replace(line_length=4)).encode("foobar") == "Zm9v\r\nYmFy"


def test_codec_decodes_any_variant() -> None:
    """Test that decode ignores the bound config."""
    codec = Base64.standard()

    assert codec.decode("-_8") == bytes([251, 255])
    assert codec.decode("Zm9v\r\nYmFy") == b"foobar"


def test_codec_satisfies_interface() -> None:
    """Test that every preset codec round-trips through the ICodec interface."""
    data = bytes(range(256))

    for codec in (Base64.standard(), Base64.url_safe(), Base64.mime()):
        assert roundtrip(codec, data) == data


def test_codecs_read_each_other() -> None:
    """Test that text written by one codec is readable by another."""
    data = b"\xfb\xff\x00hello"

    assert Base64.standard().decode(Base64.url_safe().encode(data)) == data
    assert Base64.url_safe().decode(Base64.mime().encode(data)) == data


def test_repr() -> None:
    """Test the codec representation names its config."""
    assert repr(Base64.url_safe()) == (
        "Base64(Config(url_safe=True, pad=False, line_length=None))"
    )
