"""Encoding configuration for codec64.

This module defines the Config value type and the three standard presets.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from codec64.constants import MIME_LINE_LENGTH
from codec64.exceptions import ConfigurationError


@dataclass(frozen=True)
class Config:
    """Configuration parameters for base64 encoding.

    Decoding takes no configuration; a Config only shapes encoder output.

    Attributes:
        url_safe: True to use the URL-safe alphabet ('-' and '_'), False to
            use the standard alphabet ('+' and '/').
        pad: True to pad output with '=' characters.
        line_length: Wrap output lines at this many characters with CRLF, or
            None to disable line wrapping.
    """

    url_safe: bool
    pad: bool
    line_length: int | None

    def __post_init__(self) -> None:
        """Validate field values.

        Raises:
            ConfigurationError: If any field has an invalid value.
        """
        if not isinstance(self.url_safe, bool):
            raise ConfigurationError(f"url_safe must be a bool, got {self.url_safe!r}")

        if not isinstance(self.pad, bool):
            raise ConfigurationError(f"pad must be a bool, got {self.pad!r}")

        if self.line_length is not None:
            if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
                raise ConfigurationError(
                    f"line_length must be an int or None, got {self.line_length!r}"
                )
            if self.line_length <= 0:
                raise ConfigurationError(
                    f"line_length must be positive, got {self.line_length}"
                )

    def replace(self, **overrides: Any) -> Config:
        """Copy this config, overriding the named fields.

        Args:
            **overrides: Any of url_safe, pad, line_length.

        Returns:
            A new Config.

        Raises:
            ConfigurationError: If an override has an invalid value.
            TypeError: If an override names an unknown field.

        Example:
            >>> STANDARD.replace(pad=False)
            Config(url_safe=False, pad=False, line_length=None)
        """
        return dataclasses.replace(self, **overrides)


# RFC 4648 standard base64
STANDARD = Config(url_safe=False, pad=True, line_length=None)

# RFC 4648 base64url
URL_SAFE = Config(url_safe=True, pad=False, line_length=None)

# RFC 2045 MIME base64
MIME = Config(url_safe=False, pad=True, line_length=MIME_LINE_LENGTH)
