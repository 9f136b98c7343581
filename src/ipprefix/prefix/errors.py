"""
Error taxonomy for prefix parsing and conversion.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Why a value failed to become an IP prefix."""
    MISSING_SLASH = "missing_slash"
    INVALID_ADDRESS = "invalid_address"
    INVALID_MASK = "invalid_mask"
    MASK_EXCEEDS_WIDTH = "mask_exceeds_width"
    UNSUPPORTED_CONVERSION = "unsupported_conversion"


@dataclass(frozen=True)
class ParseError:
    """Structured failure details.

    Attributes:
        kind: Error classification
        text: Offending input or substring (whole input, address part or mask part)
        value: Rejected numeric value, for width violations
        bound: Bit width that was exceeded (32 or 128)
        source: Source type name, for conversions
        target: Target type name, for conversions
    """
    kind: ErrorKind
    text: str | None = None
    value: int | None = None
    bound: int | None = None
    source: str | None = None
    target: str | None = None

    @property
    def message(self) -> str:
        if self.kind == ErrorKind.MISSING_SLASH:
            return (
                "Invalid CIDR IP address specified. "
                f"Expected IP/PREFIX format, got '{self.text}'"
            )
        if self.kind == ErrorKind.INVALID_ADDRESS:
            return f"Invalid IP address '{self.text}'"
        if self.kind == ErrorKind.INVALID_MASK:
            return f"Mask value '{self.text}' not a valid mask"
        if self.kind == ErrorKind.MASK_EXCEEDS_WIDTH:
            return f"CIDR value '{self.text}' is > network bit count '{self.bound}'"
        return f"Cast from {self.source} to {self.target} not yet supported"


class PrefixError(ValueError):
    """Raised when text, bytes or arguments cannot form a valid IP prefix."""

    def __init__(self, error: ParseError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @classmethod
    def missing_slash(cls, text: str) -> "PrefixError":
        return cls(ParseError(ErrorKind.MISSING_SLASH, text=text))

    @classmethod
    def invalid_address(cls, address: str) -> "PrefixError":
        return cls(ParseError(ErrorKind.INVALID_ADDRESS, text=address))

    @classmethod
    def invalid_mask(cls, mask: str) -> "PrefixError":
        return cls(ParseError(ErrorKind.INVALID_MASK, text=mask))

    @classmethod
    def mask_exceeds_width(cls, mask: str, value: int, width: int) -> "PrefixError":
        return cls(ParseError(ErrorKind.MASK_EXCEEDS_WIDTH, text=mask, value=value, bound=width))

    @classmethod
    def unsupported_conversion(cls, source: str, target: str) -> "PrefixError":
        return cls(ParseError(ErrorKind.UNSUPPORTED_CONVERSION, source=source, target=target))


def render_error(error: ParseError, detailed: bool = True) -> str | None:
    """Return the user message, or None when error details are suppressed."""
    if not detailed:
        return None
    return error.message
