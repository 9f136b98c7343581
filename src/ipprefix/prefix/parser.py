"""
CIDR text parsing.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re

from netaddr import AddrFormatError, IPAddress

from ipprefix.logging_config import get_logger
from ipprefix.prefix.address import AddressValue
from ipprefix.prefix.canonical import canonicalize
from ipprefix.prefix.errors import PrefixError


logger = get_logger(__name__)

MAX_MASK = 255

_MASK_RE = re.compile(r"[0-9]+")


def parse_address(text: str) -> AddressValue:
    """Parse a bare IPv4 or IPv6 literal.

    IPv4 follows inet_pton rules: exactly four decimal octets.

    Raises:
        PrefixError: INVALID_ADDRESS if text is not a valid literal
    """
    try:
        ip = IPAddress(text)
    except (AddrFormatError, ValueError, TypeError):
        raise PrefixError.invalid_address(text) from None
    return AddressValue.from_netaddr(ip)


def parse_mask(text: str) -> int:
    """Parse a decimal mask in the byte range 0-255."""
    if not _MASK_RE.fullmatch(text):
        raise PrefixError.invalid_mask(text)
    digits = text.lstrip("0") or "0"
    # More than three significant digits can never fit in a byte
    if len(digits) > 3:
        raise PrefixError.invalid_mask(text)
    value = int(digits)
    if value > MAX_MASK:
        raise PrefixError.invalid_mask(text)
    return value


def parse_cidr(text: str) -> tuple[AddressValue, int]:
    """Parse 'ip/prefix' text into a canonical network address and prefix length.

    Checks run in a fixed order: separator, address, mask syntax, then
    mask width against the parsed address family.

    Args:
        text: CIDR text such as '192.168.1.0/24' or '2001:db8::/32'

    Returns:
        Tuple of (network base address, prefix length)

    Raises:
        PrefixError: classified by ErrorKind
    """
    parts = text.split("/")
    if len(parts) != 2:
        logger.debug("Rejecting %r: expected exactly one '/'", text)
        raise PrefixError.missing_slash(text)

    address_part, mask_part = parts
    address = parse_address(address_part)
    mask = parse_mask(mask_part)

    width = address.bit_width
    if mask > width:
        raise PrefixError.mask_exceeds_width(mask_part, mask, width)

    return canonicalize(address, mask), mask
