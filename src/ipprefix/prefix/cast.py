"""
Conversions between IP prefixes and host value types.

Binary layout:
    address: 16 bytes, network byte order
    prefix:  16 address bytes followed by 1 prefix-length byte (17 bytes)

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from enum import Enum

from ipprefix.prefix.address import ADDRESS_BYTES, AddressValue
from ipprefix.prefix.core import IPPrefix, format_prefix, make_prefix
from ipprefix.prefix.errors import PrefixError


PREFIX_BYTES = ADDRESS_BYTES + 1


class ValueKind(str, Enum):
    """Host value types a prefix can be converted from or to."""
    VARCHAR = "VARCHAR"
    VARBINARY = "VARBINARY"
    IPADDRESS = "IPADDRESS"
    IPPREFIX = "IPPREFIX"
    BIGINT = "BIGINT"


def encode_address(address: AddressValue) -> bytes:
    """16-byte network-order form of an address."""
    return address.packed


def decode_address(data: bytes) -> AddressValue:
    if len(data) != ADDRESS_BYTES:
        raise PrefixError.unsupported_conversion(
            f"{ValueKind.VARBINARY.value}({len(data)})", ValueKind.IPADDRESS.value
        )
    return AddressValue.from_bytes(data)


def encode_prefix(prefix: IPPrefix) -> bytes:
    """17-byte form of a prefix: address bytes then the prefix length."""
    return prefix.network_address.packed + bytes([prefix.prefix_length])


def decode_prefix(data: bytes) -> IPPrefix:
    """Load a prefix from its 17-byte form.

    The prefix byte is validated against the address family and the
    address is canonicalized, so stored values that were never masked
    still load as valid prefixes.
    """
    if len(data) != PREFIX_BYTES:
        raise PrefixError.unsupported_conversion(
            f"{ValueKind.VARBINARY.value}({len(data)})", ValueKind.IPPREFIX.value
        )
    address = AddressValue.from_bytes(data[:ADDRESS_BYTES])
    return make_prefix(address, data[ADDRESS_BYTES])


class PrefixCastOperator:
    """Casts between IPPREFIX and the host's text and binary types."""

    SUPPORTED_FROM = frozenset({ValueKind.VARCHAR, ValueKind.VARBINARY})
    SUPPORTED_TO = frozenset({ValueKind.VARCHAR, ValueKind.VARBINARY})

    def is_supported_from_type(self, kind: ValueKind) -> bool:
        return ValueKind(kind) in self.SUPPORTED_FROM

    def is_supported_to_type(self, kind: ValueKind) -> bool:
        return ValueKind(kind) in self.SUPPORTED_TO

    def cast_to(self, value: str | bytes, source: ValueKind) -> IPPrefix:
        """Convert a host value of type `source` to an IPPrefix.

        Raises:
            PrefixError: parse errors for text, UNSUPPORTED_CONVERSION for
                unknown pairings or malformed binary
        """
        source = ValueKind(source)
        if source == ValueKind.VARCHAR and isinstance(value, str):
            return make_prefix(value)
        if source == ValueKind.VARBINARY and isinstance(value, (bytes, bytearray)):
            return decode_prefix(bytes(value))
        raise PrefixError.unsupported_conversion(source.value, ValueKind.IPPREFIX.value)

    def cast_from(self, prefix: IPPrefix, target: ValueKind) -> str | bytes:
        """Convert an IPPrefix to a host value of type `target`."""
        target = ValueKind(target)
        if target == ValueKind.VARCHAR:
            return format_prefix(prefix)
        if target == ValueKind.VARBINARY:
            return encode_prefix(prefix)
        raise PrefixError.unsupported_conversion(ValueKind.IPPREFIX.value, target.value)
