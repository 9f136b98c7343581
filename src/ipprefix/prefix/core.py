"""
Core IP prefix functionality.

An IPPrefix pairs a canonical network address with its prefix length.
Masking happens once, when the prefix is made; every query below reads the
stored canonical value and cannot fail.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass

from netaddr import IPAddress

from ipprefix.prefix.address import AddressValue
from ipprefix.prefix.canonical import (
    canonicalize,
    check_prefix_length,
    host_mask,
    mask_address,
)
from ipprefix.prefix.errors import PrefixError
from ipprefix.prefix.parser import MAX_MASK, parse_address, parse_cidr


@dataclass(frozen=True)
class IPPrefix:
    """A CIDR network: canonical base address plus prefix length."""
    network_address: AddressValue
    prefix_length: int

    def __post_init__(self):
        check_prefix_length(self.network_address, self.prefix_length)
        if canonicalize(self.network_address, self.prefix_length) != self.network_address:
            raise ValueError(
                f"{self.network_address} is not the base address of a "
                f"/{self.prefix_length} network"
            )

    @property
    def is_ipv4(self) -> bool:
        return self.network_address.is_ipv4_mapped

    @property
    def bit_width(self) -> int:
        return self.network_address.bit_width

    @property
    def version(self) -> int:
        return 4 if self.is_ipv4 else 6

    def __str__(self) -> str:
        return format_prefix(self)


def _coerce_prefix_length(prefix_length) -> int:
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise PrefixError.invalid_mask(str(prefix_length))
    if not 0 <= prefix_length <= MAX_MASK:
        raise PrefixError.invalid_mask(str(prefix_length))
    return prefix_length


def _coerce_address(address) -> AddressValue:
    if isinstance(address, AddressValue):
        return address
    if isinstance(address, IPAddress):
        return AddressValue.from_netaddr(address)
    if isinstance(address, str):
        return parse_address(address)
    raise TypeError(f"Cannot build an IP prefix from {type(address).__name__}")


def make_prefix(address, prefix_length: int | None = None) -> IPPrefix:
    """Build a canonical IPPrefix.

    make_prefix('10.1.2.3/8') parses CIDR text. make_prefix(address, n)
    accepts an AddressValue, a netaddr IPAddress or an address literal.

    Raises:
        PrefixError: on malformed text, bad address or mask, or a mask
            wider than the address family
    """
    if prefix_length is None:
        if not isinstance(address, str):
            raise TypeError("make_prefix() without a prefix length requires CIDR text")
        network, length = parse_cidr(address)
        return IPPrefix(network, length)

    addr = _coerce_address(address)
    length = _coerce_prefix_length(prefix_length)
    return IPPrefix(canonicalize(addr, length), length)


def subnet_min(prefix: IPPrefix) -> AddressValue:
    """Smallest address of the network."""
    return prefix.network_address


def subnet_max(prefix: IPPrefix) -> AddressValue:
    """Largest address of the network: every host bit set."""
    hosts = host_mask(prefix.bit_width, prefix.prefix_length)
    return AddressValue(prefix.network_address.value | hosts)


def subnet_range(prefix: IPPrefix) -> tuple[AddressValue, AddressValue]:
    """(smallest, largest) address of the network."""
    return subnet_min(prefix), subnet_max(prefix)


def is_subnet_of(outer: IPPrefix, candidate: AddressValue | IPPrefix) -> bool:
    """Check whether an address or prefix falls within outer.

    An address is masked with outer's prefix length, in outer's effective
    width, and compared with outer's network address. A prefix must also be
    at least as specific as outer.
    """
    if isinstance(candidate, IPPrefix):
        if candidate.prefix_length < outer.prefix_length:
            return False
        candidate = candidate.network_address
    elif not isinstance(candidate, AddressValue):
        raise TypeError(f"Cannot test containment of {type(candidate).__name__}")

    masked = mask_address(candidate, outer.bit_width, outer.prefix_length)
    return masked == outer.network_address


def format_prefix(prefix: IPPrefix) -> str:
    """Render as 'ip/prefix', dotted quad for IPv4-mapped addresses."""
    return f"{prefix.network_address}/{prefix.prefix_length}"
