"""
Canonical 128-bit address values.

Every address lives in the IPv6 address space. IPv4 addresses are held in
IPv4-mapped form (::ffff:a.b.c.d) and keep 32-bit semantics wherever the
bit width matters.
"""

from dataclasses import dataclass

from netaddr import IPAddress


ADDRESS_BYTES = 16

IPV4_BITS = 32
IPV6_BITS = 128

IPV4_ALL_ONES = 0xFFFFFFFF
IPV6_ALL_ONES = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF

IPV4_MAPPED_MARKER = 0xFFFF00000000


@dataclass(frozen=True, order=True)
class AddressValue:
    """An IP address as an unsigned 128-bit integer."""
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= IPV6_ALL_ONES:
            raise ValueError(f"{self.value!r} is not a valid 128-bit address value")

    @classmethod
    def from_bytes(cls, data: bytes) -> "AddressValue":
        """Build from 16 network-order bytes."""
        if len(data) != ADDRESS_BYTES:
            raise ValueError(f"Expected {ADDRESS_BYTES} address bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_ipv4(cls, value: int) -> "AddressValue":
        """Embed a 32-bit IPv4 value in IPv4-mapped form."""
        if not 0 <= value <= IPV4_ALL_ONES:
            raise ValueError(f"{value!r} is not a valid IPv4 address value")
        return cls(IPV4_MAPPED_MARKER | value)

    @classmethod
    def from_netaddr(cls, ip: IPAddress) -> "AddressValue":
        # ipv6() maps v4 addresses to ::ffff:a.b.c.d
        return cls(int(ip.ipv6()))

    @property
    def is_ipv4_mapped(self) -> bool:
        return (self.value >> 32) == 0xFFFF

    @property
    def bit_width(self) -> int:
        return IPV4_BITS if self.is_ipv4_mapped else IPV6_BITS

    @property
    def packed(self) -> bytes:
        return self.value.to_bytes(ADDRESS_BYTES, "big")

    @property
    def ipv4_value(self) -> int:
        return self.value & IPV4_ALL_ONES

    def to_netaddr(self) -> IPAddress:
        """Return a netaddr address, version 4 for mapped values."""
        if self.is_ipv4_mapped:
            return IPAddress(self.ipv4_value, 4)
        return IPAddress(self.value, 6)

    def __str__(self) -> str:
        return str(self.to_netaddr())


def is_ipv4_mapped(addr: AddressValue) -> bool:
    """Check whether bits 32-79 are 0xFFFF and bits 80-127 are zero."""
    return addr.is_ipv4_mapped


def effective_bit_width(addr: AddressValue) -> int:
    """Return 32 for IPv4-mapped addresses, 128 otherwise."""
    return addr.bit_width


def all_ones(width: int) -> int:
    """All-ones value for a 32 or 128 bit address space."""
    return IPV4_ALL_ONES if width == IPV4_BITS else IPV6_ALL_ONES
