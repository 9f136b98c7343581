"""
Prefix masking.

Masks are built from the all-ones value of the effective width shifted
right by the prefix length, so prefix length 0 yields the full all-ones
host mask without any shift-by-width arithmetic.
"""

from ipprefix.prefix.address import AddressValue, all_ones
from ipprefix.prefix.errors import PrefixError


def check_prefix_length(addr: AddressValue, prefix_length: int) -> None:
    """Raise PrefixError unless prefix_length fits the address family."""
    width = addr.bit_width
    if prefix_length < 0:
        raise PrefixError.invalid_mask(str(prefix_length))
    if prefix_length > width:
        raise PrefixError.mask_exceeds_width(str(prefix_length), prefix_length, width)


def host_mask(width: int, prefix_length: int) -> int:
    """Bits past the first prefix_length bits of a width-bit address."""
    return all_ones(width) >> prefix_length


def mask_address(addr: AddressValue, width: int, prefix_length: int) -> AddressValue:
    """Clear the host bits of addr, measured in a width-bit space.

    Only the low `width` bits are touched, which leaves the ::ffff: marker
    of a mapped address intact when width is 32.
    """
    return AddressValue(addr.value & ~host_mask(width, prefix_length))


def canonicalize(addr: AddressValue, prefix_length: int) -> AddressValue:
    """Zero every bit of addr beyond prefix_length within its effective width."""
    check_prefix_length(addr, prefix_length)
    return mask_address(addr, addr.bit_width, prefix_length)
