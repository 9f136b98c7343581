"""
IP Prefix Module

Provides canonical IPv4/IPv6 prefixes over a single 128-bit address model,
CIDR parsing, subnet min/max/range, containment checks and the binary
prefix layout.
"""

from ipprefix.prefix.address import (
    AddressValue,
    is_ipv4_mapped,
    effective_bit_width,
)
from ipprefix.prefix.errors import (
    ErrorKind,
    ParseError,
    PrefixError,
    render_error,
)
from ipprefix.prefix.parser import parse_cidr, parse_address
from ipprefix.prefix.canonical import canonicalize
from ipprefix.prefix.core import (
    IPPrefix,
    make_prefix,
    subnet_min,
    subnet_max,
    subnet_range,
    is_subnet_of,
    format_prefix,
)
from ipprefix.prefix.cast import (
    ValueKind,
    PrefixCastOperator,
    encode_address,
    decode_address,
    encode_prefix,
    decode_prefix,
)
from ipprefix.prefix.batch import RowOutcome, apply_rows

__all__ = [
    "AddressValue",
    "is_ipv4_mapped",
    "effective_bit_width",
    "ErrorKind",
    "ParseError",
    "PrefixError",
    "render_error",
    "parse_cidr",
    "parse_address",
    "canonicalize",
    "IPPrefix",
    "make_prefix",
    "subnet_min",
    "subnet_max",
    "subnet_range",
    "is_subnet_of",
    "format_prefix",
    "ValueKind",
    "PrefixCastOperator",
    "encode_address",
    "decode_address",
    "encode_prefix",
    "decode_prefix",
    "RowOutcome",
    "apply_rows",
]
