"""
ipprefix - CIDR prefix arithmetic for query engines

Canonicalizes IPv4 and IPv6 networks over a single 128-bit address model
and answers subnet min/max/range and containment queries, with strict
CIDR text parsing and a structured error taxonomy.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
