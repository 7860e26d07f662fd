"""
iprange - Inclusive IPv4/IPv6 address ranges

A small value type for contiguous address ranges that do not need to be
CIDR aligned, for use in ACLs, scanners and allocation tools.
"""

from iprange.core import (
    Family,
    Range,
    V4Range,
    V6Range,
    new_range,
)

__version__ = "0.1.0"

__all__ = [
    "Family",
    "Range",
    "V4Range",
    "V6Range",
    "new_range",
]
