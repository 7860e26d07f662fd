"""
Core IP range functionality.

A range is an inclusive, contiguous span of addresses of a single family,
independent of CIDR alignment. Ranges are only built through new_range(),
which returns None for anything that is not a valid range.
"""

import ipaddress
import logging
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from netaddr import INET_PTON, AddrFormatError, IPAddress


logger = logging.getLogger(__name__)

# Anything new_range() and Range.contains() know how to read as an address
AddressLike = IPAddress | ipaddress.IPv4Address | ipaddress.IPv6Address | str | bytes


class Family(str, Enum):
    """IP address families."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"

    @property
    def bits(self) -> int:
        return 32 if self is Family.IPV4 else 128

    @property
    def byte_width(self) -> int:
        return self.bits // 8


def to_address(value: AddressLike) -> IPAddress:
    """Read an address value into a netaddr IPAddress, collapsing IPv4-mapped IPv6.

    Raises AddrFormatError, ValueError or TypeError for values that are not
    an IP address.
    """
    if isinstance(value, IPAddress):
        address = IPAddress(value)
    elif isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        address = IPAddress(str(value))
    elif isinstance(value, (bytes, bytearray)):
        if len(value) not in (4, 16):
            raise ValueError(f"packed address must be 4 or 16 bytes, got {len(value)}")
        address = IPAddress(int.from_bytes(value, "big"), 4 if len(value) == 4 else 6)
    elif isinstance(value, str):
        # no inet_aton shorthand: "010.0.0.1", "10.1" and "0x0a000001" are rejected
        address = IPAddress(value.strip(), flags=INET_PTON)
    else:
        raise TypeError(f"unsupported address type: {type(value).__name__}")

    if address.version == 6 and address.is_ipv4_mapped():
        return address.ipv4()
    return address


def family_of(address: IPAddress) -> Family:
    """Family of an already normalized address."""
    return Family.IPV4 if address.version == 4 else Family.IPV6


def _v4_to_int(address: IPAddress) -> int:
    """Unsigned 32-bit value of an IPv4 address, read big-endian."""
    return struct.unpack('>I', address.packed)[0]


@dataclass(frozen=True)
class _BaseRange(ABC):
    """Behaviour shared by both range variants."""

    start: IPAddress
    end: IPAddress

    @property
    @abstractmethod
    def family(self) -> Family:
        """Address family of both boundaries."""

    def contains(self, address: AddressLike) -> bool:
        """Report whether address falls within [start, end].

        The candidate is normalized first, so ::ffff:10.0.0.1 is tested as
        10.0.0.1. Addresses of the other family, or values that are not
        addresses at all, are never contained.
        """
        try:
            candidate = to_address(address)
        except (AddrFormatError, ValueError, TypeError) as e:
            logger.debug(f"Not an address, not contained in {self}: {address!r} ({e})")
            return False

        if family_of(candidate) is not self.family:
            return False

        packed = candidate.packed
        return self.start.packed <= packed <= self.end.packed

    def __contains__(self, address: AddressLike) -> bool:
        return self.contains(address)

    @abstractmethod
    def size(self) -> int:
        """Number of addresses in the range, always at least 1."""

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start='{self.start}', end='{self.end}')"


@dataclass(frozen=True, repr=False)
class V4Range(_BaseRange):
    """Inclusive range of IPv4 addresses."""

    @property
    def family(self) -> Family:
        return Family.IPV4

    def size(self) -> int:
        return _v4_to_int(self.end) - _v4_to_int(self.start) + 1


@dataclass(frozen=True, repr=False)
class V6Range(_BaseRange):
    """Inclusive range of IPv6 addresses."""

    @property
    def family(self) -> Family:
        return Family.IPV6

    def size(self) -> int:
        end = int.from_bytes(self.end.packed, "big")
        start = int.from_bytes(self.start.packed, "big")
        return end - start + 1


Range = V4Range | V6Range


def new_range(start: AddressLike, end: AddressLike) -> Range | None:
    """Build the range [start, end].

    Returns a V4Range when both ends are IPv4 (IPv4-mapped IPv6 counts as
    IPv4), a V6Range when both are IPv6, and None when the families differ,
    either end is not an address, or start > end.
    """
    try:
        first = to_address(start)
        last = to_address(end)
    except (AddrFormatError, ValueError, TypeError) as e:
        logger.debug(f"Invalid range {start!r}-{end!r}: {e}")
        return None

    family = family_of(first)
    if family is not family_of(last):
        logger.debug(f"Invalid range {first}-{last}: address families differ")
        return None

    if first.packed > last.packed:
        logger.debug(f"Invalid range {first}-{last}: start is after end")
        return None

    if family is Family.IPV4:
        return V4Range(start=first, end=last)
    return V6Range(start=first, end=last)
