"""
MAC address canonicalization.

HiveOS and the surrounding tooling print addresses in several layouts:
- 0011.2233.4455 (dotted triplets)
- 001122334455 (no separators)
- 00-11-22-33-44-55 (dash separated)
- 00:11:22:33:44:55 (colon separated)

All of them map to the canonical form 00:11:22:33:44:55.
"""

from __future__ import annotations

import re
import string

from .constants import MAC_HEX_DIGITS, MAC_SEPARATOR

_HEX_DIGITS = frozenset(string.hexdigits)
_CANONICAL_MAC_RE = re.compile(r'^[0-9A-F]{2}(?::[0-9A-F]{2}){5}$')


def normalize_mac(token: str) -> str:
    """
    Normalize a MAC address to uppercase colon separated pairs.

    Separators of any kind are dropped before regrouping. Input that does
    not reduce to exactly 12 hex digits is returned uppercased and
    otherwise unchanged.

    Args:
        token: Address as printed by the device.

    Returns:
        Canonical address, or the uppercased token if it is not a MAC.
    """
    hex_only = ''.join(c for c in token if c in _HEX_DIGITS)

    if len(hex_only) != MAC_HEX_DIGITS:
        return token.upper()

    pairs = [hex_only[i:i + 2] for i in range(0, MAC_HEX_DIGITS, 2)]
    return MAC_SEPARATOR.join(pairs).upper()


def is_canonical_mac(value: str) -> bool:
    """Check whether a value is already in canonical XX:XX:XX:XX:XX:XX form."""
    return bool(_CANONICAL_MAC_RE.match(value))
