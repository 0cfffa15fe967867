"""
Fallback scanner for BSSIDs mentioned outside the interface table.

Example lines:
BSSID: 00:11:22:33:44:55
  wifi0.1 bssid aa:bb:cc:dd:ee:ff (Corp)
"""

from __future__ import annotations

import logging
from typing import Optional

from ..mac import normalize_mac
from ..models import InterfaceEntry
from ..patterns import PatternSet, get_pattern_set
from .common import split_output_lines

logger = logging.getLogger(__name__)


def scan_bssid_lines(output: str, patterns: Optional[PatternSet] = None) -> list[InterfaceEntry]:
    """
    Scan lines mentioning a BSSID keyword for colon separated MACs.

    Only strict hh:hh:hh:hh:hh:hh addresses are picked up here. The same
    address seen on several lines is returned once per occurrence.

    Args:
        output: Raw CLI output from one device.
        patterns: Compiled patterns (defaults to the shared set).

    Returns:
        List of address-only InterfaceEntry objects.
    """
    patterns = patterns or get_pattern_set()
    entries = []

    for line in split_output_lines(output):
        if not patterns.has_bssid_keyword(line):
            continue

        for match in patterns.mac_re.finditer(line):
            entries.append(InterfaceEntry.minimal(normalize_mac(match.group(0))))

    logger.debug(f"Found {len(entries)} BSSID mentions")
    return entries
