"""
Parser for HiveOS 'show interface' table output.

Example output:
Name     MAC addr           Mode   State  Chan(Width) VLAN  Radio Hive SSID
------   ---------------    -----  -----  ----------- ----  ----- ---- ----
wifi0    00:11:22:33:44:55  AP     up     11(20)      1     wifi0 hive1 TestSSID
wifi1    AA:BB:CC:DD:EE:FF  AP     up     36(80)      10    wifi1 hive2 Corp
"""

from __future__ import annotations

import logging
from typing import Optional

from ..mac import normalize_mac
from ..models import InterfaceEntry
from ..patterns import PatternSet, get_pattern_set
from .common import split_output_lines

logger = logging.getLogger(__name__)


def parse_interface_table(output: str, patterns: Optional[PatternSet] = None) -> list[InterfaceEntry]:
    """
    Parse interface table output.

    Rows that do not split into the nine expected columns are skipped.
    Repeated rows produce repeated entries.

    Args:
        output: Raw CLI output from one device.
        patterns: Compiled patterns (defaults to the shared set).

    Returns:
        List of InterfaceEntry objects in line order.
    """
    patterns = patterns or get_pattern_set()
    entries = []

    for line in split_output_lines(output):
        if patterns.is_skipped_line(line):
            continue

        entry = _parse_interface_line(line, patterns)
        if entry:
            entries.append(entry)

    logger.debug(f"Parsed {len(entries)} interface rows")
    return entries


def _parse_interface_line(line: str, patterns: PatternSet) -> Optional[InterfaceEntry]:
    """Parse a single table row."""
    match = patterns.line_re.match(line)
    if not match:
        return None

    fields = match.groupdict()
    fields['mac'] = normalize_mac(fields['mac'])
    return InterfaceEntry(**fields)
