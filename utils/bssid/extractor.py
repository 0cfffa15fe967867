"""
Interface extraction from raw device CLI output.

Strategy:
1. Parse the interface table (full records)
2. Scan lines that mention a BSSID for addresses the table did not cover
3. Merge in that order, keeping the first entry seen for each MAC
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Optional

from .constants import MODE_ACCESS
from .models import InterfaceEntry
from .parsers import parse_interface_table, scan_bssid_lines
from .patterns import PatternSet, get_pattern_set

logger = logging.getLogger(__name__)

ExtractionStrategy = Callable[[str, Optional[PatternSet]], list[InterfaceEntry]]

# Order matters: earlier strategies win on duplicate addresses
EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    parse_interface_table,
    scan_bssid_lines,
)


def extract_interfaces(raw_output: str, patterns: Optional[PatternSet] = None) -> list[InterfaceEntry]:
    """
    Extract interface entries from raw CLI output.

    Args:
        raw_output: Output of one device's interface command.
        patterns: Compiled patterns (defaults to the shared set).

    Returns:
        Entries with unique MACs; table rows first, then BSSID-only entries.
    """
    if not raw_output:
        return []

    patterns = patterns or get_pattern_set()
    results = [strategy(raw_output, patterns) for strategy in EXTRACTION_STRATEGIES]
    return merge_entries(*results)


def extract_addresses(raw_output: str, patterns: Optional[PatternSet] = None) -> list[str]:
    """Extract only the MAC addresses from raw CLI output."""
    return extract_macs(extract_interfaces(raw_output, patterns))


def extract_macs(entries: Iterable[InterfaceEntry]) -> list[str]:
    """Project a sequence of entries onto their MAC addresses."""
    return [entry.mac for entry in entries]


def merge_entries(*sequences: Iterable[InterfaceEntry]) -> list[InterfaceEntry]:
    """
    Concatenate entry sequences, dropping repeated MACs.

    The first entry for an address is kept, so a full table row beats a
    later address-only mention. Entries without a MAC are always kept.
    """
    merged = []
    seen: set[str] = set()

    for sequence in sequences:
        for entry in sequence:
            if entry.mac:
                if entry.mac in seen:
                    continue
                seen.add(entry.mac)
            merged.append(entry)

    logger.debug(f"Merged {len(merged)} unique interface entries")
    return merged


def filter_access_interfaces(
    entries: Iterable[InterfaceEntry],
    access_mode: str = MODE_ACCESS,
) -> list[InterfaceEntry]:
    """Keep only client-serving interfaces (mode column equal to access_mode)."""
    return [entry for entry in entries if entry.has_mode(access_mode)]


def flatten_cli_output(value: Any) -> str:
    """
    Turn one device's CLI result payload into plain text.

    The device API returns either a string, or a list of objects each with
    an 'output' key (joined with newlines). Anything else is rendered as
    JSON text so the parsers still get a string.
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return '\n'.join(
            item['output'] for item in value
            if isinstance(item, dict) and isinstance(item.get('output'), str)
        )
    return json.dumps(value)
