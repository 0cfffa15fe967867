"""
BSSID extraction package for bssidscan.

Turns HiveOS interface CLI output into normalized InterfaceEntry records:
- Table parsing for full 'show interface' rows
- BSSID line scanning for addresses mentioned outside the table
- MAC canonicalization and de-duplication across both
"""

from .models import InterfaceEntry

from .mac import normalize_mac, is_canonical_mac

from .patterns import (
    PatternSet,
    PatternCompileError,
    get_pattern_set,
    reset_pattern_set,
    pattern_set_from_settings,
)

from .parsers import parse_interface_table, scan_bssid_lines

from .extractor import (
    EXTRACTION_STRATEGIES,
    extract_interfaces,
    extract_addresses,
    extract_macs,
    merge_entries,
    filter_access_interfaces,
    flatten_cli_output,
)

__all__ = [
    # Models
    'InterfaceEntry',

    # MAC handling
    'normalize_mac',
    'is_canonical_mac',

    # Patterns
    'PatternSet',
    'PatternCompileError',
    'get_pattern_set',
    'reset_pattern_set',
    'pattern_set_from_settings',

    # Parsers
    'parse_interface_table',
    'scan_bssid_lines',

    # Extraction
    'EXTRACTION_STRATEGIES',
    'extract_interfaces',
    'extract_addresses',
    'extract_macs',
    'merge_entries',
    'filter_access_interfaces',
    'flatten_cli_output',
]
