"""
Interface output parsers.

Each parser converts raw device CLI output into InterfaceEntry objects.
"""

from .table import parse_interface_table
from .bssid_lines import scan_bssid_lines

__all__ = [
    'parse_interface_table',
    'scan_bssid_lines',
]
