"""
Constants for HiveOS interface table extraction.
"""

from __future__ import annotations

# =============================================================================
# TABLE LAYOUT
# =============================================================================

# Column order of 'show interface' rows
INTERFACE_FIELDS = (
    'name',
    'mac',
    'mode',
    'state',
    'channel',
    'vlan',
    'radio',
    'hive',
    'ssid',
)

# One row: nine whitespace separated columns. The MAC column accepts
# colon and dot separated hex, the state column word characters only.
INTERFACE_LINE_PATTERN = (
    r'^(?P<name>\S+)\s+'
    r'(?P<mac>[a-fA-F0-9:.]+)\s+'
    r'(?P<mode>\S+)\s+'
    r'(?P<state>\w+)\s+'
    r'(?P<channel>\S+)\s+'
    r'(?P<vlan>\S+)\s+'
    r'(?P<radio>\S+)\s+'
    r'(?P<hive>\S+)\s+'
    r'(?P<ssid>\S+)\s*$'
)

# Strict colon separated MAC inside free text
MAC_ADDRESS_PATTERN = r'[0-9a-fA-F]{2}(?::[0-9a-fA-F]{2}){5}'

# =============================================================================
# LINE FILTERS
# =============================================================================

# First token of a column header line
DEFAULT_HEADER_MARKERS = ('Name',)

# Separator rows under the header
DEFAULT_SEPARATOR_PREFIX = '-'

# Header fragment labelling the address column
DEFAULT_ADDRESS_HEADER = 'MAC addr'

# Keywords that flag a line as carrying BSSIDs (matched case-insensitively)
DEFAULT_BSSID_KEYWORDS = ('bssid',)

# =============================================================================
# INTERFACE MODES
# =============================================================================

MODE_ACCESS = 'access'

# =============================================================================
# MAC FORMAT
# =============================================================================

MAC_HEX_DIGITS = 12
MAC_SEPARATOR = ':'
