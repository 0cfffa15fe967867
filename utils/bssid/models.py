"""
Data models for extracted interface records.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .constants import MODE_ACCESS


@dataclass(frozen=True)
class InterfaceEntry:
    """
    One row of HiveOS interface output.

    Every field is text; an empty string means the value was not present
    in the source (entries found by the BSSID line scan only carry a MAC).
    """
    name: str = ''
    mac: str = ''
    mode: str = ''
    state: str = ''
    channel: str = ''  # e.g. '36(80)' - channel and width
    vlan: str = ''
    radio: str = ''
    hive: str = ''
    ssid: str = ''

    @classmethod
    def minimal(cls, mac: str) -> InterfaceEntry:
        """Create an entry that only carries an address."""
        return cls(mac=mac)

    @property
    def is_access(self) -> bool:
        """Whether the interface serves clients (mode 'access')."""
        return self.has_mode(MODE_ACCESS)

    def has_mode(self, mode: str) -> bool:
        """Compare the mode column case-insensitively."""
        return self.mode.lower() == mode.lower()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
