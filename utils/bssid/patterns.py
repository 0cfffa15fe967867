"""
Compiled matchers shared by the interface parsers.

A PatternSet is built once and passed by reference into every parse call.
It is immutable, so one instance can serve any number of threads.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .constants import (
    INTERFACE_LINE_PATTERN,
    MAC_ADDRESS_PATTERN,
    DEFAULT_HEADER_MARKERS,
    DEFAULT_SEPARATOR_PREFIX,
    DEFAULT_ADDRESS_HEADER,
    DEFAULT_BSSID_KEYWORDS,
    MODE_ACCESS,
)

logger = logging.getLogger(__name__)

# Global default pattern set
_pattern_set: Optional['PatternSet'] = None
_pattern_set_lock = threading.Lock()


class PatternCompileError(RuntimeError):
    """Raised when the extraction patterns cannot be compiled."""


@dataclass(frozen=True)
class PatternSet:
    """Compiled regexes plus the literal markers used to filter lines."""
    line_re: re.Pattern
    mac_re: re.Pattern
    header_markers: tuple[str, ...] = DEFAULT_HEADER_MARKERS
    separator_prefix: str = DEFAULT_SEPARATOR_PREFIX
    address_header: str = DEFAULT_ADDRESS_HEADER
    bssid_keywords: tuple[str, ...] = DEFAULT_BSSID_KEYWORDS
    access_mode: str = MODE_ACCESS

    @classmethod
    def compile(
        cls,
        line_pattern: str = INTERFACE_LINE_PATTERN,
        mac_pattern: str = MAC_ADDRESS_PATTERN,
        header_markers: Iterable[str] = DEFAULT_HEADER_MARKERS,
        separator_prefix: str = DEFAULT_SEPARATOR_PREFIX,
        address_header: str = DEFAULT_ADDRESS_HEADER,
        bssid_keywords: Iterable[str] = DEFAULT_BSSID_KEYWORDS,
        access_mode: str = MODE_ACCESS,
    ) -> PatternSet:
        """
        Compile a pattern set.

        Args:
            line_pattern: Regex for one interface table row (nine named groups).
            mac_pattern: Regex for a colon separated MAC in free text.
            header_markers: First tokens that identify header lines.
            separator_prefix: Leading character of separator rows.
            address_header: Header fragment naming the MAC column.
            bssid_keywords: Words that mark a line as carrying BSSIDs.
            access_mode: Mode column value of client-serving interfaces.

        Returns:
            PatternSet instance.

        Raises:
            PatternCompileError: If either regex is invalid.
        """
        try:
            line_re = re.compile(line_pattern)
            mac_re = re.compile(mac_pattern)
        except re.error as e:
            raise PatternCompileError(f"Failed to compile interface patterns: {e}") from e

        keywords = tuple(k.lower() for k in bssid_keywords if k)
        if not keywords:
            raise PatternCompileError("At least one BSSID keyword is required")

        return cls(
            line_re=line_re,
            mac_re=mac_re,
            header_markers=tuple(header_markers),
            separator_prefix=separator_prefix,
            address_header=address_header,
            bssid_keywords=keywords,
            access_mode=access_mode,
        )

    def is_skipped_line(self, line: str) -> bool:
        """Check whether a line is blank, a header, or a separator row."""
        tokens = line.split()
        if not tokens:
            return True
        if tokens[0] in self.header_markers:
            return True
        if self.separator_prefix and line.startswith(self.separator_prefix):
            return True
        if self.address_header and self.address_header in line:
            return True
        return False

    def has_bssid_keyword(self, line: str) -> bool:
        """Check whether a line mentions any BSSID keyword."""
        lowered = line.lower()
        return any(keyword in lowered for keyword in self.bssid_keywords)


def pattern_set_from_settings(settings: Any) -> PatternSet:
    """
    Build a PatternSet from a settings object.

    Accepts anything with a dict-style get(), such as the Dynaconf
    settings or a Flask config. Missing keys fall back to the defaults.
    """
    return PatternSet.compile(
        header_markers=_as_tuple(settings.get('HEADER_MARKERS', DEFAULT_HEADER_MARKERS)),
        separator_prefix=settings.get('SEPARATOR_PREFIX', DEFAULT_SEPARATOR_PREFIX),
        address_header=settings.get('ADDRESS_HEADER', DEFAULT_ADDRESS_HEADER),
        bssid_keywords=_as_tuple(settings.get('BSSID_KEYWORDS', DEFAULT_BSSID_KEYWORDS)),
        access_mode=settings.get('ACCESS_MODE', MODE_ACCESS),
    )


def _as_tuple(value: Any) -> tuple[str, ...]:
    # Env overrides may arrive as a single comma separated string
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(',') if v.strip())
    return tuple(value)


def get_pattern_set() -> PatternSet:
    """
    Get or create the global default pattern set.

    Returns:
        PatternSet built from the module defaults.
    """
    global _pattern_set

    with _pattern_set_lock:
        if _pattern_set is None:
            _pattern_set = PatternSet.compile()
            logger.debug("Compiled default interface patterns")
        return _pattern_set


def reset_pattern_set() -> None:
    """Drop the global default pattern set (mainly for tests)."""
    global _pattern_set

    with _pattern_set_lock:
        _pattern_set = None
