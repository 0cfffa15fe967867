"""Helpers shared by the interface parsers."""

from __future__ import annotations


def split_output_lines(output: str) -> list[str]:
    """
    Split CLI output into lines on '\\n' only, dropping one trailing '\\r'.

    Form feeds, vertical tabs and other Unicode line breaks stay inside the
    line and count as plain whitespace between columns.
    """
    lines = []
    for line in output.split('\n'):
        if line.endswith('\r'):
            line = line[:-1]
        lines.append(line)
    return lines
