"""Heading-line helpers and the fallback topic title lookup."""

import re
from typing import Iterable, List, Optional

from lxml import etree

from wikigen.topic.tree import iter_text

HEADING_MARKER = "#"

_LINE_BREAK_RE = re.compile(r"[\r\n]")


def split_lines(text: str) -> List[str]:
    """Split on CR/LF, dropping empty entries."""
    return [line for line in _LINE_BREAK_RE.split(text) if line]


def is_heading_line(line: str) -> bool:
    return len(line.strip()) > 2 and line[0] == HEADING_MARKER


def heading_title(line: str) -> Optional[str]:
    """Return the title text of a markdown heading line (marker token removed)."""
    pos = line.find(" ")
    if pos == -1:
        return None
    return line[pos + 1:].strip()


def _first_heading(lines: Iterable[str]) -> Optional[str]:
    line = next((line for line in lines if is_heading_line(line)), None)
    return heading_title(line) if line is not None else None


def last_heading_title(text: str) -> Optional[str]:
    """Title of the heading line closest to the end of *text*."""
    return _first_heading(reversed(split_lines(text)))


def extract_title(root: etree._Element) -> Optional[str]:
    """Title of the first heading line found anywhere in the topic."""
    lines = (line for text in iter_text(root) for line in split_lines(text))
    return _first_heading(lines)
