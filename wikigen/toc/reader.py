"""Table of contents reader."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from lxml import etree

TOPIC_ELEMENT = "topic"
FILE_ATTRIBUTE = "file"


@dataclass(frozen=True)
class TocEntry:
    """One topic in TOC order.  ``depth`` is 1 for top-level topics."""

    key: str
    depth: int


def read_toc(path: Path) -> Iterator[TocEntry]:
    """Yield the topics of a ``toc.xml`` file in document order.

    Depth counts the elements enclosing each ``<topic>``, so the TOC root
    element itself is not a level.  Topics without a ``file`` key are skipped.
    """
    depth = 0
    for event, element in etree.iterparse(str(path), events=("start", "end")):
        if event == "start":
            if element.tag == TOPIC_ELEMENT:
                key = element.get(FILE_ATTRIBUTE)
                if key and key.strip():
                    yield TocEntry(key=key, depth=depth)
            depth += 1
        else:
            depth -= 1
            # Only the nesting matters, drop children once they are closed
            element.clear(keep_tail=True)
