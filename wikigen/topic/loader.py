"""Reading topic files into lxml trees and writing them back out as text."""

from pathlib import Path
from typing import Optional

from lxml import etree

from wikigen.utils.logger import get_logger

log = get_logger(__name__)

DOCUMENT_ELEMENT = "document"


def parse_topic(content: str) -> Optional[etree._Element]:
    """Parse topic markup held in *content*.

    Topics added by hand are often bare fragments, so a failed parse is
    retried once inside a synthetic document element.  Returns ``None`` when
    neither attempt yields well-formed XML.
    """
    try:
        return etree.fromstring(content.encode("utf-8"))
    except etree.XMLSyntaxError:
        pass

    wrapped = f"<{DOCUMENT_ELEMENT}>\n{content}\n</{DOCUMENT_ELEMENT}>"
    try:
        return etree.fromstring(wrapped.encode("utf-8"))
    except etree.XMLSyntaxError as exc:
        log.debug("Fragment parse failed: %s", exc)
        return None


def load_topic(path: Path) -> Optional[etree._Element]:
    """Load the topic at *path*, or ``None`` if it is not usable markup.

    A missing or unreadable file is an ``OSError`` and is left to the caller.
    """
    root = parse_topic(path.read_text(encoding="utf-8-sig"))
    if root is None:
        log.warning("Skipping topic that is not well-formed markup: %s", path.name)
    return root


def serialize_topic(root: etree._Element) -> str:
    """Serialize the content of *root* without the document element itself."""
    content = etree.tostring(root, encoding="unicode", with_tail=False)

    # Drop the start tag, and the end tag unless the element was self-closing
    content = content[content.find(">") + 1:].lstrip()
    end = content.rfind("</")
    if end != -1:
        content = content[:end]
    return content
