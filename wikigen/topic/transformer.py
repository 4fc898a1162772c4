"""Topic transformation -- turns one parsed topic into markdown-ready markup."""

from typing import Optional

from lxml import etree

from wikigen.topic.anchors import build_link_targets, rewrite_links
from wikigen.topic.spans import normalize_spans
from wikigen.topic.title import extract_title
from wikigen.topic.tree import remove_element


def transform_topic(key: str, root: etree._Element) -> Optional[str]:
    """Clean up *root* in place and return the topic title if one was found.

    The caller falls back to *key* for display when this returns ``None``.
    """
    # API topics name their source file, which has no place in the page
    filename = root.find("file")
    if filename is not None:
        remove_element(filename)

    normalize_spans(root)

    scan = build_link_targets(key, root)
    rewrite_links(root, scan.link_targets)

    if scan.page_title is not None:
        return scan.page_title

    # Probably a user-added file, use its first section heading
    return extract_title(root)
