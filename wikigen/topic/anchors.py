"""In-page link anchors.

Link targets in generated topics are ``<span id="...">`` elements placed right
after a section title.  Markdown renderers derive their own anchors from the
heading text, so each id is mapped to the slug of the closest preceding
heading and the spans themselves are dropped.

Cross-page anchors (``Page#Anchor``) and links to untitled elements such as
list items or table cells are not resolved; they fall back to ``#``.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from lxml import etree

from wikigen.topic.title import HEADING_MARKER, last_heading_title
from wikigen.topic.tree import preceding_text, remove_element
from wikigen.utils.logger import get_logger

log = get_logger(__name__)

PAGE_HEADER = "PageHeader"
PAGE_HEADER_ALIAS_PREFIX = "@pageHeader_"
SELF_LINK = "#"


@dataclass
class AnchorScan:
    """Result of scanning one topic's anchor spans."""

    link_targets: Dict[str, str] = field(default_factory=dict)
    page_title: Optional[str] = None


def heading_slug(title: str) -> str:
    """Anchor slug a markdown renderer gives a heading with this *title*."""
    return title.lower().replace(" ", "-").replace(HEADING_MARKER, "")


def _register(key: str, anchor_id: str, link_id: str, target: str, targets: Dict[str, str]) -> None:
    if link_id in targets:
        log.warning(
            "Duplicate in-page link ID found: Topic ID: %s  Link ID: %s", key, anchor_id
        )
    targets[link_id] = target


def build_link_targets(key: str, root: etree._Element) -> AnchorScan:
    """Map every anchor span id in the topic to a heading slug and remove the spans."""
    scan = AnchorScan()

    for span in list(root.iter("span")):
        anchor_id = span.get("id")
        if anchor_id is None:
            continue

        text = preceding_text(span)
        title = last_heading_title(text) if text else None

        if title is not None:
            if anchor_id == PAGE_HEADER:
                scan.page_title = title

            slug = heading_slug(title)

            # Intro sections have no title of their own, they link to the page header
            if anchor_id.startswith(PAGE_HEADER_ALIAS_PREFIX):
                link_id = anchor_id[len(PAGE_HEADER_ALIAS_PREFIX):]
                _register(key, anchor_id, link_id, PAGE_HEADER, scan.link_targets)
            else:
                _register(key, anchor_id, anchor_id, "#" + slug, scan.link_targets)

        remove_element(span)

    return scan


def resolve_link_target(fragment: str, link_targets: Dict[str, str]) -> str:
    """Return the href for an in-page link to *fragment* (without the ``#``)."""
    target = link_targets.get(fragment)
    if target is None:
        return SELF_LINK
    if target == PAGE_HEADER:
        return link_targets.get(PAGE_HEADER, SELF_LINK)
    return target


def rewrite_links(root: etree._Element, link_targets: Dict[str, str]) -> None:
    """Point every in-page ``<a href="#...">`` at its resolved heading anchor."""
    for anchor in root.iter("a"):
        href = anchor.get("href")
        if href is None or len(href) < 2 or not href.startswith("#"):
            continue
        anchor.set("href", resolve_link_target(href[1:].strip(), link_targets))
