"""Small lxml helpers for editing topic trees in place.

lxml keeps character data on elements (``text`` before the first child,
``tail`` after the closing tag) rather than as separate nodes, so removing or
unwrapping an element has to move that text onto a neighbour by hand.
"""

from typing import Iterator, Optional

from lxml import etree


def _append_text(parent: etree._Element, previous: Optional[etree._Element], text: Optional[str]) -> None:
    if not text:
        return
    if previous is not None:
        previous.tail = (previous.tail or "") + text
    else:
        parent.text = (parent.text or "") + text


def remove_element(element: etree._Element) -> None:
    """Remove *element* and its content, keeping the text that follows it."""
    parent = element.getparent()
    if parent is None:
        return
    _append_text(parent, element.getprevious(), element.tail)
    parent.remove(element)


def replace_with_text(element: etree._Element, text: str) -> None:
    """Replace *element* with plain *text*."""
    parent = element.getparent()
    if parent is None:
        return
    _append_text(parent, element.getprevious(), text + (element.tail or ""))
    parent.remove(element)


def unwrap_element(element: etree._Element) -> None:
    """Replace *element* with its own children, in order."""
    parent = element.getparent()
    if parent is None:
        return

    previous = element.getprevious()
    _append_text(parent, previous, element.text)

    children = list(element)
    index = parent.index(element)
    for offset, child in enumerate(children):
        parent.insert(index + offset, child)

    if children:
        last = children[-1]
        last.tail = (last.tail or "") + (element.tail or "")
    else:
        _append_text(parent, previous, element.tail)

    element.tail = None
    parent.remove(element)


def preceding_text(element: etree._Element) -> Optional[str]:
    """Return the text node directly before *element*, if there is one.

    An element sibling with no tail in between means there is no such node.
    """
    previous = element.getprevious()
    if previous is not None:
        return previous.tail
    parent = element.getparent()
    return parent.text if parent is not None else None


def iter_text(element: etree._Element) -> Iterator[str]:
    """Yield the non-empty text nodes under *element* in document order."""
    # Comments and processing instructions have a non-string tag
    if isinstance(element.tag, str) and element.text:
        yield element.text
    for child in element:
        yield from iter_text(child)
        if child.tail:
            yield child.tail
