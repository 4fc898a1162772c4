"""Formatting span cleanup.

The presentation style wraps text in ``<span class="...">`` elements that only
mean something to its HTML stylesheets.  Markdown has no use for them, so they
are flattened here before anything else looks at the topic.
"""

from lxml import etree

from wikigen.topic.tree import remove_element, replace_with_text, unwrap_element

LANGUAGE_SPECIFIC_CLASS = "languageSpecificText"
NEUTRAL_LANGUAGE_CLASS = "nu"


def _is_language_specific(element) -> bool:
    return (
        element is not None
        and element.tag == "span"
        and element.get("class") == LANGUAGE_SPECIFIC_CLASS
    )


def normalize_spans(root: etree._Element) -> None:
    """Flatten every span that carries a ``class`` attribute.

    Language-specific text collapses to its neutral variant (or disappears if
    there isn't one); every other formatting span is unwrapped.
    """
    # Snapshot first, the edits below reshape the tree
    for span in list(root.iter("span")):
        if span.get("class") is None:
            continue

        if span.get("class") == LANGUAGE_SPECIFIC_CLASS:
            neutral = next(
                (s for s in span.findall("span") if s.get("class") == NEUTRAL_LANGUAGE_CLASS),
                None,
            )
            if neutral is not None:
                replace_with_text(span, "".join(neutral.itertext()))
            else:
                remove_element(span)
            continue

        parent = span.getparent()
        # Children of language-specific spans were handled with their parent
        if parent is None or _is_language_specific(parent):
            continue
        unwrap_element(span)
