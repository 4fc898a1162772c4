"""Final text fix-ups applied to a serialized topic.

Markdown renderers treat raw HTML inside a page a little differently from a
browser, so a few regex passes tidy the serialized markup before it is
written out.  ``fix_up_text`` runs them in the required order.
"""

import html
import re

NBSP_ENTITY = "&nbsp;"
NBSP_CHAR = "\xa0"

BLOCK_ELEMENT_RE = re.compile(
    r"(\w)(<(p|div|h[1-6]|blockquote|pre|table|dl|ol|ul|"
    r"address|script|noscript|form|fieldset|iframe|math))"
)
CLOSING_SPACE_RE = re.compile(r"\s+</")
NBSP_RUN_RE = re.compile(r"(?P<lead>\s*)&nbsp;(?P<trail>\s*)")


def add_block_newlines(text: str) -> str:
    """Put a blank line between literal text and a block element that follows it."""
    return BLOCK_ELEMENT_RE.sub("\\1\n\n\\2", text)


def trim_closing_space(text: str) -> str:
    """Drop whitespace right before a closing tag."""
    return CLOSING_SPACE_RE.sub("</", text)


def decode_entities(text: str) -> str:
    """Decode HTML entities, keeping non-breaking spaces as ``&nbsp;``."""
    return html.unescape(text).replace(NBSP_CHAR, NBSP_ENTITY)


def _nbsp_replacement(match: re.Match) -> str:
    end = match.end()
    source = match.string

    # A heading right after the entity is a section break in disguise
    if end < len(source) and source[end] == "#":
        return "\n\n"
    if not match.group("lead") and match.group("trail"):
        return NBSP_ENTITY + "\n"
    if match.group("lead"):
        return "\n" + NBSP_ENTITY
    return match.group(0)


def collapse_nbsp(text: str) -> str:
    """Turn whitespace around ``&nbsp;`` into a newline on the side it was found.

    Without this the renderer folds the blank lines the page needs.
    """
    return NBSP_RUN_RE.sub(_nbsp_replacement, text)


def fix_up_text(text: str) -> str:
    text = add_block_newlines(text)
    text = trim_closing_space(text)
    text = decode_entities(text)
    return collapse_nbsp(text)
