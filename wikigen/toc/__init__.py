"""TOC module -- reading the table of contents and writing the sidebar."""

from wikigen.toc.reader import TocEntry, read_toc
from wikigen.toc.sidebar import generate_topics, sidebar_line

__all__ = ["TocEntry", "read_toc", "generate_topics", "sidebar_line"]
