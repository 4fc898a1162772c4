"""TOC walker -- converts each topic in TOC order and writes ``_Sidebar.md``."""

from pathlib import Path
from typing import Optional

from wikigen.text.fixups import fix_up_text
from wikigen.toc.reader import TocEntry, read_toc
from wikigen.topic.loader import load_topic, serialize_topic
from wikigen.topic.transformer import transform_topic
from wikigen.utils.config import settings
from wikigen.utils.logger import get_logger

log = get_logger(__name__)

SIDEBAR_FILE = "_Sidebar.md"
TOPIC_EXTENSION = ".md"
INDENT = "  "


def sidebar_line(entry: TocEntry, title: str, append_extension: bool = False) -> str:
    """Format the sidebar list item for one topic."""
    indent = INDENT * (entry.depth - 1) if entry.depth > 1 else ""
    suffix = TOPIC_EXTENSION if append_extension else ""
    return f"{indent}- [{title}]({entry.key}{suffix})\n"


def convert_topic(entry: TocEntry, working_folder: Path) -> Optional[str]:
    """Rewrite one topic file as markdown in place and return its display title.

    Returns ``None`` when the topic could not be parsed and was left alone.
    """
    topic_file = working_folder / f"{entry.key}{TOPIC_EXTENSION}"
    root = load_topic(topic_file)
    if root is None:
        return None

    title = transform_topic(entry.key, root) or entry.key
    content = fix_up_text(serialize_topic(root))
    topic_file.write_text(content, encoding="utf-8")
    return title


def generate_topics(
    working_folder: Path,
    toc_file: Path,
    append_extension: bool = False,
    progress_interval: Optional[int] = None,
) -> int:
    """Convert every topic listed in *toc_file* and write the sidebar.

    Returns the number of topics converted.
    """
    interval = progress_interval or settings.progress_interval
    topic_count = 0

    with open(working_folder / SIDEBAR_FILE, "w", encoding="utf-8") as sidebar:
        for entry in read_toc(toc_file):
            title = convert_topic(entry, working_folder)
            if title is None:
                continue

            sidebar.write(sidebar_line(entry, title, append_extension))
            topic_count += 1

            if topic_count % interval == 0:
                log.info("%d topics generated", topic_count)

    log.info("Finished generating %d topics", topic_count)
    return topic_count
