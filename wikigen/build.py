"""Wiki build -- converts the topics, then publishes the working folder."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from wikigen.output.copier import copy_tree
from wikigen.output.home import ensure_home_topic
from wikigen.toc.sidebar import generate_topics
from wikigen.utils.logger import get_logger

log = get_logger(__name__)


@dataclass
class BuildResult:
    topic_count: int
    file_count: int
    home_topic: Optional[Path] = None


def default_toc_file(working_folder: Path) -> Path:
    """The presentation style writes ``toc.xml`` two levels above the topics."""
    return working_folder.parent.parent / "toc.xml"


def build_wiki(
    working_folder: Path,
    output_folder: Path,
    toc_file: Optional[Path] = None,
    default_topic: Optional[str] = None,
    append_md_extension: bool = False,
) -> BuildResult:
    """Run the whole build.  Filesystem errors propagate to the caller."""
    toc_file = toc_file or default_toc_file(working_folder)
    log.info("Generating markdown topics from %s", toc_file)

    topic_count = generate_topics(working_folder, toc_file, append_md_extension)
    home_topic = ensure_home_topic(working_folder, default_topic)
    file_count = copy_tree(working_folder, output_folder)

    return BuildResult(topic_count=topic_count, file_count=file_count, home_topic=home_topic)
