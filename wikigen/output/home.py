"""Home page synthesis for the wiki."""

import shutil
from pathlib import Path
from typing import Optional

from wikigen.utils.logger import get_logger

log = get_logger(__name__)

HOME_TOPIC = "Home.md"


def ensure_home_topic(working_folder: Path, default_topic: Optional[str]) -> Optional[Path]:
    """Copy the default topic to ``Home.md`` if no topic produced one.

    *default_topic* may be given with or without an extension.  Returns the
    path of the new home page, or ``None`` if nothing was written.
    """
    home = working_folder / HOME_TOPIC
    if home.exists() or not default_topic or not default_topic.strip():
        return None

    source = working_folder / (Path(default_topic.strip()).stem + ".md")
    if not source.exists():
        log.warning("Default topic %s not found, no home page created", source.name)
        return None

    shutil.copyfile(source, home)
    log.info("Created %s from %s", HOME_TOPIC, source.name)
    return home
