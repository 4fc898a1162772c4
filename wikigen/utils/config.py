"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Folders -----------------------------------------------------------
    working_folder: str = field(default_factory=lambda: os.getenv("WIKIGEN_WORKING_FOLDER", ""))
    output_folder: str = field(default_factory=lambda: os.getenv("WIKIGEN_OUTPUT_FOLDER", ""))
    toc_file: str = field(default_factory=lambda: os.getenv("WIKIGEN_TOC_FILE", ""))

    # --- Wiki output -------------------------------------------------------
    default_topic: str = field(default_factory=lambda: os.getenv("WIKIGEN_DEFAULT_TOPIC", ""))
    append_md_extension: bool = field(
        default_factory=lambda: _env_flag("WIKIGEN_APPEND_MD_EXTENSION")
    )
    progress_interval: int = field(
        default_factory=lambda: int(os.getenv("PROGRESS_INTERVAL", "500"))
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", "logs/wikigen.log"))


# Module-level singleton -- import this everywhere.
settings = Settings()
