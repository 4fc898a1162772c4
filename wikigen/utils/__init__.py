"""Utils module -- config, logging."""

from wikigen.utils.config import settings
from wikigen.utils.logger import get_logger

__all__ = ["settings", "get_logger"]
