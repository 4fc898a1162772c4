"""Output module -- home page and output folder copy."""

from wikigen.output.copier import copy_tree
from wikigen.output.home import ensure_home_topic

__all__ = ["copy_tree", "ensure_home_topic"]
