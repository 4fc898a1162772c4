"""Text module -- regex fix-ups for serialized topics."""

from wikigen.text.fixups import fix_up_text

__all__ = ["fix_up_text"]
