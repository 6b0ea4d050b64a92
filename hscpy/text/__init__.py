"""Source offsets."""

from hscpy.text.text import TextRange

__all__ = ["TextRange"]
