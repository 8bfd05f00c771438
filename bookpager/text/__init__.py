"""Text segmentation and pagination components.

This package turns line streams into normalized paragraphs and paragraphs
into word-bounded pages.
"""

from .pagination import (
    DEFAULT_WIDOW_GUARD_CHARS,
    DEFAULT_WORDS_PER_PAGE,
    PARAGRAPH_SEPARATOR,
    EmitterState,
    PageEmitter,
)
from .paragraphs import DEFAULT_HEADING_MAX_CHARS, ParagraphSegmenter

__all__ = [
    "DEFAULT_HEADING_MAX_CHARS",
    "DEFAULT_WIDOW_GUARD_CHARS",
    "DEFAULT_WORDS_PER_PAGE",
    "PARAGRAPH_SEPARATOR",
    "EmitterState",
    "PageEmitter",
    "ParagraphSegmenter",
]
