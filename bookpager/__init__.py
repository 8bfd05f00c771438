"""Top-level package for bookpager.

This package splits plain-text books into paragraph-respecting, word-bounded
page records stored one JSON file per page. The main entry point is
`TextPaginator`.
"""

from .library import LibraryImporter
from .paginator import TextPaginator

__all__ = ["LibraryImporter", "TextPaginator", "__version__"]

__version__ = "0.1.0"
