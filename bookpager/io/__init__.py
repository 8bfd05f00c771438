"""Input/output components for bookpager.

This package contains the scoped source reader and the page record store.
"""

from .source import open_source_lines
from .storage import PageStore, page_file_name

__all__ = ["PageStore", "open_source_lines", "page_file_name"]
