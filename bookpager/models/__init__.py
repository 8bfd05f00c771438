"""Shared typed data models for bookpager.

This package contains dataclasses used across pagination modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import BookPage, PaginationResult

__all__ = ["BookPage", "PaginationResult"]
