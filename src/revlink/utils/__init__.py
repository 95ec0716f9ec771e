"""Utility functions for revlink."""

from revlink.utils.formatting import format_link
from revlink.utils.search import find_line

__all__ = ["find_line", "format_link"]
