"""Git integration module for revlink."""

from revlink.git.patterns import DEFAULT_PATTERNS
from revlink.git.remote_selector import select_remote
from revlink.git.repository import GitRepository
from revlink.git.url_resolver import URLResolver

__all__ = ["DEFAULT_PATTERNS", "GitRepository", "URLResolver", "select_remote"]
