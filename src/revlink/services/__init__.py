"""Business logic services for revlink."""

from revlink.services.linking import LinkService

__all__ = ["LinkService"]
