"""Domain models for revlink."""

from revlink.core.models.address import Address, EncodeOptions
from revlink.core.models.remote import (
    ExportedLink,
    NavigationTarget,
    RemoteURLPattern,
    RepositorySnapshot,
    StoredLink,
)

__all__ = [
    "Address",
    "EncodeOptions",
    "RemoteURLPattern",
    "RepositorySnapshot",
    "StoredLink",
    "ExportedLink",
    "NavigationTarget",
]
