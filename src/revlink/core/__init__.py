"""Core domain models and interfaces for revlink."""

from revlink.core.exceptions import (
    ConfigurationError,
    MalformedAddressError,
    NoRemoteDeterminableError,
    NoURLDeterminableError,
    RepositoryError,
    RevlinkError,
)
from revlink.core.models import (
    Address,
    EncodeOptions,
    ExportedLink,
    NavigationTarget,
    RemoteURLPattern,
    RepositorySnapshot,
    StoredLink,
)
from revlink.core.protocols import RepositoryFacts

__all__ = [
    # Models
    "Address",
    "EncodeOptions",
    "RemoteURLPattern",
    "RepositorySnapshot",
    "StoredLink",
    "ExportedLink",
    "NavigationTarget",
    "RepositoryFacts",
    # Exceptions
    "RevlinkError",
    "ConfigurationError",
    "RepositoryError",
    "MalformedAddressError",
    "NoRemoteDeterminableError",
    "NoURLDeterminableError",
]
