"""Exception hierarchy for revlink.

RevlinkError (base)
├── ConfigurationError
├── RepositoryError
├── MalformedAddressError
├── NoRemoteDeterminableError
└── NoURLDeterminableError
"""

from typing import Any


class RevlinkError(Exception):
    """Base exception for all revlink errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(RevlinkError):
    """Invalid settings, pattern table entry or output format."""


class RepositoryError(RevlinkError):
    """A git invocation failed or the repository could not be found."""


class MalformedAddressError(RevlinkError):
    """An address could not be decoded into its required fields."""


class NoRemoteDeterminableError(RevlinkError):
    """No single remote could be chosen for a repository."""


class NoURLDeterminableError(RevlinkError):
    """Neither an override template nor a known pattern produced a URL."""
