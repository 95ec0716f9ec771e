"""Interfaces the resolution core expects from a repository backend."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RepositoryFacts(Protocol):
    """Already-resolved facts about a repository."""

    def list_remotes(self) -> list[str]:
        """Configured remote names, in the order the backend reports them."""
        ...

    def get_config(self, namespace: str, key: str) -> str | None:
        """Value of ``namespace.key`` in the repository configuration."""
        ...

    def get_remote_url(self, remote_name: str) -> str | None:
        """Fetch URL of a remote, or None when it has none."""
        ...
