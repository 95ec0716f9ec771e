"""Link service: store, export and open revision-pinned file links."""

from collections.abc import Iterable
from pathlib import Path

import structlog

from revlink.address.codec import decode, encode
from revlink.config.settings import Settings
from revlink.core.exceptions import RevlinkError
from revlink.core.models.address import Address
from revlink.core.models.remote import ExportedLink, NavigationTarget, StoredLink
from revlink.core.protocols import RepositoryFacts
from revlink.git.remote_selector import select_remote
from revlink.git.repository import GitRepository
from revlink.git.url_resolver import URLResolver
from revlink.utils.formatting import format_link, normalize_format
from revlink.utils.search import find_line

logger = structlog.get_logger(__name__)


class LinkService:
    """Service for link operations.

    Repository facts come from ``repository_class`` (``GitRepository`` by
    default); everything else is pure resolution.
    """

    def __init__(
        self,
        settings: Settings,
        repository_class: type[GitRepository] = GitRepository,
    ) -> None:
        self._settings = settings
        self._repository_class = repository_class
        self._resolver = URLResolver(settings.pattern_table)

    @property
    def resolver(self) -> URLResolver:
        return self._resolver

    def describe(self, address: Address) -> str:
        return self._settings.description_template.format(
            file=address.file_path,
            revision=address.revision,
            repository=address.repository_identifier,
        )

    def store_link(self, file_path: str | Path, revision: str | None = None) -> StoredLink:
        """Encode a link to a working-tree file at HEAD or ``revision``."""
        repository = self._repository_class.for_file(file_path)
        address = encode(
            repository.identifier,
            revision or repository.current_revision(),
            repository.relative_path(file_path),
            self._settings.encode_options,
        )
        logger.debug("Link stored", address=address)
        return StoredLink(address=address, description=self.describe(decode(address)))

    def resolve_url(self, address: Address, repository: RepositoryFacts) -> str:
        """Resolve a decoded address against a repository's facts."""
        namespace = self._settings.git_config_namespace
        remote = select_remote(
            repository.list_remotes(),
            repository.get_config(namespace, self._settings.remote_config_key),
        )
        logger.debug("Remote selected", remote=remote)
        return self._resolver.resolve(
            address.revision,
            address.file_path,
            override_template=repository.get_config(namespace, self._settings.url_config_key),
            remote_url=repository.get_remote_url(remote),
        )

    def export_link(
        self,
        address: str,
        description: str | None = None,
        fmt: str | None = None,
    ) -> ExportedLink:
        """Resolve an address to a public URL and render it."""
        try:
            output_format = normalize_format(fmt or self._settings.default_export_format)
            decoded = decode(address, strict=True)
            repository = self._repository_class.from_identifier(decoded.repository_identifier)
            url = self.resolve_url(decoded, repository)
        except RevlinkError as exc:
            self._broken(exc, address)
            raise

        description = description or self.describe(decoded)
        return ExportedLink(
            address=decoded,
            url=url,
            description=description,
            format=output_format,
            rendered=format_link(url, description, output_format),
        )

    def export_many(
        self, addresses: Iterable[str], fmt: str | None = None
    ) -> list[ExportedLink | RevlinkError]:
        """Export several addresses; failures are returned in place."""
        results: list[ExportedLink | RevlinkError] = []
        for address in addresses:
            try:
                results.append(self.export_link(address, fmt=fmt))
            except RevlinkError as exc:
                results.append(exc)
        return results

    def open_link(self, address: str) -> NavigationTarget:
        """Read the addressed file at its revision and seek the search option."""
        try:
            decoded = decode(address, strict=True)
            repository = self._repository_class.from_identifier(decoded.repository_identifier)
            content = repository.show_file(decoded.revision, decoded.file_path)
        except RevlinkError as exc:
            self._broken(exc, address)
            raise

        return NavigationTarget(
            address=decoded,
            content=content,
            line=find_line(content, decoded.search_option),
        )

    @staticmethod
    def _broken(exc: RevlinkError, address: str) -> None:
        exc.details.setdefault("address", address)
        logger.warning(
            "Broken link",
            address=address,
            error=type(exc).__name__,
            reason=exc.message,
        )
