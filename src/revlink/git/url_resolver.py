"""URL resolver for exported links."""

import re
from collections.abc import Iterable

import structlog

from revlink.core.exceptions import NoURLDeterminableError
from revlink.core.models.remote import RemoteURLPattern
from revlink.git.patterns import DEFAULT_PATTERNS

logger = structlog.get_logger(__name__)

_PLACEHOLDER = re.compile(r"%([a-z])")


def substitute(template: str, values: dict[str, str]) -> str:
    """Expand ``%x`` placeholders in a single pass.

    Placeholders without a value are kept verbatim. Text coming from a
    substituted value is never expanded again.
    """
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


class URLResolver:
    """Resolves (revision, file_path) to a public web URL.

    Supports two modes:
    - Override: an explicit template with ``%r`` and ``%f``, used as-is
    - Pattern: the remote URL is matched against an ordered pattern table
      and the first hit's template receives ``%n``, ``%r`` and ``%f``
    """

    def __init__(self, pattern_table: Iterable[RemoteURLPattern] | None = None) -> None:
        self._patterns = tuple(DEFAULT_PATTERNS if pattern_table is None else pattern_table)

    @property
    def patterns(self) -> tuple[RemoteURLPattern, ...]:
        return self._patterns

    def resolve(
        self,
        revision: str,
        file_path: str,
        override_template: str | None = None,
        remote_url: str | None = None,
    ) -> str:
        """Resolve a revision and file path to a URL.

        An override template always wins. Otherwise the remote URL must
        match one of the configured patterns.
        """
        if override_template:
            return self._resolve_override(override_template, revision, file_path)

        if not remote_url:
            raise NoURLDeterminableError(
                f"Cannot determine public URL for {file_path}: no remote URL",
                details={"revision": revision, "file_path": file_path},
            )

        return self._resolve_remote(remote_url, revision, file_path)

    def match(self, remote_url: str) -> tuple[RemoteURLPattern, str] | None:
        """Return the first pattern matching ``remote_url`` and its capture."""
        for entry in self._patterns:
            found = entry.match(remote_url)
            if found:
                return entry, found.group(1) or ""
        return None

    def _resolve_override(self, template: str, revision: str, file_path: str) -> str:
        url = substitute(template, {"r": revision, "f": file_path})
        logger.debug("URL resolved from override", url=url)
        return url

    def _resolve_remote(self, remote_url: str, revision: str, file_path: str) -> str:
        hit = self.match(remote_url)
        if hit is None:
            raise NoURLDeterminableError(
                f"Cannot determine public URL for {file_path}: "
                f"no pattern matches remote {remote_url}",
                details={
                    "revision": revision,
                    "file_path": file_path,
                    "remote_url": remote_url,
                },
            )

        entry, captured = hit
        url = substitute(entry.template, {"n": captured, "r": revision, "f": file_path})
        logger.debug("URL resolved", pattern=entry.name or entry.pattern, url=url)
        return url
