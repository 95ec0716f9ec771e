"""Choice of the remote whose URL is published in exported links."""

from collections.abc import Sequence

import structlog

from revlink.core.exceptions import NoRemoteDeterminableError

logger = structlog.get_logger(__name__)

DEFAULT_REMOTE = "origin"


def select_remote(available_remotes: Sequence[str], preferred: str | None = None) -> str:
    """Pick exactly one remote name.

    A lone remote always wins. Otherwise the preferred remote is used if
    it exists, then ``origin``.
    """
    if len(available_remotes) == 1:
        return available_remotes[0]
    if preferred and preferred in available_remotes:
        return preferred
    if DEFAULT_REMOTE in available_remotes:
        return DEFAULT_REMOTE

    logger.debug(
        "No remote determinable",
        remotes=list(available_remotes),
        preferred=preferred,
    )
    raise NoRemoteDeterminableError(
        "Cannot determine a public remote"
        + (f" (preferred remote {preferred!r} not configured)" if preferred else ""),
        details={"remotes": list(available_remotes), "preferred": preferred},
    )
