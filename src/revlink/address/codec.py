"""Encoding and decoding of compact link addresses.

An address has the form::

    <repository>::<revision>::<file>[::<search option>]

Only the first four segments are meaningful; anything after the search
option is discarded.
"""

import re

from revlink.core.exceptions import MalformedAddressError
from revlink.core.models.address import Address, EncodeOptions

DELIMITER = "::"

_REQUIRED_FIELDS = ("repository_identifier", "revision", "file_path")
_OBJECT_NAME = re.compile(r"^(?:[0-9a-f]{40}|[0-9a-f]{64})$")


def encode(
    repository_identifier: str,
    revision: str,
    file_path: str,
    options: EncodeOptions | None = None,
) -> str:
    """Join the three address fields into a storable link address.

    Raises MalformedAddressError for a field that is empty or would not
    decode back unchanged, such as one containing the delimiter.
    """
    if options is not None and options.abbreviate_revision:
        revision = abbreviate_revision(revision, options.abbrev_length)

    fields = (repository_identifier, revision, file_path)
    empty = [name for name, value in zip(_REQUIRED_FIELDS, fields) if not value]
    if empty:
        raise MalformedAddressError(
            f"Cannot encode link address with empty {', '.join(empty)}",
            details={"fields": dict(zip(_REQUIRED_FIELDS, fields)), "empty": empty},
        )

    address = DELIMITER.join(fields)
    if split_address(address) != list(fields):
        raise MalformedAddressError(
            f"Cannot encode link address {address!r}: a field collides with {DELIMITER!r}",
            details={"fields": dict(zip(_REQUIRED_FIELDS, fields))},
        )
    return address


def abbreviate_revision(revision: str, length: int = 7) -> str:
    """Shorten a full object name; branch and tag names pass through."""
    if _OBJECT_NAME.match(revision):
        return revision[:length]
    return revision


def split_address(address: str) -> list[str]:
    """Split an address, dropping empty segments at either end."""
    segments = address.split(DELIMITER)
    while segments and not segments[0]:
        segments.pop(0)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def decode(address: str, strict: bool = False) -> Address:
    """Decode a link address into its fields.

    In permissive mode missing required fields decode to empty strings.
    With ``strict`` an address lacking any of repository, revision or
    file raises MalformedAddressError.
    """
    segments = split_address(address)
    fields = segments[:4] + [""] * (3 - min(len(segments), 3))
    decoded = Address(
        repository_identifier=fields[0],
        revision=fields[1],
        file_path=fields[2],
        search_option=fields[3] if len(segments) > 3 else None,
    )

    if strict and not decoded.is_complete:
        missing = [name for name in _REQUIRED_FIELDS if not getattr(decoded, name)]
        raise MalformedAddressError(
            f"Malformed link address: {address!r}",
            details={"address": address, "segments": len(segments), "missing": missing},
        )
    return decoded
