"""Remote URL pattern and link result models."""

import re
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from revlink.core.models.address import Address


class RemoteURLPattern(BaseModel):
    """Maps a remote URL shape to a public web URL template.

    The template placeholders are ``%n`` (first capture group of
    ``pattern``), ``%r`` (revision) and ``%f`` (file path).
    """

    pattern: str
    template: str
    name: str | None = None

    _regex: re.Pattern[str] = PrivateAttr()

    class Config:
        frozen = True

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        if compiled.groups < 1:
            raise ValueError(f"pattern {value!r} must contain a capture group")
        return value

    def model_post_init(self, __context: Any) -> None:
        self._regex = re.compile(self.pattern)

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    def match(self, remote_url: str) -> re.Match[str] | None:
        return self.regex.search(remote_url)


class RepositorySnapshot(BaseModel):
    """Repository facts captured up front instead of read from git.

    ``config`` is keyed by ``"<namespace>.<key>"``.
    """

    remotes: list[str] = Field(default_factory=list)
    remote_urls: dict[str, str] = Field(default_factory=dict)
    config: dict[str, str] = Field(default_factory=dict)

    def list_remotes(self) -> list[str]:
        return list(self.remotes)

    def get_config(self, namespace: str, key: str) -> str | None:
        return self.config.get(f"{namespace}.{key}")

    def get_remote_url(self, remote_name: str) -> str | None:
        return self.remote_urls.get(remote_name)


class StoredLink(BaseModel):
    """An encoded address ready to be stored in a document."""

    address: str
    description: str


class ExportedLink(BaseModel):
    """A resolved public URL together with its rendered form."""

    address: Address
    url: str
    description: str
    format: str
    rendered: str


class NavigationTarget(BaseModel):
    """A file opened at a revision, positioned at the search option."""

    address: Address
    content: str
    line: int | None = Field(default=None, description="1-based line of the search hit")

    @property
    def lines(self) -> list[str]:
        return self.content.splitlines()
