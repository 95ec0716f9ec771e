"""Address models."""

from pydantic import BaseModel, Field


class Address(BaseModel):
    """A revision-pinned location of a file inside a repository.

    The repository identifier and revision are opaque tokens; the search
    option is a free-form locator applied after the file is opened.
    """

    repository_identifier: str
    revision: str
    file_path: str
    search_option: str | None = None

    class Config:
        frozen = True

    @property
    def is_complete(self) -> bool:
        return bool(self.repository_identifier and self.revision and self.file_path)


class EncodeOptions(BaseModel):
    """Options applied when encoding a fresh address."""

    abbreviate_revision: bool = Field(
        default=False, description="Shorten full object names before encoding"
    )
    abbrev_length: int = Field(
        default=7, ge=4, le=40, description="Length of an abbreviated object name"
    )

    class Config:
        frozen = True
