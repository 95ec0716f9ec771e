"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from revlink.core.models.address import EncodeOptions
from revlink.core.models.remote import RemoteURLPattern
from revlink.git.patterns import DEFAULT_PATTERNS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REVLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Git config lookups: <namespace>.<key>
    git_config_namespace: str = "revlink"
    remote_config_key: str = "remote"  # preferred remote name
    url_config_key: str = "url"  # override template with %r and %f

    # Encoding
    abbreviate_revision: bool = False
    abbrev_length: int = Field(default=7, ge=4, le=40)

    # Export
    default_export_format: str = "html"
    description_template: str = "{file} ({revision})"

    # Checked before the built-in hosting services
    extra_patterns: list[RemoteURLPattern] = Field(default_factory=list)

    @field_validator("description_template")
    @classmethod
    def _check_description_template(cls, value: str) -> str:
        try:
            value.format(file="", revision="", repository="")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(
                f"description_template {value!r} may only use "
                "{file}, {revision} and {repository}"
            ) from exc
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def pattern_table(self) -> list[RemoteURLPattern]:
        return [*self.extra_patterns, *DEFAULT_PATTERNS]

    @property
    def encode_options(self) -> EncodeOptions:
        return EncodeOptions(
            abbreviate_revision=self.abbreviate_revision,
            abbrev_length=self.abbrev_length,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
