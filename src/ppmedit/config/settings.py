"""Environment-driven application settings.

Values are loaded from environment variables (prefix ``PPMEDIT_``) or a
``.env`` file in the working directory.  The max color value is not a
setting: this editor only accepts 255.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ppmedit.ppm.serializer import DEFAULT_COMMENT


class ParserSettings(BaseSettings):
    """How strictly input files are read."""

    model_config = SettingsConfigDict(env_prefix="PPMEDIT_PARSER_")

    encoding: str = "latin-1"
    """Text encoding of input files.  latin-1 decodes any byte, so stray
    bytes surface as lexical errors instead of decode errors."""
    reject_trailing_tokens: bool = False
    reject_empty_dimensions: bool = True
    """Reject a width or height of 0 instead of producing an empty image."""


class OutputSettings(BaseSettings):
    """Layout of written files."""

    model_config = SettingsConfigDict(env_prefix="PPMEDIT_OUTPUT_")

    header_comment: str = Field(default=DEFAULT_COMMENT, pattern=r"^[^\r\n]*$")
    include_comment: bool = True

    @property
    def comment(self) -> str | None:
        return self.header_comment if self.include_comment else None


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


# Module-level singleton — import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
