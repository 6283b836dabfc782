"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ppmedit.config.settings import OutputSettings, ParserSettings, Settings, get_settings, settings


class TestParserSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PPMEDIT_PARSER_REJECT_TRAILING_TOKENS", raising=False)
        cfg = ParserSettings()
        assert cfg.encoding == "latin-1"
        assert cfg.reject_trailing_tokens is False
        assert cfg.reject_empty_dimensions is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PPMEDIT_PARSER_REJECT_TRAILING_TOKENS", "true")
        monkeypatch.setenv("PPMEDIT_PARSER_REJECT_EMPTY_DIMENSIONS", "0")
        cfg = ParserSettings()
        assert cfg.reject_trailing_tokens is True
        assert cfg.reject_empty_dimensions is False


class TestOutputSettings:
    def test_comment(self) -> None:
        assert OutputSettings(header_comment="hi").comment == "hi"
        assert OutputSettings(include_comment=False).comment is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PPMEDIT_OUTPUT_HEADER_COMMENT", "made here")
        assert OutputSettings().comment == "made here"

    def test_multiline_comment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutputSettings(header_comment="a\nb")


def test_singleton() -> None:
    assert get_settings() is settings
    assert isinstance(settings, Settings)
