from pathlib import Path

import pytest
from pydantic import ValidationError

from docpage.server.settings import Settings


_ENV_VARS = (
    "DOCUMENT_PATH",
    "MARKDOWN_EXTENSIONS",
    "TOC_SOURCE",
    "TOC_INDENT_PX",
    "UNIQUE_SLUGS",
    "ESCAPE_TITLES",
    "PAGE_AUTHOR",
    "PORT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = Settings()

    assert settings.document_path == Path("README.md")
    assert settings.markdown_extensions == ["fenced_code", "tables"]
    assert settings.toc_source == "raw"
    assert settings.toc_indent_px == 20
    assert settings.unique_slugs is False
    assert settings.escape_titles is False
    assert settings.page_author is None
    assert settings.port == 3000


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DOCUMENT_PATH", str(tmp_path / "guide.md"))
    monkeypatch.setenv("MARKDOWN_EXTENSIONS", "fenced_code, tables ,,attr_list")
    monkeypatch.setenv("TOC_SOURCE", "Rendered")
    monkeypatch.setenv("UNIQUE_SLUGS", "1")
    monkeypatch.setenv("ESCAPE_TITLES", "off")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings()

    assert settings.document_path == tmp_path / "guide.md"
    assert settings.markdown_extensions == ["fenced_code", "tables", "attr_list"]
    assert settings.toc_source == "rendered"
    assert settings.unique_slugs is True
    assert settings.escape_titles is False
    assert settings.port == 8080


def test_settings_reject_unknown_toc_source(monkeypatch):
    monkeypatch.setenv("TOC_SOURCE", "outline")

    with pytest.raises(ValidationError):
        Settings()


def test_settings_reject_negative_indent():
    with pytest.raises(ValidationError):
        Settings(toc_indent_px=-5)


def test_settings_are_frozen():
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.page_title = "Other"  # type: ignore[misc]
