from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() not in _FALSE_VALUES


class Settings(BaseModel):
    """Runtime configuration for the document server."""

    document_path: Path = Field(default_factory=lambda: Path(os.getenv("DOCUMENT_PATH", "README.md")))
    document_encoding: str = Field(default_factory=lambda: os.getenv("DOCUMENT_ENCODING", "utf-8"))
    page_title: str = Field(default_factory=lambda: os.getenv("PAGE_TITLE", "Documentation"))
    page_author: str | None = Field(default_factory=lambda: os.getenv("PAGE_AUTHOR") or None)
    markdown_extensions: List[str] = Field(
        default_factory=lambda: os.getenv("MARKDOWN_EXTENSIONS", ",".join(DEFAULT_MARKDOWN_EXTENSIONS))
    )
    toc_title: str = Field(default_factory=lambda: os.getenv("TOC_TITLE", "Table of Contents"))
    toc_indent_px: int = Field(default_factory=lambda: int(os.getenv("TOC_INDENT_PX", "20")), ge=0)
    toc_source: Literal["raw", "rendered"] = Field(default_factory=lambda: os.getenv("TOC_SOURCE", "raw"))
    unique_slugs: bool = Field(default_factory=lambda: _env_flag("UNIQUE_SLUGS"))
    escape_titles: bool = Field(default_factory=lambda: _env_flag("ESCAPE_TITLES"))
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    verbose: bool = Field(default_factory=lambda: _env_flag("LOG_LEVEL_VERBOSE"))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("markdown_extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_MARKDOWN_EXTENSIONS)
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return list(value)

    @field_validator("toc_source", mode="before")
    @classmethod
    def _normalize_toc_source(cls, value: object) -> str:
        normalized = str(value).strip().lower()
        if normalized not in {"raw", "rendered"}:
            raise ValueError("TOC_SOURCE must be 'raw' or 'rendered'")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_MARKDOWN_EXTENSIONS"]
