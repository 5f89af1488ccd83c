from __future__ import annotations

from pathlib import Path

from docpage.logging import get_logger

logger = get_logger("server.loader")


class SourceUnavailableError(RuntimeError):
    """Raised when the markdown document cannot be read."""


class DocumentLoader:
    """Read the served markdown document from disk on every call."""

    def __init__(self, path: Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> str:
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading Markdown file %s: %s", self.path, exc)
            raise SourceUnavailableError(f"Could not read Markdown file: {self.path}") from exc


__all__ = ["DocumentLoader", "SourceUnavailableError"]
