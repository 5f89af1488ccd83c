from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List

from docpage.models.heading import HeadingRecord


@dataclass(slots=True)
class HeadingExtractorConfig:
    """Configuration for scanning documents for headings."""

    unique_slugs: bool = False


class HeadingExtractor(ABC):
    """Abstract base class for turning source text into ordered heading records."""

    def __init__(self, config: HeadingExtractorConfig | None = None) -> None:
        self.config = config or HeadingExtractorConfig()

    @abstractmethod
    def extract(self, source: str) -> List[HeadingRecord]:
        """Return the headings of ``source`` in document order."""

    def extract_path(self, path: Path, encoding: str = "utf-8") -> List[HeadingRecord]:
        """Utility for extracting straight from a file on disk."""

        return self.extract(path.read_text(encoding=encoding))


__all__ = ["HeadingExtractor", "HeadingExtractorConfig"]
