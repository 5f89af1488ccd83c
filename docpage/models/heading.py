from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class HeadingRecord:
    """A heading found in the document, with the anchor slug it links to."""

    level: int
    title: str
    slug: str


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Navigation block and converted body produced for one request."""

    toc_html: str
    body_html: str
    headings: Tuple[HeadingRecord, ...] = field(default_factory=tuple)


__all__ = ["HeadingRecord", "RenderedDocument"]
