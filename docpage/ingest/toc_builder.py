from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Sequence

from docpage.models.heading import HeadingRecord


@dataclass(slots=True)
class TOCBuilderConfig:
    """Configuration for the navigation block rendered above the document."""

    title: str = "Table of Contents"
    indent_px: int = 20
    escape_titles: bool = False


class TOCBuilder:
    """Render an ordered heading list as a flat, indented navigation block."""

    def __init__(self, config: TOCBuilderConfig | None = None) -> None:
        self.config = config or TOCBuilderConfig()

    def build(self, headings: Sequence[HeadingRecord]) -> str:
        if not headings:
            return ""

        parts: List[str] = [f'<nav id="toc"><h2>{html.escape(self.config.title)}</h2>']
        for heading in headings:
            parts.append(
                f'<div style="margin-left: {self.indent_for(heading.level)}px;">'
                f'<a href="#{heading.slug}">{self._title(heading)}</a></div>'
            )
        parts.append("</nav>")
        return "".join(parts)

    def indent_for(self, level: int) -> int:
        return (level - 1) * self.config.indent_px

    def _title(self, heading: HeadingRecord) -> str:
        # Titles are interpolated as-is unless escaping is switched on.
        if self.config.escape_titles:
            return html.escape(heading.title)
        return heading.title


__all__ = ["TOCBuilder", "TOCBuilderConfig"]
