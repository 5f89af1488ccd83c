from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import markdown

from docpage.logging import get_logger
from docpage.render.headings import HeadingAnchorExtension, HeadingRenderer
from docpage.render.sinks import HeadingSink, LoggingHeadingSink

# Extensions that assign their own heading ids; the anchor renderer owns ids.
_AUTO_ID_EXTENSIONS = {"toc", "markdown.extensions.toc"}

logger = get_logger("render.engine")


@dataclass(slots=True)
class MarkdownEngineConfig:
    """Configuration for the Python-Markdown conversion step."""

    extensions: Sequence[str] = field(default_factory=lambda: ("fenced_code", "tables"))
    output_format: str = "html"
    unique_slugs: bool = False


class MarkdownEngine:
    """Convert markdown to HTML with every heading anchored by ``HeadingRenderer``.

    A new ``markdown.Markdown`` instance is built for each call; instances
    carry per-document state and must not be shared between requests.
    """

    def __init__(
        self,
        config: MarkdownEngineConfig | None = None,
        *,
        sink: HeadingSink | None = None,
    ) -> None:
        self.config = config or MarkdownEngineConfig()
        self.sink = sink or LoggingHeadingSink()
        self.extensions = self._resolve_extensions(self.config.extensions)

    def convert(self, source: str, *, sink: HeadingSink | None = None) -> str:
        renderer = HeadingRenderer(sink or self.sink, unique_slugs=self.config.unique_slugs)
        md = markdown.Markdown(
            extensions=[*self.extensions, HeadingAnchorExtension(renderer=renderer)],
            output_format=self.config.output_format,
        )
        return md.convert(source)

    @staticmethod
    def _resolve_extensions(extensions: Sequence[str]) -> List[str]:
        resolved: List[str] = []
        for name in extensions:
            if name in _AUTO_ID_EXTENSIONS:
                logger.warning("Ignoring markdown extension %r: heading ids are assigned by docpage", name)
                continue
            resolved.append(name)
        return resolved


__all__ = ["MarkdownEngine", "MarkdownEngineConfig"]
