from __future__ import annotations

import html
import xml.etree.ElementTree as etree
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.extensions.toc import render_inner_html, strip_tags, unescape
from markdown.treeprocessors import Treeprocessor

from docpage.ingest.utils import SlugRegistry, slugify
from docpage.models.heading import HeadingRecord
from docpage.render.sinks import HeadingSink, LoggingHeadingSink

_HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}


class HeadingRenderer:
    """Derive the anchor for one rendered heading and report it to a sink.

    ``text`` is the heading's plain text after the engine has resolved inline
    markup, so a heading such as ``## **Bold** move`` arrives as
    ``"Bold move"``. Create one renderer per conversion.
    """

    def __init__(self, sink: HeadingSink | None = None, *, unique_slugs: bool = False) -> None:
        self.sink = sink or LoggingHeadingSink()
        self._registry = SlugRegistry() if unique_slugs else None

    def anchor(self, level: int, text: str) -> HeadingRecord:
        slug = slugify(text)
        if self._registry is not None:
            slug = self._registry.claim(slug)
        heading = HeadingRecord(level=level, title=text, slug=slug)
        self.sink.record(heading)
        return heading


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Set the ``id`` of every heading element using a ``HeadingRenderer``."""

    def __init__(self, md: Markdown, renderer: HeadingRenderer) -> None:
        super().__init__(md)
        self.renderer = renderer

    def run(self, root: etree.Element) -> None:
        for element in root.iter():
            level = _HEADING_TAGS.get(element.tag)
            if level is None:
                continue
            heading = self.renderer.anchor(level, self._plain_text(element))
            element.set("id", heading.slug)

    def _plain_text(self, element: etree.Element) -> str:
        # render_inner_html restores stashed raw HTML; tags and entities go here.
        text = strip_tags(unescape(render_inner_html(element, self.md)))
        return html.unescape(text).strip()


class HeadingAnchorExtension(Extension):
    """Python-Markdown extension wiring a ``HeadingRenderer`` into conversion."""

    def __init__(self, renderer: HeadingRenderer | None = None, **kwargs: Any) -> None:
        self.renderer = renderer
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:
        renderer = self.renderer or HeadingRenderer()
        # Runs after inline processing (priority 20) so heading text is resolved.
        md.treeprocessors.register(HeadingAnchorTreeprocessor(md, renderer), "heading_anchor", 5)


__all__ = ["HeadingRenderer", "HeadingAnchorTreeprocessor", "HeadingAnchorExtension"]
