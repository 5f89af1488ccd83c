from __future__ import annotations

from time import perf_counter
from typing import List, Literal, Optional

from docpage.ingest.extractor import HeadingExtractor
from docpage.ingest.markdown import MarkdownHeadingExtractor
from docpage.ingest.toc_builder import TOCBuilder
from docpage.logging import get_logger
from docpage.models.heading import HeadingRecord, RenderedDocument
from docpage.render.composer import DocumentComposer
from docpage.render.engine import MarkdownEngine
from docpage.render.sinks import HeadingSink, MultiHeadingSink, RecordingHeadingSink

TocSource = Literal["raw", "rendered"]
TOC_SOURCES = ("raw", "rendered")

logger = get_logger("render.pipeline")


class RenderPipeline:
    """Turn one markdown source into a navigation block plus anchored body.

    With ``toc_source="raw"`` the TOC comes from re-scanning raw heading lines,
    independently of the engine. Headings with inline markup may then link to
    a slug the body never assigns. ``toc_source="rendered"`` builds the TOC
    from the headings the engine actually anchored instead.
    """

    def __init__(
        self,
        *,
        extractor: Optional[HeadingExtractor] = None,
        toc_builder: Optional[TOCBuilder] = None,
        engine: Optional[MarkdownEngine] = None,
        composer: Optional[DocumentComposer] = None,
        toc_source: TocSource = "raw",
    ) -> None:
        if toc_source not in TOC_SOURCES:
            raise ValueError(f"toc_source must be one of {TOC_SOURCES}, got {toc_source!r}")
        self.extractor = extractor or MarkdownHeadingExtractor()
        self.toc_builder = toc_builder or TOCBuilder()
        self.engine = engine or MarkdownEngine()
        self.composer = composer or DocumentComposer()
        self.toc_source = toc_source

    def render(self, source: str) -> str:
        document = self.render_document(source)
        return self.composer.compose(document.toc_html, document.body_html)

    def render_document(self, source: str) -> RenderedDocument:
        if self.toc_source == "rendered":
            recorder = RecordingHeadingSink()
            body_html = self._convert(source, MultiHeadingSink(self.engine.sink, recorder))
            headings = recorder.headings
        else:
            headings = self._extract(source)
            body_html = self._convert(source, None)

        toc_html = self.toc_builder.build(headings)
        return RenderedDocument(toc_html=toc_html, body_html=body_html, headings=tuple(headings))

    def _extract(self, source: str) -> List[HeadingRecord]:
        start = perf_counter()
        headings = self.extractor.extract(source)
        duration_ms = int((perf_counter() - start) * 1000)
        logger.debug("toc.extract: %d headings in %d ms", len(headings), duration_ms)
        return headings

    def _convert(self, source: str, sink: HeadingSink | None) -> str:
        start = perf_counter()
        try:
            body_html = self.engine.convert(source, sink=sink)
        except Exception as exc:
            duration_ms = int((perf_counter() - start) * 1000)
            logger.error(
                "markdown.convert failed after %d ms on %d chars: %s: %s",
                duration_ms,
                len(source),
                type(exc).__name__,
                exc,
            )
            raise
        duration_ms = int((perf_counter() - start) * 1000)
        logger.debug(
            "markdown.convert: %d chars to %d html chars in %d ms",
            len(source),
            len(body_html),
            duration_ms,
        )
        return body_html


__all__ = ["RenderPipeline", "TocSource", "TOC_SOURCES"]
