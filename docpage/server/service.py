from __future__ import annotations

from typing import List

from docpage.ingest.extractor import HeadingExtractorConfig
from docpage.ingest.markdown import MarkdownHeadingExtractor
from docpage.ingest.toc_builder import TOCBuilder, TOCBuilderConfig
from docpage.models.heading import HeadingRecord
from docpage.render.engine import MarkdownEngine, MarkdownEngineConfig
from docpage.render.pipeline import RenderPipeline
from docpage.server.loader import DocumentLoader
from docpage.server.page import render_page
from docpage.server.settings import Settings


def build_pipeline(settings: Settings) -> RenderPipeline:
    return RenderPipeline(
        extractor=MarkdownHeadingExtractor(HeadingExtractorConfig(unique_slugs=settings.unique_slugs)),
        toc_builder=TOCBuilder(
            TOCBuilderConfig(
                title=settings.toc_title,
                indent_px=settings.toc_indent_px,
                escape_titles=settings.escape_titles,
            )
        ),
        engine=MarkdownEngine(
            MarkdownEngineConfig(
                extensions=tuple(settings.markdown_extensions),
                unique_slugs=settings.unique_slugs,
            )
        ),
        toc_source=settings.toc_source,
    )


class PageService:
    """Load the configured document and render it for one request."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.loader = DocumentLoader(settings.document_path, encoding=settings.document_encoding)
        self.pipeline = build_pipeline(settings)

    def render_page(self) -> str:
        source = self.loader.load()
        content = self.pipeline.render(source)
        return render_page(content, title=self.settings.page_title, author=self.settings.page_author)

    def headings(self) -> List[HeadingRecord]:
        source = self.loader.load()
        return list(self.pipeline.render_document(source).headings)


__all__ = ["PageService", "build_pipeline"]
