from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docpage.ingest.extractor import HeadingExtractorConfig
from docpage.ingest.markdown import MarkdownHeadingExtractor
from docpage.ingest.toc_builder import TOCBuilder, TOCBuilderConfig
from docpage.logging import configure_logging
from docpage.render.engine import MarkdownEngine, MarkdownEngineConfig
from docpage.render.pipeline import TOC_SOURCES, RenderPipeline
from docpage.server.loader import DocumentLoader
from docpage.server.page import render_page


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a markdown document to a standalone HTML page.")
    parser.add_argument("document", type=Path, help="Markdown file to render")
    parser.add_argument("--output", type=Path, default=None, help="Write the page here instead of stdout")
    parser.add_argument("--title", default=None, help="Page title (default: the document file name)")
    parser.add_argument("--author", default=None, help="Optional author line under the title")
    parser.add_argument(
        "--toc-source",
        choices=TOC_SOURCES,
        default="raw",
        help="Build the TOC from raw heading lines or from the headings the engine anchored (default: raw)",
    )
    parser.add_argument("--unique-slugs", action="store_true", help="Suffix duplicate slugs with -1, -2, ...")
    parser.add_argument("--escape-titles", action="store_true", help="HTML-escape titles in the TOC")
    parser.add_argument(
        "--extension",
        action="append",
        dest="extensions",
        default=None,
        help="Python-Markdown extension to enable (repeatable; default: fenced_code and tables)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(verbose=args.verbose)

    engine_config = MarkdownEngineConfig(unique_slugs=args.unique_slugs)
    if args.extensions:
        engine_config.extensions = tuple(args.extensions)

    pipeline = RenderPipeline(
        extractor=MarkdownHeadingExtractor(HeadingExtractorConfig(unique_slugs=args.unique_slugs)),
        toc_builder=TOCBuilder(TOCBuilderConfig(escape_titles=args.escape_titles)),
        engine=MarkdownEngine(engine_config),
        toc_source=args.toc_source,
    )

    source = DocumentLoader(args.document).load()
    page = render_page(
        pipeline.render(source),
        title=args.title or args.document.stem,
        author=args.author,
    )

    if args.output is None:
        sys.stdout.write(page)
    else:
        args.output.write_text(page, encoding="utf-8")


if __name__ == "__main__":
    main()
