from __future__ import annotations

import re
from typing import List

from docpage.ingest.extractor import HeadingExtractor, HeadingExtractorConfig
from docpage.ingest.utils import SlugRegistry, slugify
from docpage.logging import get_logger
from docpage.models.heading import HeadingRecord


_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<title>.*)")

logger = get_logger("ingest.markdown")


class MarkdownHeadingExtractor(HeadingExtractor):
    """Scan raw markdown lines for ``#`` through ``######`` headings.

    Lines are matched independently, so a heading-looking line inside a
    fenced code block is still reported. Titles keep any inline markup
    verbatim; nothing is resolved at this stage.
    """

    def extract(self, source: str) -> List[HeadingRecord]:
        registry = SlugRegistry() if self.config.unique_slugs else None
        headings: List[HeadingRecord] = []

        for line in source.split("\n"):
            match = _HEADING_PATTERN.match(line)
            if not match:
                continue

            level = len(match.group("hashes"))
            title = match.group("title").strip()
            slug = slugify(title)
            if registry is not None:
                slug = registry.claim(slug)
            headings.append(HeadingRecord(level=level, title=title, slug=slug))

        logger.debug("Generated TOC items: %s", headings)
        return headings


__all__ = ["MarkdownHeadingExtractor", "HeadingExtractorConfig"]
