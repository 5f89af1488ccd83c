"""Heading extraction and table-of-contents rendering."""

from .utils import SlugRegistry, slugify
from .extractor import HeadingExtractor, HeadingExtractorConfig
from .markdown import MarkdownHeadingExtractor
from .toc_builder import TOCBuilder, TOCBuilderConfig

__all__ = [
    "HeadingExtractor",
    "HeadingExtractorConfig",
    "MarkdownHeadingExtractor",
    "SlugRegistry",
    "TOCBuilder",
    "TOCBuilderConfig",
    "slugify",
]
