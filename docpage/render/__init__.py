"""Markdown conversion with anchored headings and document composition."""

from .sinks import HeadingSink, LoggingHeadingSink, MultiHeadingSink, RecordingHeadingSink
from .headings import HeadingAnchorExtension, HeadingRenderer
from .engine import MarkdownEngine, MarkdownEngineConfig
from .composer import DocumentComposer, NO_HEADINGS_NOTICE
from .pipeline import RenderPipeline, TOC_SOURCES

__all__ = [
    "DocumentComposer",
    "HeadingAnchorExtension",
    "HeadingRenderer",
    "HeadingSink",
    "LoggingHeadingSink",
    "MarkdownEngine",
    "MarkdownEngineConfig",
    "MultiHeadingSink",
    "NO_HEADINGS_NOTICE",
    "RecordingHeadingSink",
    "RenderPipeline",
    "TOC_SOURCES",
]
