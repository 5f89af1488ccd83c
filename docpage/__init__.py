"""Serve a single Markdown document as HTML with an anchored outline."""

from .models.heading import HeadingRecord, RenderedDocument

__all__ = ["HeadingRecord", "RenderedDocument"]
