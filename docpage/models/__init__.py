from .heading import HeadingRecord, RenderedDocument

__all__ = ["HeadingRecord", "RenderedDocument"]
