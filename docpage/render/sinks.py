from __future__ import annotations

import logging
from typing import List, Protocol

from docpage.logging import get_logger
from docpage.models.heading import HeadingRecord


class HeadingSink(Protocol):
    def record(self, heading: HeadingRecord) -> None:
        """Receive one anchored heading as it is rendered."""


class LoggingHeadingSink:
    """Write each heading-to-slug mapping to the docpage log."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("render.headings")

    def record(self, heading: HeadingRecord) -> None:
        self.logger.info(
            'Generated header: "%s" (level %d) with slug: "%s"',
            heading.title,
            heading.level,
            heading.slug,
        )


class RecordingHeadingSink:
    """Collect headings in the order the engine renders them."""

    def __init__(self) -> None:
        self.headings: List[HeadingRecord] = []

    def record(self, heading: HeadingRecord) -> None:
        self.headings.append(heading)


class MultiHeadingSink:
    """Forward each heading to several sinks in order."""

    def __init__(self, *sinks: HeadingSink) -> None:
        self.sinks = sinks

    def record(self, heading: HeadingRecord) -> None:
        for sink in self.sinks:
            sink.record(heading)


__all__ = ["HeadingSink", "LoggingHeadingSink", "RecordingHeadingSink", "MultiHeadingSink"]
