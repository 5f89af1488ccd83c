from __future__ import annotations

import re
from typing import Set


_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9_]+")


def slugify(text: str) -> str:
    """Create a URL-fragment slug from heading text.

    Runs of characters outside ``[a-z0-9_]`` collapse into a single hyphen.
    Distinct titles that normalize the same way share a slug.
    """

    slug = _NON_SLUG_PATTERN.sub("-", text.lower())
    return slug.strip("-")


class SlugRegistry:
    """Hand out unique slugs within one document by appending a counter."""

    def __init__(self) -> None:
        self._used: Set[str] = set()

    def claim(self, slug: str) -> str:
        candidate = slug
        counter = 0
        while candidate in self._used:
            counter += 1
            candidate = f"{slug}-{counter}"
        self._used.add(candidate)
        return candidate


__all__ = ["slugify", "SlugRegistry"]
