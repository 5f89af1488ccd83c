from __future__ import annotations

NO_HEADINGS_NOTICE = (
    "<p><em>Note: No headings found for navigation. Please ensure your Markdown file "
    'uses proper header syntax (e.g., "## Creational Design Patterns").</em></p>'
)


class DocumentComposer:
    """Join the navigation block and the converted body into one fragment."""

    def __init__(self, fallback_notice: str = NO_HEADINGS_NOTICE) -> None:
        self.fallback_notice = fallback_notice

    def compose(self, toc_html: str, body_html: str) -> str:
        if not toc_html:
            return self.fallback_notice + body_html
        return toc_html + body_html


__all__ = ["DocumentComposer", "NO_HEADINGS_NOTICE"]
