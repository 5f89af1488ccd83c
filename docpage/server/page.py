"""HTML page shell wrapped around the rendered document fragment."""

from __future__ import annotations

import html
from string import Template

HIGHLIGHT_JS_VERSION = "11.8.0"

_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>$title</title>
  <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/highlight.js/$hljs/styles/github.min.css">
  <style>
    html { scroll-behavior: smooth; }
    body {
      font-family: sans-serif;
      background: #f9f9f9;
      margin: 0;
      padding: 20px;
      color: #333;
      line-height: 1.6;
    }
    .container {
      max-width: 960px;
      margin: 0 auto;
      background: #fff;
      padding: 30px;
      box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
      border-radius: 4px;
    }
    .author { font-size: 0.9em; color: #777; }
    h1, h2, h3, h4, h5, h6 { margin-top: 1.5em; margin-bottom: 0.5em; color: #2c3e50; }
    pre { background: #f4f4f4; padding: 10px; overflow-x: auto; border-radius: 4px; }
    code { background: #f4f4f4; padding: 2px 4px; font-family: monospace; border-radius: 3px; }
    a { color: #2980b9; text-decoration: none; }
    a:hover { text-decoration: underline; }
    #toc {
      margin-bottom: 20px;
      padding: 10px;
      border: 1px solid #ddd;
      background: #f0f0f0;
      border-radius: 4px;
    }
    #toc h2 { margin-top: 0; }
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>$title</h1>
      $author
    </div>
    $content
  </div>
  <script src="https://cdnjs.cloudflare.com/ajax/libs/highlight.js/$hljs/highlight.min.js"></script>
  <script>hljs.highlightAll();</script>
</body>
</html>
"""
)


def render_page(content_html: str, *, title: str, author: str | None = None) -> str:
    """Embed ``content_html`` in a full HTML document."""
    author_html = f'<div class="author">{html.escape(author)}</div>' if author else ""
    return _PAGE_TEMPLATE.substitute(
        title=html.escape(title),
        author=author_html,
        content=content_html,
        hljs=HIGHLIGHT_JS_VERSION,
    )


__all__ = ["render_page"]
