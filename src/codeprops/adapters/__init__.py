"""Front-ends producing hast trees that carry code fence meta."""

from __future__ import annotations

from .html import META_ATTRIBUTE, from_html, from_soup
from .markdown import CodeMetaExtension, markdown_to_hast, render_markdown


__all__ = [
    "META_ATTRIBUTE",
    "CodeMetaExtension",
    "from_html",
    "from_soup",
    "markdown_to_hast",
    "render_markdown",
]
