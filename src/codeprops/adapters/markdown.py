"""Markdown front-end keeping fence meta strings for the transform.

Python-Markdown's own ``fenced_code`` extension drops everything after the
language on the opening fence. :class:`CodeMetaExtension` replaces it with a
preprocessor that renders fences as ``<pre><code class="language-x"
data-meta="...">`` so the meta survives to the HTML, where
:func:`codeprops.adapters.html.from_html` moves it into ``data["meta"]``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from html import escape
import re
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from codeprops.core.hast import Root
from codeprops.core.properties import PropertySchema, html

from .html import META_ATTRIBUTE, from_html


class _FenceMetaPreprocessor(Preprocessor):
    """Render fenced code blocks, preserving the info string after the language."""

    _OPEN_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*?)[ \t]*$")
    _CLOSE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t]*$")

    def run(self, lines: list[str]) -> list[str]:
        result: list[str] = []
        index = 0
        total = len(lines)

        while index < total:
            line = lines[index]
            opening = self._OPEN_RE.match(line)
            if not opening or (
                opening.group("fence")[0] == "`" and "`" in opening.group("info")
            ):
                result.append(line)
                index += 1
                continue

            fence = opening.group("fence")
            indent = len(opening.group("indent"))
            start_index = index
            index += 1
            contents: list[str] = []

            while index < total:
                closing = self._CLOSE_RE.match(lines[index])
                if (
                    closing
                    and closing.group("fence")[0] == fence[0]
                    and len(closing.group("fence")) >= len(fence)
                ):
                    break
                contents.append(_dedent(lines[index], indent))
                index += 1

            if index >= total:
                # No closing fence; keep the raw lines
                result.extend(lines[start_index:])
                break

            block = render_fence(opening.group("info"), contents)
            result.extend(["", self.md.htmlStash.store(block), ""])
            index += 1  # Skip closing fence

        return result


def _dedent(line: str, indent: int) -> str:
    stripped = len(line) - len(line.lstrip(" "))
    return line[min(indent, stripped) :]


def split_info(info: str) -> tuple[str | None, str]:
    """Split a fence info string into language and meta."""
    info = info.strip()
    if not info:
        return None, ""
    language, *rest = info.split(None, 1)
    return language, rest[0].strip() if rest else ""


def render_fence(info: str, contents: Sequence[str]) -> str:
    """Return the HTML for one fenced block."""
    language, meta = split_info(info)
    class_attr = f' class="language-{escape(language)}"' if language else ""
    meta_attr = f' {META_ATTRIBUTE}="{escape(meta)}"' if meta else ""
    code = "".join(f"{line}\n" for line in contents)
    return f"<pre><code{class_attr}{meta_attr}>{escape(code, quote=False)}</code></pre>"


class CodeMetaExtension(Extension):
    """Register the meta-preserving fence preprocessor."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        md.registerExtension(self)
        md.preprocessors.register(_FenceMetaPreprocessor(md), "codeprops_fences", priority=27)


def makeExtension(**_: object) -> CodeMetaExtension:  # pragma: no cover - API hook  # noqa: N802
    return CodeMetaExtension()


def render_markdown(text: str, extensions: Iterable[Any] | None = None) -> str:
    """Convert Markdown to HTML with fence meta preserved."""
    md = Markdown(extensions=[CodeMetaExtension(), *(extensions or [])])
    return md.convert(text)


def markdown_to_hast(
    text: str,
    *,
    extensions: Iterable[Any] | None = None,
    schema: PropertySchema = html,
) -> Root:
    """Convert Markdown into a hast tree ready for :func:`codeprops.code_props`."""
    return from_html(render_markdown(text, extensions), schema=schema)


__all__ = [
    "CodeMetaExtension",
    "makeExtension",
    "markdown_to_hast",
    "render_markdown",
    "render_fence",
    "split_info",
]
