"""Decode inline ``style`` strings into JSX style objects."""

from __future__ import annotations

import re
from typing import Any

import tinycss2
from tinycss2.ast import Declaration, LiteralToken, ParseError, WhitespaceToken

from .exceptions import StyleSyntaxError


_DASH_LETTER = re.compile(r"-([a-z])")
_NEWLINES = re.compile(r"\r\n?|\f")
_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def style_property_name(name: str) -> str:
    """Camel-case a CSS property name the way React expects it.

    Custom properties (``--brand``) are returned untouched, ``-ms-`` loses its
    leading dash (``msTransform``) while other vendor prefixes are capitalised
    (``WebkitTransition``).
    """
    if name.startswith("--"):
        return name
    if name.startswith("-ms-"):
        name = f"ms-{name[4:]}"
    return _DASH_LETTER.sub(lambda match: match.group(1).upper(), name)


def _line_starts(text: str) -> list[int]:
    starts = [0]
    starts.extend(index + 1 for index, char in enumerate(text) if char == "\n")
    return starts


def parse_style(value: str, tag_name: str) -> dict[str, str]:
    """Parse a CSS declaration list into ``{camelCaseName: value}``.

    Property names keep their source casing and values keep their source text
    (comments removed, ``!important`` kept). Later declarations of the same
    property override earlier ones. Raises :class:`StyleSyntaxError` when the
    declaration list is malformed.
    """
    text = _NEWLINES.sub("\n", value)
    starts = _line_starts(text)

    def offset(token: Any) -> int:
        return starts[token.source_line - 1] + token.source_column - 1

    separators = [
        offset(token)
        for token in tinycss2.parse_component_value_list(text, skip_comments=True)
        if isinstance(token, LiteralToken) and token.value == ";"
    ]

    result: dict[str, str] = {}
    for node in tinycss2.parse_declaration_list(text, skip_comments=True, skip_whitespace=True):
        if isinstance(node, ParseError):
            raise StyleSyntaxError(
                f"Could not parse `style` attribute on `{tag_name}`: {node.message}"
            )
        if not isinstance(node, Declaration):
            raise StyleSyntaxError(f"Could not parse `style` attribute on `{tag_name}`")

        tokens = [token for token in node.value if not isinstance(token, WhitespaceToken)]
        if tokens:
            start = offset(tokens[0])
            end = next((position for position in separators if position > start), len(text))
            declared = _COMMENT.sub("", text[start:end]).strip()
        else:
            declared = "!important" if node.important else ""
        result[style_property_name(node.name)] = declared
    return result


__all__ = ["parse_style", "style_property_name"]
