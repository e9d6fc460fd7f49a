"""Parse code fence meta strings as JSX attributes.

A meta string such as ``title="app.js" highlight={[1, 3]} {...props}`` is read
as the attribute list of the synthetic element ``<pre title="app.js" ... />``
using the tree-sitter JavaScript grammar, which understands JSX. Parsing the
whole fragment, rather than tokenising the meta on its own, keeps the accepted
syntax identical to what a JSX compiler accepts inside an opening tag.

The grammar rejects a bare ``&`` inside JSX strings (``title="Q&A"``) although
JSX reads it as text. Ampersands inside attribute strings are masked before
parsing and string values are read back from the unmasked source, where only
``;``-terminated character references are decoded.
"""

from __future__ import annotations

from functools import lru_cache
from html.entities import name2codepoint
import re

from tree_sitter import Language, Node, Parser
import tree_sitter_javascript

from .exceptions import MetaSyntaxError
from .jsx import Attribute, JsxAttribute, JsxExpression, JsxSpreadAttribute


_SNIPPET_LENGTH = 20
_AMPERSAND_MASK = "_"
_CHARACTER_REFERENCE = re.compile(
    r"&(?:#[xX](?P<hex>[0-9a-fA-F]+)|#(?P<decimal>[0-9]+)|(?P<name>[A-Za-z][A-Za-z0-9]*));"
)
_ENTITIES = {**name2codepoint, "apos": 0x27}


@lru_cache(maxsize=1)
def _parser() -> Parser:
    return Parser(Language(tree_sitter_javascript.language()))


def _mask_ampersands(meta: str) -> str:
    """Replace ``&`` inside top-level attribute strings with a same-width byte."""
    chars = list(meta)
    depth = 0
    quote: str | None = None
    index = 0
    while index < len(chars):
        char = chars[index]
        if depth == 0:
            if char in "\"'":
                end = meta.find(char, index + 1)
                if end == -1:
                    break
                for position in range(index + 1, end):
                    if chars[position] == "&":
                        chars[position] = _AMPERSAND_MASK
                index = end
            elif char == "{":
                depth = 1
        elif quote is not None:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
        elif char in "\"'`":
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        index += 1
    return "".join(chars)


def _decode_reference(match: re.Match[str]) -> str:
    if match["hex"]:
        code = int(match["hex"], 16)
    elif match["decimal"]:
        code = int(match["decimal"])
    else:
        code = _ENTITIES.get(match["name"], -1)
    if not 0 <= code <= 0x10FFFF:
        return match.group()
    return chr(code)


def decode_character_references(text: str) -> str:
    """Decode ``&name;``, ``&#N;`` and ``&#xH;``; anything else stays literal."""
    return _CHARACTER_REFERENCE.sub(_decode_reference, text)


class _Fragment:
    """Source bytes of ``<tag meta />`` and helpers mapping back into *meta*."""

    def __init__(self, meta: str, tag_name: str) -> None:
        self.meta = meta
        prefix = f"<{tag_name} "
        self.source = f"{prefix}{meta} />".encode()
        self.data = f"{prefix}{_mask_ampersands(meta)} />".encode()
        self.offset = len(prefix.encode())

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def column(self, byte: int) -> int:
        relative = self.source[self.offset : max(byte, self.offset)].decode(
            "utf-8", errors="ignore"
        )
        return min(len(relative), len(self.meta)) + 1

    def error(self, detail: str, byte: int) -> MetaSyntaxError:
        column = self.column(byte)
        return MetaSyntaxError(
            f"Could not parse code meta `{self.meta}`: {detail} (column {column})",
            meta=self.meta,
            column=column,
        )


def _significant(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _first_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _describe(fragment: _Fragment, node: Node) -> str:
    if node.is_missing:
        return f"expected `{node.type}`"
    snippet = fragment.text(node).strip()
    if len(snippet) > _SNIPPET_LENGTH:
        snippet = snippet[:_SNIPPET_LENGTH] + "..."
    if not snippet:
        return "unexpected end of input"
    return f"unexpected `{snippet}`"


def _element(fragment: _Fragment, root: Node) -> Node:
    if root.has_error:
        node = _first_error(root)
        byte = node.start_byte if node is not None else len(fragment.data)
        detail = _describe(fragment, node) if node is not None else "invalid syntax"
        raise fragment.error(detail, byte)

    statements = _significant(root)
    first = statements[0] if statements else None
    expressions = _significant(first) if first is not None else []
    element = expressions[0] if expressions else None
    if (
        len(statements) != 1
        or first is None
        or first.type != "expression_statement"
        or element is None
        or element.type != "jsx_self_closing_element"
        or element.end_byte != len(fragment.data)
    ):
        byte = element.end_byte if element is not None else fragment.offset
        raise fragment.error("expected attributes of a single element", byte)
    return element


def _attribute(fragment: _Fragment, node: Node) -> JsxAttribute:
    parts = _significant(node)
    name = fragment.text(parts[0])
    if len(parts) == 1:
        return JsxAttribute(name)

    value = parts[-1]
    raw = fragment.text(value)
    if raw[:1] in {'"', "'"}:
        return JsxAttribute(name, decode_character_references(raw[1:-1]))

    if value.type == "jsx_expression":
        inner = _significant(value)
        if not inner:
            raise fragment.error(
                "JSX attributes must only be assigned a non-empty expression", value.start_byte
            )
        if inner[0].type == "spread_element":
            raise fragment.error("unexpected spread in attribute value", inner[0].start_byte)
        return JsxAttribute(name, JsxExpression(raw[1:-1].strip()))

    # Element values (``icon=<Icon />``) are embedded as expressions.
    return JsxAttribute(name, JsxExpression(raw))


def _spread(fragment: _Fragment, node: Node) -> JsxSpreadAttribute:
    inner = _significant(node)
    if len(inner) != 1 or inner[0].type != "spread_element":
        raise fragment.error("expected `...` in attribute expression", node.start_byte)
    argument = fragment.text(inner[0]).removeprefix("...").strip()
    return JsxSpreadAttribute(argument)


def parse_meta(meta: str, tag_name: str = "c") -> list[Attribute]:
    """Return the attributes written in *meta*, in source order.

    Raises :class:`MetaSyntaxError` when *meta* is not valid JSX attribute
    syntax.
    """
    fragment = _Fragment(meta, tag_name)
    tree = _parser().parse(fragment.data)
    element = _element(fragment, tree.root_node)

    name = element.child_by_field_name("name")
    name_end = name.end_byte if name is not None else fragment.offset
    attributes: list[Attribute] = []
    for child in _significant(element):
        if child.end_byte <= name_end:
            continue
        if child.type == "jsx_attribute":
            attributes.append(_attribute(fragment, child))
        elif child.type == "jsx_expression":
            attributes.append(_spread(fragment, child))
        else:
            raise fragment.error(f"unexpected `{fragment.text(child)}`", child.start_byte)
    return attributes


__all__ = ["decode_character_references", "parse_meta"]
