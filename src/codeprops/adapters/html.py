"""Build hast trees from HTML markup with BeautifulSoup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment as SoupComment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from codeprops.core.hast import Comment, Element, Node, Point, Position, PropertyValue, Root, Text
from codeprops.core.properties import PropertyInfo, PropertySchema, html


META_ATTRIBUTE = "data-meta"
"""Attribute carrying the fence meta string through HTML."""

_SKIPPED = (Declaration, Doctype, ProcessingInstruction)


def _number(text: str) -> PropertyValue:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def property_value(value: Any, info: PropertyInfo) -> PropertyValue:
    """Convert a BeautifulSoup attribute value into a hast property value."""
    if isinstance(value, (list, tuple)):
        text = " ".join(str(item) for item in value)
    else:
        text = str(value)

    if info.comma_or_space_separated:
        tokens = text.split(",") if "," in text else text.split()
        return [token.strip() for token in tokens if token.strip()]
    if info.comma_separated:
        return [token.strip() for token in text.split(",") if token.strip()]
    if info.space_separated:
        return text.split()
    if info.boolean:
        return True
    if info.overloaded_boolean:
        return True if text in {"", info.attribute} else text
    if info.number:
        return _number(text)
    return text


def _position(tag: Tag) -> Position | None:
    line = getattr(tag, "sourceline", None)
    column = getattr(tag, "sourcepos", None)
    if line is None:
        return None
    return Position(Point(line, (column or 0) + 1))


def _element(tag: Tag, schema: PropertySchema) -> Element:
    attributes = dict(tag.attrs)
    data: dict[str, Any] = {}
    if tag.name == "code" and META_ATTRIBUTE in attributes:
        meta = attributes.pop(META_ATTRIBUTE)
        data["meta"] = " ".join(meta) if isinstance(meta, list) else str(meta)

    properties: dict[str, PropertyValue] = {}
    for name, value in attributes.items():
        info = schema.find(name)
        properties[info.property] = property_value(value, info)

    return Element(
        tag_name=tag.name,
        properties=properties,
        children=_children(tag.children, schema),
        data=data,
        position=_position(tag),
    )


def _children(nodes: Iterable[PageElement], schema: PropertySchema) -> list[Node]:
    children: list[Node] = []
    for node in nodes:
        if isinstance(node, Tag):
            children.append(_element(node, schema))
        elif isinstance(node, SoupComment):
            children.append(Comment(str(node)))
        elif isinstance(node, _SKIPPED):
            continue
        elif isinstance(node, (CData, NavigableString)):
            children.append(Text(str(node)))
    return children


def from_soup(soup: BeautifulSoup | Tag, *, schema: PropertySchema = html) -> Root:
    """Convert a parsed BeautifulSoup document into a :class:`Root`."""
    return Root(children=_children(soup.children, schema))


def from_html(markup: str, *, schema: PropertySchema = html, parser: str = "html.parser") -> Root:
    """Parse *markup* and convert it into a :class:`Root`.

    ``<code data-meta="...">`` elements get their meta moved into
    ``element.data["meta"]`` so the transform can pick it up.
    """
    return from_soup(BeautifulSoup(markup, parser), schema=schema)


__all__ = ["META_ATTRIBUTE", "from_html", "from_soup", "property_value"]
