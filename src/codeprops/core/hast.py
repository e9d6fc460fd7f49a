"""Minimal hast-like document tree.

The tree mirrors the shape produced by Markdown-to-HTML pipelines: a ``Root``
holding ``Element``, ``Text`` and ``Comment`` nodes. Elements store their
attributes as *properties*, keyed by property name (``className``,
``htmlFor``, ``dataLine``) rather than by attribute name, and carry an
out-of-band ``data`` mapping where the Markdown layer leaves the raw fence meta
string under the ``"meta"`` key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias, Union


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .jsx import MdxFlowExpression


PropertyValue: TypeAlias = Union[None, bool, str, int, float, list[Union[str, int, float]]]


@dataclass(frozen=True, slots=True)
class Point:
    """One place in the source document (1-based line and column)."""

    line: int
    column: int
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a node in the source document."""

    start: Point
    end: Point | None = None


@dataclass(slots=True)
class Text:
    value: str
    position: Position | None = None

    type: ClassVar[str] = "text"


@dataclass(slots=True)
class Comment:
    value: str
    position: Position | None = None

    type: ClassVar[str] = "comment"


@dataclass(slots=True)
class Element:
    """Element node with properties, children and out-of-band data."""

    tag_name: str
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
    position: Position | None = None

    type: ClassVar[str] = "element"

    @property
    def meta(self) -> str | None:
        """Return the fence meta string attached by the Markdown layer, if any."""
        value = self.data.get("meta")
        return value if isinstance(value, str) else None


@dataclass(slots=True)
class Root:
    children: list[Node] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
    position: Position | None = None

    type: ClassVar[str] = "root"


Node: TypeAlias = Union[Element, Text, Comment, "MdxFlowExpression"]
Parent: TypeAlias = Union[Root, Element]


def h(
    tag_name: str,
    properties: Mapping[str, PropertyValue] | None = None,
    *children: Node | str | Iterable[Node | str],
    meta: str | None = None,
) -> Element:
    """Build an element the way ``hastscript`` does.

    Strings become text nodes and iterables of children are flattened, which
    keeps fixtures in tests short::

        h("pre", None, h("code", {"className": ["language-js"]}, "1;\\n", meta="a"))
    """
    element = Element(tag_name, dict(properties or {}))
    for child in children:
        if isinstance(child, str):
            element.children.append(Text(child))
        elif isinstance(child, (Element, Text, Comment)) or getattr(child, "type", None):
            element.children.append(child)  # type: ignore[arg-type]
        else:
            for item in child:
                element.children.append(Text(item) if isinstance(item, str) else item)
    if meta is not None:
        element.data["meta"] = meta
    return element


__all__ = [
    "Comment",
    "Element",
    "Node",
    "Parent",
    "Point",
    "Position",
    "PropertyValue",
    "Root",
    "Text",
    "h",
]
