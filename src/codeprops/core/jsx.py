"""JSX attribute model used when lifting elements for code generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias, Union

from .hast import Node, Position


@dataclass(frozen=True, slots=True)
class JsxExpression:
    """An embedded expression rendered verbatim by the code generator.

    ``source`` holds the JavaScript text between the braces. ``value`` carries
    the decoded Python value when the expression was synthesized from data
    (inline styles), and stays ``None`` for expressions parsed from meta.
    """

    source: str
    value: Any = None


@dataclass(frozen=True, slots=True)
class JsxAttribute:
    """``name``, ``name="literal"`` or ``name={expression}``."""

    name: str
    value: str | JsxExpression | None = None

    type: ClassVar[str] = "JSXAttribute"

    @property
    def is_boolean(self) -> bool:
        return self.value is None


@dataclass(frozen=True, slots=True)
class JsxSpreadAttribute:
    """``{...argument}``; ``argument`` is source text or a synthesized object."""

    argument: str | JsxExpression

    type: ClassVar[str] = "JSXSpreadAttribute"


Attribute: TypeAlias = Union[JsxAttribute, JsxSpreadAttribute]


@dataclass(slots=True)
class JsxElement:
    """An element lifted into the JSX representation."""

    tag_name: str
    attributes: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def attribute(self, name: str) -> JsxAttribute | None:
        """Return the last attribute called *name* (JSX last-wins semantics)."""
        found: JsxAttribute | None = None
        for attribute in self.attributes:
            if isinstance(attribute, JsxAttribute) and attribute.name == name:
                found = attribute
        return found


@dataclass(slots=True)
class MdxFlowExpression:
    """Replacement node rendered by code generation as an embedded expression."""

    element: JsxElement
    data: dict[str, Any] = field(default_factory=dict)
    position: Position | None = None

    type: ClassVar[str] = "mdxFlowExpression"

    @property
    def tag_name(self) -> str:
        return self.element.tag_name

    @property
    def attributes(self) -> list[Attribute]:
        return self.element.attributes

    @property
    def children(self) -> list[Node]:
        return self.element.children


__all__ = [
    "Attribute",
    "JsxAttribute",
    "JsxElement",
    "JsxExpression",
    "JsxSpreadAttribute",
    "MdxFlowExpression",
]
