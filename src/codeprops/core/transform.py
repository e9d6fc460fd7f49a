"""Attach code fence meta attributes to ``<code>`` or ``<pre>`` elements.

The transform walks a hast tree and, for every ``<code>`` element carrying a
non-empty ``data["meta"]`` string, replaces the target element with an
:class:`~codeprops.core.jsx.MdxFlowExpression`. The expression holds the
target's normalized properties followed by the attributes parsed from the
meta, so ```` ```js title="app.js" ```` ends up as
``<pre title="app.js"><code className="language-js">...`` in generated JSX.

Elements that do not qualify (other tags, missing or empty meta, a ``<pre>``
parent with siblings in ``pre`` mode) are left untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any, Protocol

from .config import CodePropsOptions, load_options
from .estree import merge_attributes, to_jsx
from .exceptions import MetaSyntaxError
from .hast import Element, Parent, Root
from .jsx import JsxElement, MdxFlowExpression
from .meta import parse_meta
from .properties import PropertySchema, html
from .visit import SKIP, visit_parents


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Target:
    """Element receiving the attributes and the parent holding it."""

    element: Element
    parent: Parent


class TargetStrategy(Protocol):
    """Decide which element of a ``<code>`` node's lineage gets the meta."""

    def resolve(self, node: Element, ancestors: list[Parent]) -> Target | None: ...


class CodeTarget:
    """Attach attributes to the ``<code>`` element itself."""

    def resolve(self, node: Element, ancestors: list[Parent]) -> Target | None:
        if not ancestors:
            return None
        return Target(node, ancestors[-1])


class PreTarget:
    """Attach attributes to a ``<pre>`` parent whose only child is the code."""

    def resolve(self, node: Element, ancestors: list[Parent]) -> Target | None:
        if len(ancestors) < 2:
            return None
        parent = ancestors[-1]
        if not isinstance(parent, Element) or parent.tag_name != "pre":
            return None
        if len(parent.children) != 1:
            return None
        return Target(parent, ancestors[-2])


STRATEGIES: Mapping[str, TargetStrategy] = {"code": CodeTarget(), "pre": PreTarget()}


def _meta_of(node: Any) -> str | None:
    if not isinstance(node, Element) or node.tag_name != "code":
        return None
    meta = node.meta
    return meta or None


class CodePropsTransform:
    """Callable tree transform configured once and applied per document."""

    def __init__(
        self,
        options: CodePropsOptions | Mapping[str, Any] | None = None,
        *,
        schema: PropertySchema | None = None,
        **overrides: Any,
    ) -> None:
        self.options = load_options(options, **overrides)
        self.schema: PropertySchema = schema or html
        self.strategy = STRATEGIES[self.options.tag_name]

    def __call__(self, tree: Root) -> None:
        visit_parents(tree, "element", self._visit)

    def _visit(self, node: Element, ancestors: list[Parent]) -> str | None:
        meta = _meta_of(node)
        if meta is None:
            return None

        target = self.strategy.resolve(node, ancestors)
        if target is None:
            return None

        replacement = self.synthesize(target.element, meta)
        siblings = target.parent.children
        index = next(i for i, child in enumerate(siblings) if child is target.element)
        siblings[index] = replacement
        logger.debug(
            "Attached %d attribute(s) to <%s> from code meta.",
            len(replacement.attributes),
            replacement.tag_name,
        )
        return SKIP

    def synthesize(self, element: Element, meta: str) -> MdxFlowExpression:
        """Build the flow expression replacing *element*."""
        lifted = to_jsx(
            element,
            schema=self.schema,
            attribute_name_case=self.options.attribute_name_case,  # type: ignore[arg-type]
        )
        try:
            parsed = parse_meta(meta, element.tag_name)
        except MetaSyntaxError as exc:
            exc.position = element.position
            raise

        merged = JsxElement(
            tag_name=lifted.tag_name,
            attributes=merge_attributes(lifted.attributes, parsed),
            children=lifted.children,
        )
        return MdxFlowExpression(merged, data=dict(element.data), position=element.position)


def code_props(
    *,
    tag_name: str | None = None,
    attribute_name_case: str | None = None,
    schema: PropertySchema | None = None,
    **options: Any,
) -> CodePropsTransform:
    """Create the transform; invalid options raise ``ConfigurationError`` here."""
    return CodePropsTransform(
        options,
        schema=schema,
        tag_name=tag_name,
        attribute_name_case=attribute_name_case,
    )


__all__ = [
    "STRATEGIES",
    "CodePropsTransform",
    "CodeTarget",
    "PreTarget",
    "Target",
    "TargetStrategy",
    "code_props",
]
