"""Depth-first tree walker handing each node its ancestor chain."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

from .hast import Element, Node, Parent, Root


SKIP: Final = "skip"
"""Visitor return value preventing the walker from entering the current node."""

Visitor = Callable[[Any, list[Parent]], Any]
Test = Callable[[Any], bool] | str | None


def _matches(test: Test, node: Any) -> bool:
    if test is None:
        return True
    if isinstance(test, str):
        return getattr(node, "type", None) == test
    return bool(test(node))


def visit_parents(tree: Root | Element, test: Test, visitor: Visitor) -> None:
    """Walk *tree* in pre-order, calling *visitor* on nodes accepted by *test*.

    ``test`` is a node type (``"element"``), a predicate, or ``None`` for every
    node. The visitor receives the node and the list of its ancestors, root
    first. Only ``Root`` and ``Element`` nodes are entered, so nodes swapped in
    by a visitor (flow expressions) are never walked. Children are iterated from
    a snapshot: a visitor may replace the current node, or one of its
    ancestors, in the parent's child list.
    """
    _walk(tree, test, visitor, [])


def _walk(node: Node | Root, test: Test, visitor: Visitor, ancestors: list[Parent]) -> None:
    if _matches(test, node) and visitor(node, ancestors) == SKIP:
        return

    if not isinstance(node, (Root, Element)):
        return

    lineage = [*ancestors, node]
    for child in list(node.children):
        _walk(child, test, visitor, lineage)


__all__ = ["SKIP", "visit_parents"]
