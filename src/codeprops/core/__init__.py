"""Core building blocks: tree model, meta parsing, normalization, transform."""

from __future__ import annotations

from .config import CodePropsOptions, load_options
from .estree import merge_attributes, normalize_properties, to_jsx
from .exceptions import CodePropsError, ConfigurationError, MetaSyntaxError, StyleSyntaxError
from .hast import Comment, Element, Point, Position, Root, Text, h
from .jsx import JsxAttribute, JsxElement, JsxExpression, JsxSpreadAttribute, MdxFlowExpression
from .meta import parse_meta
from .properties import PropertyInfo, PropertySchema, Schema, html, normalize
from .style import parse_style
from .transform import CodePropsTransform, CodeTarget, PreTarget, code_props
from .visit import SKIP, visit_parents


__all__ = [
    "SKIP",
    "CodePropsError",
    "CodePropsOptions",
    "CodePropsTransform",
    "CodeTarget",
    "Comment",
    "ConfigurationError",
    "Element",
    "JsxAttribute",
    "JsxElement",
    "JsxExpression",
    "JsxSpreadAttribute",
    "MdxFlowExpression",
    "MetaSyntaxError",
    "Point",
    "Position",
    "PreTarget",
    "PropertyInfo",
    "PropertySchema",
    "Root",
    "Schema",
    "StyleSyntaxError",
    "Text",
    "code_props",
    "h",
    "html",
    "load_options",
    "merge_attributes",
    "normalize",
    "normalize_properties",
    "parse_meta",
    "parse_style",
    "to_jsx",
    "visit_parents",
]
