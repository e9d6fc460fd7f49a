"""Turn code fence meta strings into JSX props on ``<pre>``/``<code>`` elements."""

from __future__ import annotations

from codeprops.adapters import CodeMetaExtension, from_html, markdown_to_hast
from codeprops.core import (
    SKIP,
    CodePropsError,
    CodePropsOptions,
    CodePropsTransform,
    Comment,
    ConfigurationError,
    Element,
    JsxAttribute,
    JsxElement,
    JsxExpression,
    JsxSpreadAttribute,
    MdxFlowExpression,
    MetaSyntaxError,
    Point,
    Position,
    PropertyInfo,
    PropertySchema,
    Root,
    StyleSyntaxError,
    Text,
    code_props,
    h,
    html,
    merge_attributes,
    normalize,
    normalize_properties,
    parse_meta,
    parse_style,
    to_jsx,
    visit_parents,
)
from codeprops.version import get_version


__version__ = get_version()

__all__ = [
    "SKIP",
    "CodeMetaExtension",
    "CodePropsError",
    "CodePropsOptions",
    "CodePropsTransform",
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
    "PropertyInfo",
    "PropertySchema",
    "Root",
    "StyleSyntaxError",
    "Text",
    "__version__",
    "code_props",
    "from_html",
    "get_version",
    "h",
    "html",
    "markdown_to_hast",
    "merge_attributes",
    "normalize",
    "normalize_properties",
    "parse_meta",
    "parse_style",
    "to_jsx",
    "visit_parents",
]
