"""Lift hast elements into JSX elements with normalized attributes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
import json
import math
import re
from typing import Any, Literal

from .hast import Element, PropertyValue
from .jsx import Attribute, JsxAttribute, JsxElement, JsxExpression, JsxSpreadAttribute
from .properties import PropertyInfo, PropertySchema, html
from .style import parse_style


AttributeNameCase = Literal["html", "react"]

_JSX_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$-]*$")
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def is_jsx_identifier(name: str) -> bool:
    """Return True when *name* can be written as a plain JSX attribute name."""
    return bool(_JSX_IDENTIFIER.match(name))


def format_number(value: int | float) -> str:
    """Render a number the way JavaScript's ``String()`` does.

    Uses the shortest round-tripping digits, with exponent notation below
    ``1e-6`` and from ``1e21`` on (``1e-7``, ``1e+21``).
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(digit) for digit in parts.digits)
    point = len(digits) + int(parts.exponent)
    digits = digits.rstrip("0")
    count = len(digits)

    if count <= point <= 21:
        text = digits + "0" * (point - count)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = f"0.{'0' * -point}{digits}"
    else:
        exponent = point - 1
        mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return sign + text


def object_literal(mapping: Mapping[str, Any]) -> str:
    """Serialise a flat mapping to a JavaScript object literal."""
    members = []
    for key, value in mapping.items():
        name = key if _JS_IDENTIFIER.match(key) else json.dumps(key)
        members.append(f"{name}: {json.dumps(value)}")
    return "{" + ", ".join(members) + "}"


def _is_omitted(value: PropertyValue, info: PropertyInfo) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return info.boolean and not isinstance(value, list) and not value


def _attribute_name(info: PropertyInfo, case: AttributeNameCase) -> str:
    if case == "react":
        return info.react_alias or info.attribute
    return info.attribute


def _stringify_list(values: Iterable[Any], info: PropertyInfo) -> str:
    tokens = [format_number(item) if isinstance(item, (int, float)) else str(item) for item in values]
    joined = ", ".join(tokens) if info.comma_separated else " ".join(tokens)
    return joined.strip()


def _style_expression(value: Any, tag_name: str) -> JsxExpression:
    if isinstance(value, Mapping):
        mapping = {str(key): str(item) for key, item in value.items()}
    else:
        mapping = parse_style(str(value), tag_name)
    return JsxExpression(object_literal(mapping), mapping)


def normalize_properties(
    element: Element,
    *,
    schema: PropertySchema = html,
    attribute_name_case: AttributeNameCase = "react",
) -> list[Attribute]:
    """Convert ``element.properties`` into an ordered JSX attribute list.

    Properties are visited in insertion order. Absent values (``None``,
    ``False``, NaN, empty boolean properties) are dropped, lists are joined
    according to the schema, numbers become strings, ``True`` becomes a bare
    attribute and ``style`` strings become style object expressions.
    """
    attributes: list[Attribute] = []
    for key, raw in element.properties.items():
        info = schema.find(key)
        if _is_omitted(raw, info):
            continue

        name = _attribute_name(info, attribute_name_case)
        value: Any = raw
        if isinstance(value, list):
            value = _stringify_list(value, info)

        attribute_value: str | JsxExpression | None
        if name == "style":
            attribute_value = _style_expression(value, element.tag_name)
        elif value is True:
            attribute_value = None
        elif isinstance(value, (int, float)):
            attribute_value = format_number(value)
        else:
            attribute_value = str(value)

        if is_jsx_identifier(name):
            attributes.append(JsxAttribute(name, attribute_value))
            continue

        # Names such as ``xml:lang`` cannot be written bare in JSX.
        literal: Any
        if attribute_value is None:
            literal = True
        elif isinstance(attribute_value, JsxExpression):
            literal = attribute_value.value
        else:
            literal = attribute_value
        attributes.append(
            JsxSpreadAttribute(JsxExpression(object_literal({name: literal}), {name: literal}))
        )
    return attributes


def merge_attributes(
    existing: Iterable[Attribute],
    meta: Iterable[Attribute],
) -> list[Attribute]:
    """Concatenate element attributes and meta attributes.

    Existing attributes come first so meta attributes win under JSX
    last-one-wins semantics. Duplicates are kept.
    """
    return [*existing, *meta]


def to_jsx(
    element: Element,
    *,
    schema: PropertySchema = html,
    attribute_name_case: AttributeNameCase = "react",
) -> JsxElement:
    """Lift *element* into a :class:`JsxElement`, keeping its children."""
    return JsxElement(
        tag_name=element.tag_name,
        attributes=normalize_properties(
            element, schema=schema, attribute_name_case=attribute_name_case
        ),
        children=element.children,
    )


__all__ = [
    "AttributeNameCase",
    "format_number",
    "is_jsx_identifier",
    "merge_attributes",
    "normalize_properties",
    "object_literal",
    "to_jsx",
]
