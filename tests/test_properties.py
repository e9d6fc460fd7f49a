from __future__ import annotations

import pytest

from codeprops import html, normalize
from codeprops.core.properties import PropertyInfo, Schema


@pytest.mark.parametrize(
    ("name", "canonical", "react"),
    [
        ("className", "class", "className"),
        ("class", "class", "className"),
        ("htmlFor", "for", "htmlFor"),
        ("tabIndex", "tabindex", "tabIndex"),
        ("itemId", "itemid", "itemID"),
        ("xmlLang", "xml:lang", "xmlLang"),
        ("xLinkHref", "xlink:href", "xlinkHref"),
        ("ariaHidden", "aria-hidden", None),
        ("dataLine", "data-line", None),
        ("highlight", "highlight", None),
    ],
)
def test_canonical_and_react_names(name: str, canonical: str, react: str | None) -> None:
    info = normalize(name)

    assert info.canonical_name == canonical
    assert info.react_alias == react


@pytest.mark.parametrize(
    "name",
    ["className", "class", "data-line", "dataLineNumbers", "aria-label", "xml:lang", "unknown"],
)
def test_lookup_is_idempotent(name: str) -> None:
    once = html.find(name)

    assert html.find(once.property) == once
    assert html.find(once.attribute) == once


def test_data_attribute_round_trip() -> None:
    info = html.find("data-line-numbers")

    assert info.property == "dataLineNumbers"
    assert info.attribute == "data-line-numbers"
    assert html.find("dataLineNumbers").attribute == "data-line-numbers"


def test_value_kinds() -> None:
    assert html.find("hidden").is_boolean
    assert html.find("accept").is_comma_separated
    assert html.find("className").space_separated
    assert html.find("tabIndex").number
    assert html.find("download").overloaded_boolean
    assert not html.find("title").is_boolean


def test_custom_schema_can_be_injected() -> None:
    schema = Schema({"lines": PropertyInfo("lines", "data-lines", space="html")})

    assert schema.find("lines").react_alias == "lines"
    assert schema.find("LINES").attribute == "data-lines"
    assert schema.find("other").attribute == "other"
