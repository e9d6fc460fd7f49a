from __future__ import annotations

import pytest

from codeprops import (
    JsxAttribute,
    JsxExpression,
    JsxSpreadAttribute,
    MetaSyntaxError,
    parse_meta,
)


def test_expression_attribute() -> None:
    assert parse_meta("highlight={1-3}", "pre") == [
        JsxAttribute("highlight", JsxExpression("1-3")),
    ]


def test_boolean_string_and_expression_keep_source_order() -> None:
    attributes = parse_meta('showLineNumbers title="app.js" lines={[1, 3]}', "pre")

    assert attributes == [
        JsxAttribute("showLineNumbers"),
        JsxAttribute("title", "app.js"),
        JsxAttribute("lines", JsxExpression("[1, 3]")),
    ]
    assert attributes[0].is_boolean


def test_single_quoted_string_and_character_references() -> None:
    assert parse_meta("title='a &amp; b' caption=\"x &lt; y\"") == [
        JsxAttribute("title", "a & b"),
        JsxAttribute("caption", "x < y"),
    ]


def test_spread_attribute() -> None:
    assert parse_meta("{...props}", "code") == [JsxSpreadAttribute("props")]


def test_member_expression_attribute() -> None:
    assert parse_meta("onClick={props.onClick}") == [
        JsxAttribute("onClick", JsxExpression("props.onClick")),
    ]


def test_dashed_and_namespaced_names() -> None:
    attributes = parse_meta('data-line="3" xlink:href="#a"')

    assert [attribute.name for attribute in attributes] == ["data-line", "xlink:href"]
    assert [attribute.value for attribute in attributes] == ["3", "#a"]


def test_element_value_is_kept_as_expression() -> None:
    assert parse_meta("icon=<Icon />") == [JsxAttribute("icon", JsxExpression("<Icon />"))]


def test_duplicate_names_are_preserved() -> None:
    attributes = parse_meta('title="a" title="b"')

    assert [attribute.value for attribute in attributes] == ["a", "b"]


def test_attribute_count_matches_left_to_right_scan() -> None:
    meta = 'a b="1" c={2} {...d} e'
    names = [
        attribute.name if isinstance(attribute, JsxAttribute) else attribute.argument
        for attribute in parse_meta(meta)
    ]

    assert names == ["a", "b", "c", "d", "e"]


@pytest.mark.parametrize(
    "meta",
    [
        "highlight={",
        'title="unterminated',
        "{notSpread}",
        "empty={}",
        "a /> <b",
        "=value",
    ],
)
def test_malformed_meta_raises(meta: str) -> None:
    with pytest.raises(MetaSyntaxError) as info:
        parse_meta(meta, "pre")

    assert info.value.meta == meta
    assert info.value.column is not None
    assert 1 <= info.value.column <= len(meta) + 1
    assert "Could not parse code meta" in str(info.value)


def test_error_reports_column_inside_meta() -> None:
    with pytest.raises(MetaSyntaxError, match="column 7"):
        parse_meta("valid {notSpread}")


@pytest.mark.parametrize(
    ("meta", "expected"),
    [
        ('title="Q&A"', "Q&A"),
        ('href="?a=1&b=2"', "?a=1&b=2"),
        ("title='R&D'", "R&D"),
        ('a="&copy b"', "&copy b"),
        ('a="&bogus; &"', "&bogus; &"),
        ('a="&copy; &#169; &#xA9;"', "© © ©"),
    ],
)
def test_bare_ampersands_in_strings_are_literal_text(meta: str, expected: str) -> None:
    assert parse_meta(meta, "pre") == [JsxAttribute(meta.split("=", 1)[0], expected)]


def test_ampersands_in_expressions_are_untouched() -> None:
    assert parse_meta('title="Q&A" show={a && b}') == [
        JsxAttribute("title", "Q&A"),
        JsxAttribute("show", JsxExpression("a && b")),
    ]


def test_error_column_after_masked_ampersand() -> None:
    with pytest.raises(MetaSyntaxError, match="column 13"):
        parse_meta('title="Q&A" {notSpread}')
