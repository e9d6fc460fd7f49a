from __future__ import annotations

import copy
import logging

import pytest

from codeprops import (
    CodePropsOptions,
    CodePropsTransform,
    ConfigurationError,
    Element,
    JsxAttribute,
    JsxExpression,
    JsxSpreadAttribute,
    MdxFlowExpression,
    MetaSyntaxError,
    Point,
    Position,
    Root,
    Text,
    code_props,
    h,
)


SOURCE = "console.log('Hello World!')\n"


def _fence(meta: str | None) -> Root:
    code = h("code", {"className": ["language-js"]}, SOURCE, meta=meta)
    return Root([h("pre", None, code)])


def test_invalid_tag_name_fails_at_construction() -> None:
    with pytest.raises(ConfigurationError) as info:
        code_props(tag_name="invalid")

    assert str(info.value) == "Expected tagName to be 'code' or 'pre', got: invalid"


def test_invalid_attribute_name_case_fails_at_construction() -> None:
    with pytest.raises(ConfigurationError, match="Expected attributeNameCase"):
        code_props(attribute_name_case="kebab")


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="unknown"):
        CodePropsTransform({"unknown": True})


def test_options_accept_aliases_and_defaults() -> None:
    assert CodePropsTransform().options == CodePropsOptions()
    assert code_props(tagName="code").options.tag_name == "code"
    assert CodePropsTransform({"attributeNameCase": "html"}).options.attribute_name_case == "html"


@pytest.mark.parametrize("tag_name", ["code", "pre"])
@pytest.mark.parametrize("meta", [None, ""])
def test_missing_or_empty_meta_leaves_tree_unchanged(tag_name: str, meta: str | None) -> None:
    tree = _fence(meta)
    expected = copy.deepcopy(tree)

    code_props(tag_name=tag_name)(tree)

    assert tree == expected


def test_code_without_parent_element_is_skipped_in_pre_mode() -> None:
    tree = Root([h("code", None, meta="meta")])
    expected = copy.deepcopy(tree)

    code_props()(tree)

    assert tree == expected


def test_code_with_non_pre_parent_is_skipped_in_pre_mode() -> None:
    tree = Root([h("div", None, h("code", None, meta="meta"))])
    expected = copy.deepcopy(tree)

    code_props()(tree)

    assert tree == expected


def test_pre_with_siblings_is_never_promoted() -> None:
    tree = Root([h("pre", None, h("code", None, meta="meta"), h("code", None))])
    expected = copy.deepcopy(tree)

    code_props(tag_name="pre")(tree)

    assert tree == expected


def test_pre_with_siblings_still_accepts_code_mode() -> None:
    tree = Root([h("pre", None, h("code", None, meta="meta"), h("code", None))])

    code_props(tag_name="code")(tree)

    pre = tree.children[0]
    assert isinstance(pre, Element)
    assert isinstance(pre.children[0], MdxFlowExpression)
    assert pre.children[0].attributes == [JsxAttribute("meta")]
    assert isinstance(pre.children[1], Element)


def test_code_at_root_in_code_mode() -> None:
    tree = Root([h("code", None, meta="meta")])

    code_props(tag_name="code")(tree)

    (node,) = tree.children
    assert isinstance(node, MdxFlowExpression)
    assert node.tag_name == "code"


def test_expression_attached_to_pre() -> None:
    tree = _fence("onClick={props.onClick}")
    code = tree.children[0].children[0]  # type: ignore[union-attr]

    code_props(tag_name="pre")(tree)

    (node,) = tree.children
    assert isinstance(node, MdxFlowExpression)
    assert node.type == "mdxFlowExpression"
    assert node.tag_name == "pre"
    assert node.attributes == [JsxAttribute("onClick", JsxExpression("props.onClick"))]
    assert node.children == [code]
    assert node.children[0] is code


def test_expression_attached_to_code() -> None:
    tree = _fence("onClick={props.onClick}")

    code_props(tag_name="code")(tree)

    pre = tree.children[0]
    assert isinstance(pre, Element)
    assert pre.tag_name == "pre"
    (node,) = pre.children
    assert isinstance(node, MdxFlowExpression)
    assert node.tag_name == "code"
    assert node.attributes == [
        JsxAttribute("className", "language-js"),
        JsxAttribute("onClick", JsxExpression("props.onClick")),
    ]
    assert node.children == [Text(SOURCE)]


def test_spread_attached_to_code() -> None:
    tree = _fence("{...props}")

    code_props(tag_name="code")(tree)

    node = tree.children[0].children[0]  # type: ignore[union-attr]
    assert node.attributes == [
        JsxAttribute("className", "language-js"),
        JsxSpreadAttribute("props"),
    ]


def test_highlight_scenario_in_both_modes() -> None:
    pre_tree = _fence("highlight={1-3}")
    code_tree = _fence("highlight={1-3}")

    code_props()(pre_tree)
    code_props(tag_name="code")(code_tree)

    assert pre_tree.children[0].attributes == [  # type: ignore[union-attr]
        JsxAttribute("highlight", JsxExpression("1-3")),
    ]
    assert code_tree.children[0].children[0].attributes == [  # type: ignore[union-attr]
        JsxAttribute("className", "language-js"),
        JsxAttribute("highlight", JsxExpression("1-3")),
    ]


def test_existing_pre_properties_precede_meta() -> None:
    code = h("code", None, "x", meta='title="b"')
    tree = Root([h("pre", {"title": "a", "style": "color: red"}, code)])

    code_props()(tree)

    assert tree.children[0].attributes == [  # type: ignore[union-attr]
        JsxAttribute("title", "a"),
        JsxAttribute("style", JsxExpression('{color: "red"}', {"color": "red"})),
        JsxAttribute("title", "b"),
    ]


def test_html_attribute_case() -> None:
    tree = _fence("a")

    code_props(tag_name="code", attribute_name_case="html")(tree)

    node = tree.children[0].children[0]  # type: ignore[union-attr]
    assert node.attributes == [JsxAttribute("class", "language-js"), JsxAttribute("a")]


def test_replacement_keeps_index_and_siblings() -> None:
    before = h("p", None, "before")
    after = h("p", None, "after")
    tree = Root([before, _fence("a").children[0], after])

    code_props()(tree)

    assert tree.children[0] is before
    assert isinstance(tree.children[1], MdxFlowExpression)
    assert tree.children[2] is after


def test_position_and_data_are_copied_from_target() -> None:
    tree = _fence("a")
    pre = tree.children[0]
    assert isinstance(pre, Element)
    pre.position = Position(Point(3, 1, 20), Point(5, 4, 60))
    pre.data["origin"] = "fence"

    code_props()(tree)

    node = tree.children[0]
    assert node.position == Position(Point(3, 1, 20), Point(5, 4, 60))
    assert node.data == {"origin": "fence"}


def test_nested_code_blocks_are_all_processed() -> None:
    tree = Root(
        [
            h("section", None, _fence("a").children[0]),
            h("div", None, h("blockquote", None, _fence("b").children[0])),
        ]
    )

    code_props()(tree)

    section, div = tree.children
    assert section.children[0].attributes == [JsxAttribute("a")]  # type: ignore[union-attr]
    blockquote = div.children[0]  # type: ignore[union-attr]
    assert blockquote.children[0].attributes == [JsxAttribute("b")]


def test_transform_is_not_reentrant() -> None:
    tree = _fence("a")
    transform = code_props()

    transform(tree)
    (node,) = tree.children
    attributes = list(node.attributes)  # type: ignore[union-attr]
    transform(tree)

    assert tree.children == [node]
    assert tree.children[0] is node
    assert node.attributes == attributes  # type: ignore[union-attr]


def test_meta_syntax_error_propagates_with_position() -> None:
    tree = _fence("highlight={")
    pre = tree.children[0]
    assert isinstance(pre, Element)
    pre.position = Position(Point(7, 1))

    with pytest.raises(MetaSyntaxError) as info:
        code_props()(tree)

    assert info.value.position == Position(Point(7, 1))
    assert str(info.value).startswith("7:1: Could not parse code meta `highlight={`")


def test_replacement_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="codeprops.core.transform"):
        code_props()(_fence("a b"))
        code_props()(_fence(None))

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Attached 2 attribute(s) to <pre> from code meta."]
