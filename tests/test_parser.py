"""Tests for the sprig parser: AST shapes and syntax errors."""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from sprig.environment.exceptions import ErrorCode
from sprig.nodes import (
    BoolLiteral,
    Group,
    HostExpr,
    HostPattern,
    InterpExpr,
    InterpFor,
    InterpIf,
    InterpMatch,
    Literal,
    Normal,
    Void,
)
from sprig.parser import ParseError, parse

from .strategies import static_template


def _only(source: str):
    group = parse(source)
    assert len(group) == 1
    return group.nodes[0]


class TestElements:
    """Element, literal and attribute shapes."""

    def test_normal_element(self) -> None:
        node = _only('div[class="a"] { "Hi" }')
        assert isinstance(node, Normal)
        assert node.name.value == "div"
        assert node.attrs is not None
        (attr,) = node.attrs
        assert attr.name.value == "class"
        assert attr.value == Literal(1, 10, "a")
        assert node.children == Group(1, 17, (Literal(1, 17, "Hi"),))

    def test_void_element(self) -> None:
        node = _only("br;")
        assert isinstance(node, Void)
        assert node.name.value == "br"
        assert node.attrs is None

    def test_empty_body_has_no_children(self) -> None:
        node = _only("div {}")
        assert isinstance(node, Normal)
        assert node.children is None

    def test_bare_word_is_literal(self) -> None:
        node = _only("p { hello }")
        assert isinstance(node, Normal)
        assert node.children is not None
        assert node.children.nodes == (Literal(1, 4, "hello"),)

    def test_quoted_tag_name(self) -> None:
        node = _only('"my-widget" { }')
        assert isinstance(node, Normal)
        assert node.name.value == "my-widget"
        assert node.name.quoted

    def test_quoted_attr_name(self) -> None:
        node = _only('div["x-data"="{}"] {}')
        assert isinstance(node, Normal)
        assert node.attrs is not None
        assert node.attrs[0].name.value == "x-data"
        assert node.attrs[0].value == Literal(1, 13, "{}")

    def test_string_literal_text(self) -> None:
        node = _only("'a < b'")
        assert node == Literal(1, 0, "a < b")

    def test_top_level_sequence(self) -> None:
        group = parse("meta; link; title { x }")
        assert [type(n) for n in group] == [Void, Void, Normal]

    def test_empty_template(self) -> None:
        group = parse("")
        assert len(group) == 0
        assert not group

    def test_comments_ignored(self) -> None:
        group = parse("# heading\nh1 { title } # trailing\n")
        assert len(group) == 1


class TestAttributes:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("input[checked];", None),
            ("input[checked=true];", BoolLiteral(1, 14, True)),
            ("input[checked=false];", BoolLiteral(1, 14, False)),
            ("input[checked=True];", BoolLiteral(1, 14, True)),
            ("input[value='v'];", Literal(1, 12, "v")),
            ("input[value=v];", HostExpr(1, 12, "v")),
        ],
    )
    def test_attr_value_forms(self, source: str, expected: object) -> None:
        node = _only(source)
        assert isinstance(node, Void)
        assert node.attrs is not None
        assert node.attrs[0].value == expected

    def test_expression_value(self) -> None:
        node = _only('a[href=base + "/x", target="_blank"] { go }')
        assert isinstance(node, Normal)
        assert node.attrs is not None
        href, target = node.attrs
        assert href.value == HostExpr(1, 7, 'base + "/x"')
        assert target.value == Literal(1, 27, "_blank")

    def test_expression_with_commas_in_brackets(self) -> None:
        node = _only("div[data=f(a, b), id=x] {}")
        assert isinstance(node, Normal)
        assert node.attrs is not None
        assert [a.value.source for a in node.attrs] == ["f(a, b)", "x"]  # type: ignore[union-attr]

    def test_trailing_comma(self) -> None:
        node = _only("div[a, b,] {}")
        assert isinstance(node, Normal)
        assert node.attrs is not None
        assert [a.name.value for a in node.attrs] == ["a", "b"]

    def test_empty_attr_list(self) -> None:
        node = _only("div[] {}")
        assert isinstance(node, Normal)
        assert node.attrs == ()

    def test_duplicate_attrs_kept_in_order(self) -> None:
        node = _only('div[class="a", class="b"] {}')
        assert isinstance(node, Normal)
        assert node.attrs is not None
        assert [a.value for a in node.attrs] == [Literal(1, 10, "a"), Literal(1, 21, "b")]


class TestInterpolation:
    def test_attribute_access(self) -> None:
        node = _only("@user.name")
        assert node == InterpExpr(1, 0, HostExpr(1, 1, "user.name"))

    def test_string_interpolation_is_literal(self) -> None:
        node = _only('@"Hi"')
        assert node == InterpExpr(1, 0, Literal(1, 1, "Hi"))

    def test_fstring_is_expression(self) -> None:
        node = _only('@f"{n} items"')
        assert isinstance(node, InterpExpr)
        assert node.expr == HostExpr(1, 1, 'f"{n} items"')

    def test_longest_valid_prefix(self) -> None:
        node = _only("p { @count items }")
        assert isinstance(node, Normal)
        assert node.children is not None
        assert node.children.nodes == (
            InterpExpr(1, 4, HostExpr(1, 5, "count")),
            Literal(1, 11, "items"),
        )

    def test_bare_words_continue_expression_when_valid(self) -> None:
        node = _only("p { @a if b else c }")
        assert isinstance(node, Normal)
        assert node.children is not None
        assert node.children.nodes == (InterpExpr(1, 4, HostExpr(1, 5, "a if b else c")),)

    def test_keyword_operator_joins_following_word(self) -> None:
        node = _only("p { @name and welcome }")
        assert isinstance(node, Normal)
        assert node.children is not None
        assert node.children.nodes == (InterpExpr(1, 4, HostExpr(1, 5, "name and welcome")),)

    def test_quoted_text_ends_expression(self) -> None:
        node = _only('p { @name " and welcome" }')
        assert isinstance(node, Normal)
        assert node.children is not None
        assert node.children.nodes == (
            InterpExpr(1, 4, HostExpr(1, 5, "name")),
            Literal(1, 10, " and welcome"),
        )

    def test_call_and_subscript(self) -> None:
        node = _only('@items[0].title.upper()')
        assert isinstance(node, InterpExpr)
        assert node.expr == HostExpr(1, 1, "items[0].title.upper()")

    def test_expression_followed_by_element(self) -> None:
        group = parse("@name br;")
        assert [type(n) for n in group] == [InterpExpr, Void]

    def test_adjacent_interpolations(self) -> None:
        group = parse("@a @b")
        assert [n.expr.source for n in group] == ["a", "b"]  # type: ignore[attr-defined]

    def test_multiline_expression_keeps_source(self) -> None:
        node = _only("@fmt(\n    value,\n    2,\n)")
        assert isinstance(node, InterpExpr)
        assert node.expr == HostExpr(1, 1, "fmt(\n    value,\n    2,\n)")


class TestIf:
    def test_if_only(self) -> None:
        node = _only("@if x > 8 { big }")
        assert isinstance(node, InterpIf)
        assert node.test == HostExpr(1, 4, "x > 8")
        assert node.body.nodes == (Literal(1, 12, "big"),)
        assert node.elif_ == ()
        assert node.else_ is None

    def test_else_if_chain(self) -> None:
        node = _only('@if a { "1" } else if b { "2" } else if c { "3" } else { "4" }')
        assert isinstance(node, InterpIf)
        assert [cond.source for cond, _ in node.elif_] == ["b", "c"]
        assert node.else_ is not None
        assert node.else_.nodes[0] == Literal(1, 57, "4")

    def test_else_body_may_be_empty(self) -> None:
        node = _only("@if a { x } else { }")
        assert isinstance(node, InterpIf)
        assert node.else_ == Group(1, 19, ())

    def test_condition_with_braces_inside_parens(self) -> None:
        node = _only("@if ({} == d) { x }")
        assert isinstance(node, InterpIf)
        assert node.test.source == "({} == d)"


class TestMatch:
    def test_arms(self) -> None:
        node = _only(
            '@match status { "ok" => { span { fine } }, code if code >= 500 => "err", _ => "other" }'
        )
        assert isinstance(node, InterpMatch)
        assert node.subject == HostExpr(1, 7, "status")
        assert [arm.pattern.source for arm in node.arms] == [
            '"ok"',
            "code if code >= 500",
            "_",
        ]
        assert isinstance(node.arms[0].body, Group)
        assert node.arms[1].body == Literal(1, 66, "err")

    def test_commas_optional(self) -> None:
        node = _only('@match x { 1 => "a" 2 => "b" }')
        assert isinstance(node, InterpMatch)
        assert len(node.arms) == 2

    def test_class_and_or_patterns(self) -> None:
        node = _only('@match p { Point(x=0) | Point(y=0) => "axis", _ => { } }')
        assert isinstance(node, InterpMatch)
        assert node.arms[0].pattern == HostPattern(1, 11, "Point(x=0) | Point(y=0)")

    def test_empty_match(self) -> None:
        node = _only("@match x { }")
        assert isinstance(node, InterpMatch)
        assert node.arms == ()


class TestFor:
    def test_simple(self) -> None:
        node = _only("ul { @for item in items { li { @item } } }")
        assert isinstance(node, Normal)
        assert node.children is not None
        loop = node.children.nodes[0]
        assert isinstance(loop, InterpFor)
        assert loop.target == HostPattern(1, 10, "item")
        assert loop.iter == HostExpr(1, 18, "items")

    def test_tuple_target(self) -> None:
        node = _only("@for i, (k, v) in enumerate(d.items()) { @i }")
        assert isinstance(node, InterpFor)
        assert node.target.source == "i, (k, v)"
        assert node.iter.source == "enumerate(d.items())"

    def test_multiline_positions(self) -> None:
        node = _only("div {\n  @for x in xs {\n    @x\n  }\n}")
        assert isinstance(node, Normal)
        assert node.children is not None
        loop = node.children.nodes[0]
        assert isinstance(loop, InterpFor)
        assert (loop.lineno, loop.col_offset) == (2, 2)
        assert loop.body.nodes[0] == InterpExpr(3, 4, HostExpr(3, 5, "x"))


class TestSyntaxErrors:
    """Errors report the offending token and the expected set."""

    def test_extra_bracket_after_attrs(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('meta[charset="UTF-8"]]')
        error = exc_info.value
        assert error.expected == {"`;`", "`{`"}
        assert error.token.value == "]"
        assert (error.lineno, error.col_offset) == (1, 21)
        assert error.code is ErrorCode.UNEXPECTED_TOKEN
        assert "expected one of {`;`, `{`}, found `]`" in error.message

    def test_body_after_void(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("br; { }")
        assert exc_info.value.suggestion is not None
        assert "`br`" in exc_info.value.suggestion

    def test_unclosed_body(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("div {")
        error = exc_info.value
        assert error.expected == {"identifier", "string literal", "`@`", "`}`"}
        assert "found end of template" in error.message

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("p { x } }")
        error = exc_info.value
        assert error.expected == {"identifier", "string literal", "`@`"}
        assert error.col_offset == 8

    def test_else_needs_block_or_if(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('@if a { x } else "no"')
        assert exc_info.value.expected == {"`{`", "`if`"}

    def test_for_without_in(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@for x items { }")
        error = exc_info.value
        assert error.expected == {"`in`"}
        assert error.token.value == "{"

    def test_attr_missing_separator(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("div[a b] {}")
        assert exc_info.value.expected == {"`,`", "`]`", "`=`"}

    def test_arm_body_must_be_block_or_string(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@match x { 1 => y }")
        assert exc_info.value.expected == {"`{`", "string literal"}

    def test_unclosed_match(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('@match x { 1 => "a"')
        assert exc_info.value.expected == {"pattern", "`}`"}

    def test_byte_string_node_suggests_interpolation(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("p { b'raw' }")
        assert exc_info.value.suggestion is not None
        assert "@b'raw'" in exc_info.value.suggestion

    def test_invalid_expression(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@if x === y { }")
        error = exc_info.value
        assert error.code is ErrorCode.INVALID_EXPRESSION
        assert "`x === y`" in error.message
        assert error.expected == frozenset()

    def test_invalid_bare_expression(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("p { @lambda }")
        assert exc_info.value.code is ErrorCode.INVALID_EXPRESSION

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse('@match x { len(x) > 2 => "long" }')
        assert exc_info.value.code is ErrorCode.INVALID_PATTERN

    def test_invalid_loop_target(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@for f() in xs { }")
        assert exc_info.value.code is ErrorCode.INVALID_PATTERN

    def test_yield_rejected(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@(yield x)")
        assert "yield" in exc_info.value.message

    def test_mismatched_brackets(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("p { @f(x] }")
        error = exc_info.value
        assert error.expected == {"`)`"}
        assert error.token.value == "]"

    def test_unclosed_bracket_in_expression(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("@f(x")
        assert "found end of template" in exc_info.value.message

    def test_error_location_in_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse("div {\n  p[;\n}", name="page.sprig")
        error = exc_info.value
        assert error.lineno == 2
        assert "page.sprig:2:4" in str(error)
        assert "p[;" in str(error)


class TestParserProperties:
    @given(case=static_template)
    @settings(max_examples=100)
    def test_static_templates_parse(self, case: tuple[str, str]) -> None:
        """Every generated static template is accepted by the parser."""
        source, _ = case
        group = parse(source)
        assert len(group) >= 1
