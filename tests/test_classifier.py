"""Tests for the line classifier."""

import pytest

from listo import ListConfig, ListItem, ListKind, build_matchers, classify


class TestUnordered:
    """Lines starting with a configured marker."""

    def test_basic(self) -> None:
        item = classify("- item")
        assert item == ListItem(
            kind=ListKind.UNORDERED,
            indent="",
            prefix="- ",
            content="item",
            marker="-",
        )
        assert not item.empty

    @pytest.mark.parametrize("marker", ["-", "*", "+", ">"])
    def test_default_markers(self, marker: str) -> None:
        item = classify(f"{marker} text")
        assert item is not None
        assert item.kind is ListKind.UNORDERED
        assert item.marker == marker

    def test_indent_kept_verbatim(self) -> None:
        assert classify("  * Item").indent == "  "
        assert classify("\t+ tab").indent == "\t"
        assert classify(" \t - mixed").indent == " \t "

    def test_prefix_keeps_all_whitespace(self) -> None:
        item = classify("-   spaced")
        assert item.prefix == "-   "
        assert item.content == "spaced"

    def test_tab_after_marker(self) -> None:
        item = classify("-\tx")
        assert item.prefix == "-\t"
        assert item.content == "x"

    def test_empty_item(self) -> None:
        item = classify("- ")
        assert item.kind is ListKind.UNORDERED
        assert item.content == ""
        assert item.empty

    def test_empty_item_with_trailing_spaces(self) -> None:
        item = classify("  *   ")
        assert item.prefix == "*   "
        assert item.empty

    def test_marker_needs_whitespace(self) -> None:
        assert classify("-") is None
        assert classify("-item") is None
        assert classify("**bold** text") is None

    def test_trailing_whitespace_is_content(self) -> None:
        assert classify("- a  ").content == "a  "


class TestOrdered:
    """Lines starting with digits and '.' or ')'."""

    def test_dot(self) -> None:
        item = classify("1. First")
        assert item.kind is ListKind.ORDERED
        assert item.number == 1
        assert item.separator == "."
        assert item.prefix == "1. "
        assert item.content == "First"
        assert item.marker is None

    def test_paren(self) -> None:
        item = classify("12) twelve")
        assert item.number == 12
        assert item.separator == ")"

    def test_leading_zeros(self) -> None:
        item = classify("007. bond")
        assert item.number == 7
        assert item.prefix == "007. "

    def test_zero(self) -> None:
        assert classify("0. zero").number == 0

    def test_empty(self) -> None:
        item = classify("   3. ")
        assert item.kind is ListKind.ORDERED
        assert item.indent == "   "
        assert item.empty

    def test_not_ordered(self) -> None:
        assert classify("1.5 apples") is None
        assert classify("1.") is None
        assert classify("a. letter") is None
        assert classify("1: colon separator") is None


class TestColonKinds:
    """Lines ending in ':' open a nested list."""

    def test_unordered_colon(self) -> None:
        item = classify("- Topics:")
        assert item.kind is ListKind.UNORDERED_COLON
        assert item.content == "Topics"
        assert item.marker == "-"
        assert item.prefix == "- "

    def test_ordered_colon(self) -> None:
        item = classify("3) Steps:")
        assert item.kind is ListKind.ORDERED_COLON
        assert item.number == 3
        assert item.separator == ")"
        assert item.content == "Steps"

    def test_plain_colon(self) -> None:
        item = classify("Topics:")
        assert item == ListItem(kind=ListKind.COLON, indent="", prefix="", content="Topics")

    def test_indented_plain_colon(self) -> None:
        item = classify("  Nested heading:")
        assert item.kind is ListKind.COLON
        assert item.indent == "  "
        assert item.content == "Nested heading"

    def test_only_trailing_colon_counts(self) -> None:
        item = classify("- time: 10am")
        assert item.kind is ListKind.UNORDERED
        assert item.content == "time: 10am"
        assert classify("Note: read this") is None

    def test_inner_colons_stay_in_content(self) -> None:
        assert classify("- a: b:").content == "a: b"
        assert classify("::").content == ":"

    def test_lone_colon(self) -> None:
        assert classify(":") is None

    def test_marker_then_colon(self) -> None:
        """A colon right after the marker is content, not a colon item."""
        item = classify("- :")
        assert item.kind is ListKind.UNORDERED
        assert item.content == ":"

    def test_colon_kinds_never_empty(self) -> None:
        for line in ("- x:", "1. x:", "x:"):
            assert not classify(line).empty

    def test_kind_helpers(self) -> None:
        assert classify("- x:").is_colon
        assert classify("- x:").is_unordered
        assert classify("1. x:").is_ordered
        assert not classify("- x").is_colon


class TestMatcherOrder:
    """First match wins, markers tried in declaration order."""

    def test_declaration_order_tie_break(self) -> None:
        config = ListConfig(markers=("-", "+"))
        assert classify("+ x", config).marker == "+"
        assert classify("- x", config).marker == "-"

    def test_unconfigured_marker_is_plain_text(self) -> None:
        config = ListConfig(markers=("-", "+"))
        assert classify("* x", config) is None

    def test_marker_prefix_of_another(self) -> None:
        config = ListConfig(markers=("-", "->"))
        assert classify("-> arrow", config).marker == "->"
        assert classify("- dash", config).marker == "-"

    def test_unordered_marker_before_ordered_grammar(self) -> None:
        config = ListConfig(markers=("1.",))
        item = classify("1. x", config)
        assert item.kind is ListKind.UNORDERED
        assert item.marker == "1."

    def test_colon_rules_before_plain_rules(self) -> None:
        kinds = [m.kind for m in build_matchers(("-", "*"))]
        assert kinds == [
            ListKind.UNORDERED_COLON,
            ListKind.UNORDERED_COLON,
            ListKind.ORDERED_COLON,
            ListKind.UNORDERED,
            ListKind.UNORDERED,
            ListKind.ORDERED,
            ListKind.COLON,
        ]

    def test_list_colon_beats_plain_colon(self) -> None:
        assert classify("- a:").kind is ListKind.UNORDERED_COLON
        assert classify("2. a:").kind is ListKind.ORDERED_COLON


class TestMarkerEscaping:
    """Markers are literals even when they are regex metacharacters."""

    def test_star_and_plus(self) -> None:
        config = ListConfig(markers=("+", "*"))
        assert classify("+ plus", config).marker == "+"
        assert classify("* star", config).marker == "*"
        assert classify("++ x", config) is None

    def test_dot_is_literal(self) -> None:
        config = ListConfig(markers=(".",))
        assert classify(". dot", config).marker == "."
        assert classify("a x", config) is None

    @pytest.mark.parametrize("marker", ["?", "(", ")", "[", "|", "\\", "$", "^", "{"])
    def test_metacharacters_compile_and_match(self, marker: str) -> None:
        config = ListConfig(markers=(marker,))
        item = classify(f"{marker} x", config)
        assert item is not None
        assert item.marker == marker
        assert classify("x x", config) is None


class TestNotAListItem:
    @pytest.mark.parametrize("line", ["", "plain text", "   ", "#heading", "---"])
    def test_returns_none(self, line: str) -> None:
        assert classify(line) is None

    def test_multiline_input(self) -> None:
        assert classify("- a\n- b") is None


class TestRender:
    """render() rebuilds the classified line exactly."""

    @pytest.mark.parametrize(
        "line",
        [
            "- item",
            "  *   spaced",
            "\t+\ttabs",
            "- ",
            "007) bond",
            "1.  two spaces",
            "- Topics:",
            "  10. Steps:",
            "Topics:",
            "  a: b:",
            "- a :",
        ],
    )
    def test_round_trip(self, line: str) -> None:
        item = classify(line)
        assert item is not None
        assert item.render() == line
        assert classify(item.render()) == item

    def test_body_includes_colon(self) -> None:
        assert classify("- x:").body == "x:"
        assert classify("- x").body == "x"
