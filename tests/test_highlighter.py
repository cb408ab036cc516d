"""Tests for AST-level and token-level syntax highlighting."""

from __future__ import annotations

from hypothesis import given

from icuparser import highlight, highlight_source, parse, serialize
from icuparser.enums import HighlightCategory
from icuparser.syntax.ast import Message, Text
from icuparser.syntax.highlighter import ANSI_COLORS, AnsiStyler, HtmlStyler
from icuparser.syntax.serializer import FormatOptions, format_message

from tests.strategies import icu_messages


class Recorder:
    """Styler that records (content, category) pairs."""

    def __init__(self) -> None:
        self.pieces: list[tuple[str, HighlightCategory]] = []

    def __call__(self, content: str, category: HighlightCategory) -> str:
        self.pieces.append((content, category))
        return content

    def nonblank(self) -> list[tuple[str, HighlightCategory]]:
        return [(c, k) for c, k in self.pieces if k is not HighlightCategory.WHITESPACE]


class TestHighlight:
    """AST highlighting through MessagePrinter."""

    def test_plain_styler_equals_serialize(self) -> None:
        message = parse("{n, plural, offset:1 =0 {none} other {# items}}")
        assert highlight(message) == serialize(message)

    def test_options_select_pretty_layout(self) -> None:
        message = parse("{g, select, a {x} other {y}}")
        options = FormatOptions(indent="  ")
        assert highlight(message, options=options) == format_message(message, options)

    def test_categories_for_plural(self) -> None:
        recorder = Recorder()
        highlight(parse("{n, plural, offset:1 =0 {x} other {#}}"), recorder)
        assert recorder.nonblank() == [
            ("{", HighlightCategory.BRACE),
            ("n", HighlightCategory.ARGUMENT),
            (",", HighlightCategory.PUNCTUATION),
            ("plural", HighlightCategory.KEYWORD),
            (",", HighlightCategory.PUNCTUATION),
            ("offset", HighlightCategory.KEYWORD),
            (":", HighlightCategory.PUNCTUATION),
            ("1", HighlightCategory.NUMBER),
            ("=0", HighlightCategory.SELECTOR),
            ("{", HighlightCategory.BRACE),
            ("x", HighlightCategory.TEXT),
            ("}", HighlightCategory.BRACE),
            ("other", HighlightCategory.SELECTOR),
            ("{", HighlightCategory.BRACE),
            ("#", HighlightCategory.PUNCTUATION),
            ("}", HighlightCategory.BRACE),
            ("}", HighlightCategory.BRACE),
        ]

    def test_categories_for_formatted_argument(self) -> None:
        recorder = Recorder()
        highlight(parse("{d, date, short}"), recorder)
        assert recorder.nonblank() == [
            ("{", HighlightCategory.BRACE),
            ("d", HighlightCategory.ARGUMENT),
            (",", HighlightCategory.PUNCTUATION),
            ("date", HighlightCategory.TYPE),
            (",", HighlightCategory.PUNCTUATION),
            ("short", HighlightCategory.STYLE),
            ("}", HighlightCategory.BRACE),
        ]

    def test_choice_limits_are_numbers(self) -> None:
        recorder = Recorder()
        highlight(parse("{n, choice, 0#a|1<b}"), recorder)
        assert ("0", HighlightCategory.NUMBER) in recorder.pieces
        assert ("<", HighlightCategory.PUNCTUATION) in recorder.pieces
        assert ("|", HighlightCategory.PUNCTUATION) in recorder.pieces

    @given(icu_messages())
    def test_plain_highlight_matches_serialize(self, message: Message) -> None:
        assert highlight(message) == serialize(message)


class TestStylers:
    """ANSI and HTML stylers."""

    def test_ansi_wraps_colored_categories(self) -> None:
        assert highlight(parse("{n}"), AnsiStyler()) == (
            "\033[36m{\033[0m\033[32mn\033[0m\033[36m}\033[0m"
        )

    def test_ansi_leaves_text_unstyled(self) -> None:
        assert highlight(parse("plain"), AnsiStyler()) == "plain"

    def test_ansi_custom_colors(self) -> None:
        styler = AnsiStyler({HighlightCategory.ARGUMENT: "1;31"})
        assert highlight(parse("{n}"), styler) == "{\033[1;31mn\033[0m}"

    def test_ansi_empty_table_is_plain(self) -> None:
        message = parse("{n, number} x")
        assert highlight(message, AnsiStyler({})) == serialize(message)

    def test_default_table_is_read_only(self) -> None:
        assert ANSI_COLORS[HighlightCategory.BRACE] == "36"
        assert HighlightCategory.TEXT not in ANSI_COLORS

    def test_html_spans(self) -> None:
        assert highlight(parse("{n}"), HtmlStyler()) == (
            '<span class="icu-brace">{</span>'
            '<span class="icu-argument">n</span>'
            '<span class="icu-brace">}</span>'
        )

    def test_html_escapes_content(self) -> None:
        message = Message((Text("a<b & c"),))
        assert highlight(message, HtmlStyler(class_prefix="x-")) == (
            '<span class="x-text">a&lt;b &amp; c</span>'
        )

    def test_html_whitespace_is_not_wrapped(self) -> None:
        html = highlight(parse("{n, number}"), HtmlStyler())
        assert '<span class="icu-punctuation">,</span> <span class="icu-type">' in html


class TestHighlightSource:
    """Token-level highlighting of raw source."""

    def test_plain_reproduces_input(self) -> None:
        source = "It''s '{quoted}' {n, plural, one {#} other {# items}}"
        assert highlight_source(source) == source

    def test_works_on_unparsable_source(self) -> None:
        source = "{n, plural, one {x}"
        assert highlight_source(source) == source

    def test_bytes_input(self) -> None:
        assert highlight_source(b"{n}") == "{n}"

    def test_token_categories(self) -> None:
        recorder = Recorder()
        highlight_source("{n, number} 5 '{'", recorder)
        assert recorder.pieces == [
            ("{", HighlightCategory.BRACE),
            ("n", HighlightCategory.ARGUMENT),
            (",", HighlightCategory.PUNCTUATION),
            (" ", HighlightCategory.WHITESPACE),
            ("number", HighlightCategory.ARGUMENT),
            ("}", HighlightCategory.BRACE),
            (" ", HighlightCategory.WHITESPACE),
            ("5", HighlightCategory.NUMBER),
            (" ", HighlightCategory.WHITESPACE),
            ("'{'", HighlightCategory.TEXT),
        ]
