"""Syntax highlighting for ICU messages.

Two entry points:
- highlight(): AST-level. Re-renders the message through MessagePrinter,
  handing every piece to a styler with its lexical category.
- highlight_source(): token-level. Styles raw slices of the original text,
  so plain_styler reproduces the input exactly (including invalid-looking
  but lexable text).

A styler is any callable (content, category) -> str.

Python 3.13+.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from types import MappingProxyType

from icuparser.enums import HighlightCategory, TokenKind

from .ast import Message
from .lexer import tokenize
from .serializer import FormatOptions, MessagePrinter, Styler, plain_styler

__all__ = [
    "ANSI_COLORS",
    "AnsiStyler",
    "HtmlStyler",
    "highlight",
    "highlight_source",
    "plain_styler",
]

ANSI_COLORS: Mapping[HighlightCategory, str] = MappingProxyType({
    HighlightCategory.BRACE: "36",
    HighlightCategory.PUNCTUATION: "33",
    HighlightCategory.ARGUMENT: "32",
    HighlightCategory.TYPE: "35",
    HighlightCategory.KEYWORD: "35",
    HighlightCategory.SELECTOR: "33",
    HighlightCategory.NUMBER: "34",
    HighlightCategory.STYLE: "90",
})

_ANSI_RESET = "\033[0m"


class AnsiStyler:
    """Wrap categories in ANSI SGR color codes.

    Categories missing from the color table (text, whitespace by default)
    are emitted unchanged.

    Args:
        colors: Category -> SGR parameter string (e.g. "1;31")
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Mapping[HighlightCategory, str] | None = None) -> None:
        self._colors = dict(ANSI_COLORS if colors is None else colors)

    def __call__(self, content: str, category: HighlightCategory) -> str:
        code = self._colors.get(category)
        if code is None or not content:
            return content
        return f"\033[{code}m{content}{_ANSI_RESET}"


class HtmlStyler:
    """Wrap categories in <span class="{prefix}{category}"> with HTML escaping.

    Whitespace is escaped but never wrapped.
    """

    __slots__ = ("_prefix",)

    def __init__(self, class_prefix: str = "icu-") -> None:
        self._prefix = class_prefix

    def __call__(self, content: str, category: HighlightCategory) -> str:
        escaped = html.escape(content, quote=False)
        if category is HighlightCategory.WHITESPACE or not content:
            return escaped
        css_class = html.escape(self._prefix + category, quote=True)
        return f'<span class="{css_class}">{escaped}</span>'


def highlight(
    message: Message,
    styler: Styler = plain_styler,
    *,
    options: FormatOptions | None = None,
) -> str:
    """Render message with every lexical piece passed through styler.

    Uses the compact layout unless options are given, in which case the
    pretty layout is styled. With plain_styler the result equals
    serialize(message) (or format_message(message, options)).

    Example:
        >>> highlight(parse("{n}"), HtmlStyler())
        '<span class="icu-brace">{</span><span class="icu-argument">n</span><span class="icu-brace">}</span>'
    """
    printer = MessagePrinter(options, styler, pretty=options is not None)
    return printer.print(message)


_TOKEN_CATEGORIES: Mapping[TokenKind, HighlightCategory] = MappingProxyType({
    TokenKind.LBRACE: HighlightCategory.BRACE,
    TokenKind.RBRACE: HighlightCategory.BRACE,
    TokenKind.COMMA: HighlightCategory.PUNCTUATION,
    TokenKind.COLON: HighlightCategory.PUNCTUATION,
    TokenKind.HASH: HighlightCategory.PUNCTUATION,
    TokenKind.EQUALS: HighlightCategory.PUNCTUATION,
    TokenKind.PIPE: HighlightCategory.PUNCTUATION,
    TokenKind.LESS_THAN: HighlightCategory.PUNCTUATION,
    TokenKind.IDENTIFIER: HighlightCategory.ARGUMENT,
    TokenKind.NUMBER: HighlightCategory.NUMBER,
    TokenKind.TEXT: HighlightCategory.TEXT,
    TokenKind.WHITESPACE: HighlightCategory.WHITESPACE,
})


def highlight_source(source: str | bytes, styler: Styler = plain_styler) -> str:
    """Style the raw source token by token without parsing it.

    Works on text that lexes but does not parse, which makes it suitable for
    editors showing work in progress.

    Raises:
        LexingError: If source cannot be tokenized
    """
    stream = tokenize(source)
    text = stream.source
    return "".join(
        styler(text[token.start : token.end], _TOKEN_CATEGORIES[token.kind])
        for token in stream
        if token.kind is not TokenKind.EOF
    )
