"""Serialize ICU AST back to MessageFormat source.

Two layouts share one traversal:
- compact (serialize): canonical single-line form
- pretty (format_message): one option per line, indented, optionally with
  aligned selectors

Every piece of output passes through a Styler, so the highlighter is the
same printer with a styling function plugged in.

Round-trip guarantee: for any source m that parses,
parse(format_message(parse(m))) == parse(m) and the same for serialize().

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal

from icuparser.constants import DEFAULT_INDENT, DEFAULT_LINE_BREAK
from icuparser.enums import HighlightCategory

from .ast import (
    Choice,
    ChoiceOption,
    FormattedArgument,
    Message,
    Number,
    Option,
    Plural,
    Pound,
    Select,
    SelectOrdinal,
    SimpleArgument,
    Text,
)
from .visitor import ASTVisitor

__all__ = [
    "FormatOptions",
    "MessagePrinter",
    "Styler",
    "escape_text",
    "format_message",
    "format_number",
    "plain_styler",
    "serialize",
]

type Styler = Callable[[str, HighlightCategory], str]

_BRACES: frozenset[str] = frozenset("{}")
_PLURAL_SPECIALS: frozenset[str] = frozenset("{}#")
_CHOICE_SPECIALS: frozenset[str] = frozenset("{}|")
_CHOICE_PLURAL_SPECIALS: frozenset[str] = frozenset("{}#|")


def plain_styler(content: str, category: HighlightCategory) -> str:  # noqa: ARG001
    """Styler that returns content unchanged."""
    return content


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Pretty-printer layout options.

    Attributes:
        indent: Added per nesting level (default: 4 spaces)
        line_break: Inserted before each option and the closing brace
        align_selectors: Pad selectors in a block to equal width
    """

    indent: str = DEFAULT_INDENT
    line_break: str = DEFAULT_LINE_BREAK
    align_selectors: bool = True

    def __post_init__(self) -> None:
        if not self.line_break:
            msg = "line_break must be a non-empty string"
            raise ValueError(msg)


def escape_text(value: str, specials: frozenset[str] = _BRACES) -> str:
    """Quote text so the lexer reads it back as the same literal.

    Runs of special characters are wrapped in one quoted literal;
    apostrophes are doubled everywhere.

    Example:
        >>> escape_text("a {b} c")
        "a '{'b'}' c"
        >>> escape_text("it's {}")
        "it''s '{}'"
    """
    out: list[str] = []
    index = 0
    length = len(value)
    while index < length:
        char = value[index]
        if char in specials:
            end = index
            run: list[str] = []
            while end < length and (value[end] in specials or value[end] == "'"):
                run.append("''" if value[end] == "'" else value[end])
                end += 1
            out.append("'" + "".join(run) + "'")
            index = end
        else:
            out.append("''" if char == "'" else char)
            index += 1
    return "".join(out)


def format_number(value: Number) -> str:
    """Render an offset, limit or explicit value so it lexes as one NUMBER.

    Example:
        >>> format_number(1e16)
        '10000000000000000.0'
    """
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


class MessagePrinter(ASTVisitor[str]):
    """Converts AST back to MessageFormat source.

    Escaping depends on where text sits:
    - "{" and "}" are always quoted
    - "#" is quoted anywhere below a plural or selectordinal option
    - "|" is quoted directly inside a choice option message

    Instances carry traversal state; use one instance per call or go through
    format_message()/serialize()/highlight().

    Usage:
        >>> printer = MessagePrinter(FormatOptions(indent="  "))
        >>> print(printer.print(parse("{g, select, a {x} other {y}}")))
        {g, select,
          a     {x}
          other {y}
        }
    """

    __slots__ = (
        "_in_choice",
        "_in_plural",
        "_options",
        "_prefix",
        "_pretty",
        "_selector_width",
        "_styler",
    )

    def __init__(
        self,
        options: FormatOptions | None = None,
        styler: Styler = plain_styler,
        *,
        pretty: bool = True,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(max_depth=max_depth)
        self._options = options if options is not None else FormatOptions()
        self._styler = styler
        self._pretty = pretty
        self._prefix = ""
        self._in_plural = False
        self._in_choice = False
        self._selector_width = 0

    def print(self, message: Message) -> str:
        """Render message from a clean state."""
        self._prefix = ""
        self._in_plural = False
        self._in_choice = False
        self._selector_width = 0
        return self.visit(message)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _s(self, content: str, category: HighlightCategory) -> str:
        return self._styler(content, category)

    @contextmanager
    def _nested(self, *, in_plural: bool, in_choice: bool) -> Iterator[None]:
        """Descend one block level for the duration of the with-block."""
        saved = (self._prefix, self._in_plural, self._in_choice)
        self._prefix = saved[0] + self._options.indent
        self._in_plural = in_plural
        self._in_choice = in_choice
        try:
            yield
        finally:
            self._prefix, self._in_plural, self._in_choice = saved

    def _specials(self) -> frozenset[str]:
        match (self._in_plural, self._in_choice):
            case (True, True):
                return _CHOICE_PLURAL_SPECIALS
            case (True, False):
                return _PLURAL_SPECIALS
            case (False, True):
                return _CHOICE_SPECIALS
            case _:
                return _BRACES

    def _head(self, name: str, keyword: str, category: HighlightCategory) -> list[str]:
        """Render "{name, keyword" (no trailing comma)."""
        return [
            self._s("{", HighlightCategory.BRACE),
            self._s(name, HighlightCategory.ARGUMENT),
            self._s(",", HighlightCategory.PUNCTUATION),
            self._s(" ", HighlightCategory.WHITESPACE),
            self._s(keyword, category),
        ]

    def _option_break(self) -> str:
        """Separator emitted before each option of a block."""
        if self._pretty:
            return self._s(
                self._options.line_break + self._prefix + self._options.indent,
                HighlightCategory.WHITESPACE,
            )
        return self._s(" ", HighlightCategory.WHITESPACE)

    def _close_block(self) -> list[str]:
        parts: list[str] = []
        if self._pretty:
            parts.append(
                self._s(self._options.line_break + self._prefix, HighlightCategory.WHITESPACE)
            )
        parts.append(self._s("}", HighlightCategory.BRACE))
        return parts

    # ------------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------------

    def visit_Message(self, node: Message) -> str:
        return "".join(self.visit(part) for part in node.parts)

    def visit_Text(self, node: Text) -> str:
        return self._s(escape_text(node.value, self._specials()), HighlightCategory.TEXT)

    def visit_Pound(self, node: Pound) -> str:  # noqa: ARG002
        return self._s("#", HighlightCategory.PUNCTUATION)

    def visit_SimpleArgument(self, node: SimpleArgument) -> str:
        return (
            self._s("{", HighlightCategory.BRACE)
            + self._s(node.name, HighlightCategory.ARGUMENT)
            + self._s("}", HighlightCategory.BRACE)
        )

    def visit_FormattedArgument(self, node: FormattedArgument) -> str:
        parts = self._head(node.name, node.format, HighlightCategory.TYPE)
        if node.style is not None:
            parts += [
                self._s(",", HighlightCategory.PUNCTUATION),
                self._s(" ", HighlightCategory.WHITESPACE),
                self._s(node.style, HighlightCategory.STYLE),
            ]
        parts.append(self._s("}", HighlightCategory.BRACE))
        return "".join(parts)

    def visit_Select(self, node: Select) -> str:
        return self._render_block(node, None, in_plural=self._in_plural)

    def visit_Plural(self, node: Plural) -> str:
        return self._render_block(node, node.offset, in_plural=True)

    def visit_SelectOrdinal(self, node: SelectOrdinal) -> str:
        return self._render_block(node, node.offset, in_plural=True)

    def _render_block(
        self,
        node: Select | Plural | SelectOrdinal,
        offset: Number | None,
        *,
        in_plural: bool,
    ) -> str:
        parts = self._head(node.name, node.keyword, HighlightCategory.KEYWORD)
        parts.append(self._s(",", HighlightCategory.PUNCTUATION))
        if offset is not None:
            parts += [
                self._s(" ", HighlightCategory.WHITESPACE),
                self._s("offset", HighlightCategory.KEYWORD),
                self._s(":", HighlightCategory.PUNCTUATION),
                self._s(format_number(offset), HighlightCategory.NUMBER),
            ]

        width = 0
        if self._pretty and self._options.align_selectors:
            width = max((len(option.selector) for option in node.options), default=0)

        for option in node.options:
            parts.append(self._option_break())
            self._selector_width = width
            with self._nested(in_plural=in_plural, in_choice=False):
                parts.append(self.visit(option))

        parts += self._close_block()
        return "".join(parts)

    def visit_Option(self, node: Option) -> str:
        """Render "selector {message}"; called inside the block's nesting."""
        padding = max(self._selector_width - len(node.selector), 0)
        return (
            self._s(node.selector, HighlightCategory.SELECTOR)
            + self._s(" " * (padding + 1), HighlightCategory.WHITESPACE)
            + self._s("{", HighlightCategory.BRACE)
            + self.visit(node.message)
            + self._s("}", HighlightCategory.BRACE)
        )

    def visit_Choice(self, node: Choice) -> str:
        parts = self._head(node.name, node.keyword, HighlightCategory.KEYWORD)
        parts.append(self._s(",", HighlightCategory.PUNCTUATION))
        for index, option in enumerate(node.options):
            if self._pretty:
                parts.append(self._option_break())
                if index:
                    parts += [
                        self._s("|", HighlightCategory.PUNCTUATION),
                        self._s(" ", HighlightCategory.WHITESPACE),
                    ]
            elif index:
                parts.append(self._s("|", HighlightCategory.PUNCTUATION))
            else:
                parts.append(self._s(" ", HighlightCategory.WHITESPACE))
            with self._nested(in_plural=self._in_plural, in_choice=True):
                parts.append(self.visit(option))
        parts += self._close_block()
        return "".join(parts)

    def visit_ChoiceOption(self, node: ChoiceOption) -> str:
        return (
            self._s(format_number(node.limit), HighlightCategory.NUMBER)
            + self._s("<" if node.is_exclusive else "#", HighlightCategory.PUNCTUATION)
            + self.visit(node.message)
        )


def format_message(message: Message, options: FormatOptions | None = None) -> str:
    """Pretty-print message.

    Example:
        >>> print(format_message(parse("{g, select, male {He} female {She} other {They}}")))
        {g, select,
            male   {He}
            female {She}
            other  {They}
        }
    """
    return MessagePrinter(options).print(message)


def serialize(message: Message) -> str:
    """Render message in canonical single-line form.

    Example:
        >>> serialize(parse("{ n ,  plural , one{#}other{# items} }"))
        '{n, plural, one {#} other {# items}}'
    """
    return MessagePrinter(pretty=False).print(message)
