"""Recursive-descent parser for ICU MessageFormat.

Grammar (informal):

    message   := (text | '#' | argument)*
    argument  := '{' name [',' type [',' style | branches | choices]] '}'
    branches  := ['offset' ':' number] (selector '{' message '}')+
    selector  := identifier | '=' number
    choices   := choice ('|' choice)*
    choice    := number ('#' | '<') message

'#' is a Pound placeholder only while inside a plural or selectordinal
option message; elsewhere it is text.

Errors are fatal: ParsingError is raised at the first violation and no
partial AST is returned.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import replace

from icuparser.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from icuparser.core.depth_guard import DepthGuard
from icuparser.diagnostics import ErrorTemplate, ParsingError
from icuparser.enums import TokenKind

from .ast import (
    Choice,
    ChoiceOption,
    FormattedArgument,
    Message,
    MessagePart,
    Number,
    Option,
    Plural,
    Pound,
    Select,
    SelectOrdinal,
    SimpleArgument,
    Span,
    Text,
    formatted_argument,
)
from .lexer import Lexer
from .tokens import Token, TokenStream

__all__ = ["BRANCHING_TYPES", "Parser", "parse", "parse_number"]

# Format types whose body is a list of options rather than a style.
BRANCHING_TYPES: frozenset[str] = frozenset({"select", "plural", "selectordinal", "choice"})

_NO_TERMINATORS: frozenset[TokenKind] = frozenset()
_CHOICE_TERMINATORS: frozenset[TokenKind] = frozenset({TokenKind.PIPE})
_WHITESPACE_CHARS = " \t\n\r\v\f"


def parse_number(text: str) -> Number:
    """Parse a NUMBER token: int without ".", float with it."""
    return float(text) if "." in text else int(text)


class Parser:
    """ICU MessageFormat parser.

    Holds only configuration; every parse() call uses fresh local state, so
    one instance may be shared between threads.

    Args:
        max_source_size: Maximum input length in characters
        max_nesting_depth: Maximum argument nesting
    """

    __slots__ = ("_lexer", "_max_nesting_depth")

    def __init__(
        self,
        *,
        max_source_size: int = MAX_SOURCE_SIZE,
        max_nesting_depth: int = MAX_NESTING_DEPTH,
    ) -> None:
        self._lexer = Lexer(max_source_size=max_source_size)
        self._max_nesting_depth = max_nesting_depth

    @property
    def max_nesting_depth(self) -> int:
        return self._max_nesting_depth

    def parse(self, source: str | bytes) -> Message:
        """Parse source into a Message.

        Raises:
            LexingError: If source cannot be tokenized
            ParsingError: On the first grammar violation
        """
        stream = self._lexer.tokenize(source)
        return _ParseSession(stream, self._max_nesting_depth).parse()


class _ParseSession:
    """State for one parse() call: token cursor and plural context counter."""

    __slots__ = ("_guard", "_plural_depth", "_source", "_stream")

    def __init__(self, stream: TokenStream, max_nesting_depth: int) -> None:
        self._stream = stream
        self._source = stream.source
        self._plural_depth = 0
        self._guard = DepthGuard(
            max_depth=max_nesting_depth,
            on_exceeded=lambda limit: self._error(
                ErrorTemplate.nesting_too_deep(limit), self._stream.current
            ),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, message: str, token: Token) -> ParsingError:
        return ParsingError(message, token.start, self._source)

    def _skip_whitespace(self) -> None:
        while self._stream.current.kind is TokenKind.WHITESPACE:
            self._stream.advance()

    def _expect(self, kind: TokenKind, message: str) -> Token:
        token = self._stream.current
        if token.kind is not kind:
            raise self._error(message, token)
        return self._stream.advance()

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def parse(self) -> Message:
        message = self._parse_message(_NO_TERMINATORS)
        token = self._stream.current
        if token.kind is TokenKind.RBRACE:
            raise self._error(ErrorTemplate.unexpected_closing_brace(), token)
        if not self._stream.is_at_end():
            raise self._error(ErrorTemplate.unexpected_trailing_tokens(), token)
        return message

    def _parse_message(self, terminators: frozenset[TokenKind]) -> Message:
        """Parse parts until "}", a terminator, or end of input (not consumed)."""
        stream = self._stream
        start = stream.current.start
        parts: list[MessagePart] = []
        buffer: list[str] = []
        buffer_start = start

        def flush() -> None:
            if buffer:
                parts.append(Text("".join(buffer), Span(buffer_start, stream.current.start)))
                buffer.clear()

        while True:
            token = stream.current
            kind = token.kind
            if kind is TokenKind.EOF or kind is TokenKind.RBRACE or kind in terminators:
                break
            if kind is TokenKind.LBRACE:
                flush()
                parts.append(self._parse_argument())
            elif kind is TokenKind.HASH and self._plural_depth > 0:
                flush()
                stream.advance()
                parts.append(Pound(Span(token.start, token.end)))
            else:
                if not buffer:
                    buffer_start = token.start
                buffer.append(token.text)
                stream.advance()

        flush()
        return Message(tuple(parts), Span(start, stream.current.start))

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def _parse_argument(self) -> MessagePart:
        stream = self._stream
        with self._guard:
            open_token = stream.advance()
            self._skip_whitespace()

            name_token = stream.current
            if name_token.kind is TokenKind.NUMBER:
                if name_token.text.startswith("-"):
                    raise self._error(ErrorTemplate.negative_argument_name(), name_token)
                if "." in name_token.text:
                    raise self._error(ErrorTemplate.expected_argument_name(), name_token)
            elif name_token.kind is not TokenKind.IDENTIFIER:
                raise self._error(ErrorTemplate.expected_argument_name(), name_token)
            name = stream.advance().text
            self._skip_whitespace()

            if stream.current.kind is TokenKind.RBRACE:
                close = stream.advance()
                return SimpleArgument(name, Span(open_token.start, close.end))

            self._expect(TokenKind.COMMA, ErrorTemplate.expected_comma_after_name())
            self._skip_whitespace()
            type_token = self._expect(TokenKind.IDENTIFIER, ErrorTemplate.expected_argument_type())
            arg_type = type_token.text.lower()
            self._skip_whitespace()

            if stream.current.kind is TokenKind.RBRACE:
                if arg_type in BRANCHING_TYPES:
                    raise self._error(ErrorTemplate.expected_options(arg_type), stream.current)
                close = stream.advance()
                return formatted_argument(name, arg_type, None, Span(open_token.start, close.end))

            self._expect(TokenKind.COMMA, ErrorTemplate.expected_comma_before_style())

            if arg_type == "choice":
                return self._parse_choice(name, open_token)
            if arg_type in BRANCHING_TYPES:
                return self._parse_branching(name, arg_type, open_token)
            return self._parse_style(name, arg_type, open_token)

    def _parse_style(self, name: str, arg_type: str, open_token: Token) -> FormattedArgument:
        """Collect the raw style text up to the closing brace."""
        stream = self._stream
        start = stream.current.start
        while stream.current.kind is not TokenKind.RBRACE:
            token = stream.current
            if token.kind is TokenKind.EOF:
                raise self._error(ErrorTemplate.expected_closing_brace(), token)
            if token.kind is TokenKind.LBRACE:
                raise self._error(ErrorTemplate.brace_in_style(), token)
            stream.advance()
        style = self._source[start : stream.current.start].strip(_WHITESPACE_CHARS) or None
        close = stream.advance()
        return formatted_argument(name, arg_type, style, Span(open_token.start, close.end))

    def _parse_branching(
        self, name: str, arg_type: str, open_token: Token
    ) -> Select | Plural | SelectOrdinal:
        stream = self._stream
        is_plural = arg_type != "select"
        offset: Number | None = None

        self._skip_whitespace()
        if (
            is_plural
            and stream.current.kind is TokenKind.IDENTIFIER
            and stream.current.text.lower() == "offset"
        ):
            stream.advance()
            self._skip_whitespace()
            self._expect(TokenKind.COLON, ErrorTemplate.expected_offset_colon())
            self._skip_whitespace()
            offset = parse_number(
                self._expect(TokenKind.NUMBER, ErrorTemplate.expected_offset_number()).text
            )

        options: list[Option] = []
        while True:
            self._skip_whitespace()
            if stream.current.kind in (TokenKind.RBRACE, TokenKind.EOF):
                break
            options.append(self._parse_option(is_plural=is_plural))

        if not options:
            raise self._error(ErrorTemplate.expected_options(arg_type), stream.current)
        close = self._expect(TokenKind.RBRACE, ErrorTemplate.expected_closing_brace())
        span = Span(open_token.start, close.end)

        match arg_type:
            case "select":
                return Select(name, tuple(options), span)
            case "plural":
                return Plural(name, tuple(options), offset, span)
            case _:
                return SelectOrdinal(name, tuple(options), offset, span)

    def _parse_option(self, *, is_plural: bool) -> Option:
        stream = self._stream
        token = stream.current
        explicit = False
        explicit_value: Number | None = None

        if token.kind is TokenKind.EQUALS:
            if not is_plural:
                raise self._error(ErrorTemplate.explicit_selector_not_allowed(), token)
            stream.advance()
            number = self._expect(TokenKind.NUMBER, ErrorTemplate.expected_explicit_number())
            selector = "=" + number.text
            explicit = True
            explicit_value = parse_number(number.text)
        elif token.kind is TokenKind.IDENTIFIER:
            selector = stream.advance().text
        else:
            raise self._error(ErrorTemplate.expected_selector(), token)

        self._skip_whitespace()
        self._expect(TokenKind.LBRACE, ErrorTemplate.expected_option_open())
        if is_plural:
            self._plural_depth += 1
        message = self._parse_message(_NO_TERMINATORS)
        if is_plural:
            self._plural_depth -= 1
        close = self._expect(TokenKind.RBRACE, ErrorTemplate.expected_option_close())

        return Option(selector, message, explicit, explicit_value, Span(token.start, close.end))

    # ------------------------------------------------------------------
    # Choice
    # ------------------------------------------------------------------

    def _parse_choice(self, name: str, open_token: Token) -> Choice:
        stream = self._stream
        self._skip_whitespace()
        if stream.current.kind in (TokenKind.RBRACE, TokenKind.EOF):
            raise self._error(ErrorTemplate.expected_options("choice"), stream.current)

        options: list[ChoiceOption] = []
        while True:
            options.append(self._parse_choice_option())
            self._skip_whitespace()
            if stream.current.kind is not TokenKind.PIPE:
                break
            stream.advance()
            self._skip_whitespace()

        close = self._expect(TokenKind.RBRACE, ErrorTemplate.expected_choice_close())
        return Choice(name, tuple(options), Span(open_token.start, close.end))

    def _parse_choice_option(self) -> ChoiceOption:
        stream = self._stream
        limit_token = self._expect(TokenKind.NUMBER, ErrorTemplate.expected_choice_limit())
        self._skip_whitespace()

        operator = stream.current
        if operator.kind is TokenKind.HASH:
            is_exclusive = False
        elif operator.kind is TokenKind.LESS_THAN:
            is_exclusive = True
        else:
            raise self._error(ErrorTemplate.expected_choice_operator(), operator)
        stream.advance()
        self._skip_whitespace()

        message = _strip_trailing_whitespace(self._parse_message(_CHOICE_TERMINATORS))
        end = message.span.end if message.span else operator.end
        return ChoiceOption(
            parse_number(limit_token.text),
            message,
            is_exclusive,
            Span(limit_token.start, end),
        )


def _strip_trailing_whitespace(message: Message) -> Message:
    """Drop whitespace that only separates a choice message from the next "|"."""
    if not message.parts or not isinstance(last := message.parts[-1], Text):
        return message
    value = last.value.rstrip(_WHITESPACE_CHARS)
    if value == last.value:
        return message
    removed = len(last.value) - len(value)
    parts = message.parts[:-1]
    if value:
        span = Span(last.span.start, last.span.end - removed) if last.span else None
        parts = (*parts, Text(value, span))
    if message.span is None:
        return replace(message, parts=parts)
    return replace(message, parts=parts, span=Span(message.span.start, message.span.end - removed))


_DEFAULT_PARSER = Parser()


def parse(source: str | bytes) -> Message:
    """Parse ICU MessageFormat source with default limits.

    Example:
        >>> parse("Hello {name}").parts
        (Text(value='Hello ', ...), SimpleArgument(name='name', ...))

    Raises:
        LexingError: If source cannot be tokenized
        ParsingError: On the first grammar violation
    """
    return _DEFAULT_PARSER.parse(source)
