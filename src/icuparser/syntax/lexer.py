"""Lexer for ICU MessageFormat source.

Single linear pass producing a TokenStream. Quoting follows ICU's
apostrophe rules:

    ''        literal apostrophe
    '{...'    quoted literal, opened by ' before one of { } # |
    '         any other apostrophe is literal text

Quoted literals become TEXT tokens holding the unescaped content.

Python 3.13+.
"""

from __future__ import annotations

from icuparser.constants import MAX_SOURCE_SIZE
from icuparser.diagnostics import ErrorTemplate, LexingError
from icuparser.enums import TokenKind

from .tokens import Token, TokenStream

__all__ = ["QUOTE_SPECIAL", "Lexer", "tokenize"]

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "#": TokenKind.HASH,
    "=": TokenKind.EQUALS,
    "|": TokenKind.PIPE,
    "<": TokenKind.LESS_THAN,
}

# Characters that open a quoted literal when preceded by an apostrophe.
QUOTE_SPECIAL: frozenset[str] = frozenset("{}#|")

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")
_IDENT_START = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_")
_IDENT_PART = _IDENT_START | _DIGITS | {"-"}


class Lexer:
    """Tokenizer for ICU MessageFormat.

    Stateless between calls; a single instance may be shared.

    Args:
        max_source_size: Maximum input length in characters
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int = MAX_SOURCE_SIZE) -> None:
        self._max_source_size = max_source_size

    def tokenize(self, source: str | bytes) -> TokenStream:
        """Tokenize source.

        Raises:
            LexingError: Invalid UTF-8, unterminated quoted literal, or
                input larger than max_source_size
        """
        text = _decode(source)
        if len(text) > self._max_source_size:
            raise LexingError(
                ErrorTemplate.source_too_large(len(text), self._max_source_size), 0, text
            )
        return TokenStream(self._scan(text), text)

    @staticmethod
    def _scan(text: str) -> list[Token]:
        tokens: list[Token] = []
        length = len(text)
        pos = 0

        while pos < length:
            char = text[pos]

            if char == "'":
                tokens.append(_scan_apostrophe(text, pos))
            elif char in _SINGLE_CHAR_TOKENS:
                tokens.append(Token(_SINGLE_CHAR_TOKENS[char], char, pos, 1))
            elif char in _WHITESPACE:
                end = pos + 1
                while end < length and text[end] in _WHITESPACE:
                    end += 1
                tokens.append(Token(TokenKind.WHITESPACE, text[pos:end], pos, end - pos))
            elif char in _IDENT_START:
                end = pos + 1
                while end < length and text[end] in _IDENT_PART:
                    end += 1
                tokens.append(Token(TokenKind.IDENTIFIER, text[pos:end], pos, end - pos))
            elif _starts_number(text, pos):
                end = _scan_number(text, pos)
                tokens.append(Token(TokenKind.NUMBER, text[pos:end], pos, end - pos))
            else:
                end = pos + 1
                while end < length and not _starts_token(text, end):
                    end += 1
                tokens.append(Token(TokenKind.TEXT, text[pos:end], pos, end - pos))

            pos = tokens[-1].end

        tokens.append(Token(TokenKind.EOF, "", length, 0))
        return tokens


def _decode(source: str | bytes) -> str:
    """Return source as str, rejecting anything that is not valid UTF-8."""
    if isinstance(source, bytes):
        try:
            return source.decode("utf-8")
        except UnicodeDecodeError as e:
            partial = source[: e.start].decode("utf-8")
            raise LexingError(ErrorTemplate.invalid_utf8(), len(partial), partial) from e
    try:
        source.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates; render the snippet from the valid prefix
        raise LexingError(ErrorTemplate.invalid_utf8(), e.start, source[: e.start]) from e
    return source


def _scan_apostrophe(text: str, pos: int) -> Token:
    nxt = text[pos + 1] if pos + 1 < len(text) else ""
    if nxt == "'":
        return Token(TokenKind.TEXT, "'", pos, 2)
    if nxt not in QUOTE_SPECIAL:
        return Token(TokenKind.TEXT, "'", pos, 1)

    parts: list[str] = []
    end = pos + 1
    while end < len(text):
        char = text[end]
        if char == "'":
            if end + 1 < len(text) and text[end + 1] == "'":
                parts.append("'")
                end += 2
                continue
            return Token(TokenKind.TEXT, "".join(parts), pos, end + 1 - pos)
        parts.append(char)
        end += 1
    raise LexingError(ErrorTemplate.unterminated_quote(), pos, text)


def _starts_number(text: str, pos: int) -> bool:
    char = text[pos]
    if char in _DIGITS:
        return True
    return char == "-" and pos + 1 < len(text) and text[pos + 1] in _DIGITS


def _scan_number(text: str, pos: int) -> int:
    end = pos + 1 if text[pos] == "-" else pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end + 1 < len(text) and text[end] == "." and text[end + 1] in _DIGITS:
        end += 1
        while end < len(text) and text[end] in _DIGITS:
            end += 1
    return end


def _starts_token(text: str, pos: int) -> bool:
    """True when text[pos] would begin a token other than plain text."""
    char = text[pos]
    return (
        char == "'"
        or char in _SINGLE_CHAR_TOKENS
        or char in _WHITESPACE
        or char in _IDENT_START
        or _starts_number(text, pos)
    )


_DEFAULT_LEXER = Lexer()


def tokenize(source: str | bytes) -> TokenStream:
    """Tokenize ICU MessageFormat source with default limits.

    Example:
        >>> [t.text for t in tokenize("'{name}'")][:1]
        ['{name}']
    """
    return _DEFAULT_LEXER.tokenize(source)
