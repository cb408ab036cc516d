"""Tokens and indexed token stream.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from icuparser.enums import TokenKind

__all__ = ["Token", "TokenStream"]


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexical token.

    text is the token's value: for quoted literals this is the unescaped
    content, so len(text) can differ from length. Use source[start:end] for
    the raw slice.

    Attributes:
        kind: Token kind
        text: Token value
        start: Offset of the first character in the source
        length: Number of source characters covered
    """

    kind: TokenKind
    text: str
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def is_a(self, *kinds: TokenKind) -> bool:
        return self.kind in kinds


class TokenStream:
    """Indexed, lookahead access over a token list.

    The list always ends with a zero-length EOF token; reading past the end
    keeps returning it.
    """

    __slots__ = ("_index", "_tokens", "source")

    def __init__(self, tokens: Sequence[Token], source: str) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            end = tokens[-1].end if tokens else 0
            tokens = [*tokens, Token(TokenKind.EOF, "", end, 0)]
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._index = 0
        self.source = source

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> int:
        """Index of the current token."""
        return self._index

    @position.setter
    def position(self, value: int) -> None:
        self._index = max(0, min(value, len(self._tokens) - 1))

    @property
    def current(self) -> Token:
        return self._tokens[self._index]

    def peek(self, offset: int = 1) -> Token:
        """Token at current + offset, clamped to EOF."""
        index = min(self._index + offset, len(self._tokens) - 1)
        return self._tokens[max(index, 0)]

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self._tokens[self._index]
        if self._index < len(self._tokens) - 1:
            self._index += 1
        return token

    def is_at_end(self) -> bool:
        return self._tokens[self._index].kind is TokenKind.EOF

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]
