"""ICU MessageFormat AST node definitions.

Nodes are immutable, slotted dataclasses. Each carries the [start, end)
span it was parsed from; spans are excluded from equality, so == compares
structure only.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeIs

if TYPE_CHECKING:
    from .visitor import ASTVisitor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    "Node",
    # Message structure
    "Message",
    "Text",
    "Pound",
    # Arguments
    "SimpleArgument",
    "FormattedArgument",
    "SpelloutArgument",
    "OrdinalArgument",
    "DurationArgument",
    "Select",
    "Plural",
    "SelectOrdinal",
    "Option",
    "Choice",
    "ChoiceOption",
    # Factories
    "formatted_argument",
    # Type aliases
    "Number",
    "MessagePart",
    "BranchingArgument",
    "ASTNode",
]

type Number = int | float

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Offsets are str indices (code points) into the parsed source.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


class Node:
    """Mixin giving every AST node an accept() hook."""

    __slots__ = ()

    def accept[T](self, visitor: ASTVisitor[T]) -> T:
        """Dispatch to visitor.visit_<ClassName>."""
        return visitor.visit(self)  # type: ignore[arg-type]


def _span() -> Span | None:
    return field(default=None, compare=False)  # type: ignore[return-value]


# ============================================================================
# MESSAGE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Message(Node):
    """Flat, ordered sequence of message parts.

    Nesting happens only through argument nodes, never through adjacent
    Message nodes.

    Example:
        "Hello {name}" -> Message((Text("Hello "), SimpleArgument("name")))
    """

    parts: tuple[MessagePart, ...] = ()
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Message]:
        return isinstance(node, Message)


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text with quoting already removed."""

    value: str
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Text]:
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class Pound(Node):
    """The # placeholder inside a plural or selectordinal option message."""

    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Pound]:
        return isinstance(node, Pound)


# ============================================================================
# ARGUMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class SimpleArgument(Node):
    """Bare argument reference: {name}"""

    name: str
    span: Span | None = _span()


@dataclass(frozen=True, slots=True)
class FormattedArgument(Node):
    """Argument with a format type and optional verbatim style.

    Examples:
        {n, number}
        {n, number, #,##0.00}
        {d, date, short}

    Attributes:
        name: Argument name
        format: Lower-cased format type
        style: Style text as written (trimmed), or None
    """

    name: str
    format: str
    style: str | None = None
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[FormattedArgument]:
        """True for FormattedArgument and its named-formatter subclasses."""
        return isinstance(node, FormattedArgument)


@dataclass(frozen=True, slots=True)
class SpelloutArgument(FormattedArgument):
    """{n, spellout}"""


@dataclass(frozen=True, slots=True)
class OrdinalArgument(FormattedArgument):
    """{n, ordinal}"""


@dataclass(frozen=True, slots=True)
class DurationArgument(FormattedArgument):
    """{n, duration}"""


_NAMED_FORMATTERS: dict[str, type[FormattedArgument]] = {
    "spellout": SpelloutArgument,
    "ordinal": OrdinalArgument,
    "duration": DurationArgument,
}


def formatted_argument(
    name: str,
    format: str,  # noqa: A002  # pylint: disable=redefined-builtin
    style: str | None = None,
    span: Span | None = None,
) -> FormattedArgument:
    """Build the FormattedArgument variant matching format.

    Example:
        >>> type(formatted_argument("n", "spellout")).__name__
        'SpelloutArgument'
    """
    cls = _NAMED_FORMATTERS.get(format, FormattedArgument)
    return cls(name=name, format=format, style=style, span=span)


@dataclass(frozen=True, slots=True)
class Option(Node):
    """One branch of a select, plural or selectordinal argument.

    Attributes:
        selector: Keyword ("one", "other") or "=" + raw number for explicit
        message: Branch message
        explicit: True for =N selectors (plural/selectordinal only)
        explicit_value: Parsed N for explicit selectors
    """

    selector: str
    message: Message
    explicit: bool = False
    explicit_value: Number | None = None
    span: Span | None = _span()


@dataclass(frozen=True, slots=True)
class Select(Node):
    """{gender, select, male {...} other {...}}"""

    keyword: ClassVar[str] = "select"

    name: str
    options: tuple[Option, ...]
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Select]:
        return isinstance(node, Select)


@dataclass(frozen=True, slots=True)
class Plural(Node):
    """{count, plural, offset:1 =0 {...} one {...} other {...}}"""

    keyword: ClassVar[str] = "plural"

    name: str
    options: tuple[Option, ...]
    offset: Number | None = None
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Plural | SelectOrdinal]:
        """True for both plural kinds (cardinal and ordinal)."""
        return isinstance(node, (Plural, SelectOrdinal))


@dataclass(frozen=True, slots=True)
class SelectOrdinal(Node):
    """{place, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}"""

    keyword: ClassVar[str] = "selectordinal"

    name: str
    options: tuple[Option, ...]
    offset: Number | None = None
    span: Span | None = _span()


@dataclass(frozen=True, slots=True)
class ChoiceOption(Node):
    """One range of a choice argument: limit followed by # or <.

    Attributes:
        limit: Lower bound
        message: Range message
        is_exclusive: True for "<" (limit excluded), False for "#"
    """

    limit: Number
    message: Message
    is_exclusive: bool = False
    span: Span | None = _span()


@dataclass(frozen=True, slots=True)
class Choice(Node):
    """Legacy choice argument: {n, choice, 0#none|1#one|1<many}"""

    keyword: ClassVar[str] = "choice"

    name: str
    options: tuple[ChoiceOption, ...]
    span: Span | None = _span()

    @staticmethod
    def guard(node: object) -> TypeIs[Choice]:
        return isinstance(node, Choice)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type BranchingArgument = Select | Plural | SelectOrdinal

type MessagePart = (
    Text | Pound | SimpleArgument | FormattedArgument | Select | Plural | SelectOrdinal | Choice
)

type ASTNode = (
    Message
    | Text
    | Pound
    | SimpleArgument
    | FormattedArgument
    | Select
    | Plural
    | SelectOrdinal
    | Option
    | Choice
    | ChoiceOption
)
