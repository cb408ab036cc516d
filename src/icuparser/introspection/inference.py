"""Argument type inference for ICU messages.

Walks a parsed message and records what kind of value each argument is
expected to hold:

    {name}                      -> string
    {n, number} / spellout / ordinal / duration -> number
    {d, date} / {t, time}       -> datetime
    {g, select, ...}            -> string
    {n, plural|selectordinal|choice, ...} -> number

An argument used with two different types becomes mixed, and stays mixed.
Results do not depend on the order arguments appear in.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from icuparser.enums import ParameterType
from icuparser.syntax.ast import (
    Choice,
    FormattedArgument,
    Message,
    Plural,
    Select,
    SelectOrdinal,
    SimpleArgument,
)
from icuparser.syntax.visitor import ASTVisitor

__all__ = ["TypeInferer", "TypeMap", "infer"]

_NUMBER_FORMATS: frozenset[str] = frozenset({"number", "spellout", "ordinal", "duration"})
_DATETIME_FORMATS: frozenset[str] = frozenset({"date", "time"})


class TypeMap:
    """Argument name -> ParameterType, with conflict collapsing to MIXED."""

    __slots__ = ("_types",)

    def __init__(self, types: Mapping[str, ParameterType] | None = None) -> None:
        self._types: dict[str, ParameterType] = dict(types) if types else {}

    def add(self, name: str, param_type: ParameterType) -> None:
        """Record a use of name; a second, different type yields MIXED."""
        current = self._types.get(name)
        if current is None or current == param_type:
            self._types[name] = param_type
        else:
            self._types[name] = ParameterType.MIXED

    def merge(self, other: TypeMap) -> TypeMap:
        """Combine two maps into a new one (e.g. across locales)."""
        merged = TypeMap(self._types)
        for name, param_type in other.items():
            merged.add(name, param_type)
        return merged

    def get(self, name: str) -> ParameterType | None:
        return self._types.get(name)

    def all(self) -> dict[str, ParameterType]:
        """Copy of the underlying mapping."""
        return dict(self._types)

    def items(self) -> Iterator[tuple[str, ParameterType]]:
        return iter(self._types.items())

    def to_dict(self) -> dict[str, str]:
        """Stable serialization: names sorted, types as plain strings."""
        return {name: str(self._types[name]) for name in sorted(self._types)}

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeMap):
            return NotImplemented
        return self._types == other._types

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TypeMap({self.to_dict()!r})"


class TypeInferer(ASTVisitor):
    """Visitor collecting argument types into a fresh TypeMap per infer() call."""

    def __init__(self, *, max_depth: int | None = None) -> None:
        super().__init__(max_depth=max_depth)
        self._types = TypeMap()

    def infer(self, message: Message) -> TypeMap:
        self._types = TypeMap()
        self.visit(message)
        return self._types

    def visit_SimpleArgument(self, node: SimpleArgument) -> None:
        self._types.add(node.name, ParameterType.STRING)

    def visit_FormattedArgument(self, node: FormattedArgument) -> None:
        if node.format in _NUMBER_FORMATS:
            self._types.add(node.name, ParameterType.NUMBER)
        elif node.format in _DATETIME_FORMATS:
            self._types.add(node.name, ParameterType.DATETIME)
        else:
            self._types.add(node.name, ParameterType.STRING)

    def visit_Select(self, node: Select) -> None:
        self._types.add(node.name, ParameterType.STRING)
        self.generic_visit(node)

    def visit_Plural(self, node: Plural) -> None:
        self._types.add(node.name, ParameterType.NUMBER)
        self.generic_visit(node)

    def visit_SelectOrdinal(self, node: SelectOrdinal) -> None:
        self._types.add(node.name, ParameterType.NUMBER)
        self.generic_visit(node)

    def visit_Choice(self, node: Choice) -> None:
        self._types.add(node.name, ParameterType.NUMBER)
        self.generic_visit(node)


def infer(message: Message) -> TypeMap:
    """Infer argument types of a parsed message.

    Example:
        >>> infer(parse("Hello {name}")).to_dict()
        {'name': 'string'}
    """
    return TypeInferer().infer(message)
