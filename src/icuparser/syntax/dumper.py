"""Dump an AST to plain, JSON-ready dictionaries.

Useful for debugging, snapshot tests and handing trees to non-Python
tooling.
"""

from __future__ import annotations

from typing import Any

from .ast import (
    ASTNode,
    Choice,
    ChoiceOption,
    FormattedArgument,
    Message,
    Option,
    Plural,
    Pound,
    Select,
    SelectOrdinal,
    SimpleArgument,
    Text,
)
from .visitor import ASTVisitor

__all__ = ["AstDumper", "dump"]

type Dump = dict[str, Any]


class AstDumper(ASTVisitor[Dump]):
    """Visitor producing {"type", "start", "end", ...fields} dictionaries.

    Args:
        include_spans: Emit start/end keys (disable for offset-free snapshots)
    """

    __slots__ = ("_include_spans",)

    def __init__(self, *, include_spans: bool = True, max_depth: int | None = None) -> None:
        super().__init__(max_depth=max_depth)
        self._include_spans = include_spans

    def _base(self, node: ASTNode, **fields: Any) -> Dump:
        result: Dump = {"type": type(node).__name__}
        if self._include_spans:
            span = node.span
            result["start"] = span.start if span else None
            result["end"] = span.end if span else None
        result.update(fields)
        return result

    def visit_Message(self, node: Message) -> Dump:
        return self._base(node, parts=[self.visit(part) for part in node.parts])

    def visit_Text(self, node: Text) -> Dump:
        return self._base(node, value=node.value)

    def visit_Pound(self, node: Pound) -> Dump:
        return self._base(node)

    def visit_SimpleArgument(self, node: SimpleArgument) -> Dump:
        return self._base(node, name=node.name)

    def visit_FormattedArgument(self, node: FormattedArgument) -> Dump:
        return self._base(node, name=node.name, format=node.format, style=node.style)

    def visit_Select(self, node: Select) -> Dump:
        return self._base(node, name=node.name, options=[self.visit(o) for o in node.options])

    def visit_Plural(self, node: Plural) -> Dump:
        return self._base(
            node,
            name=node.name,
            offset=node.offset,
            options=[self.visit(o) for o in node.options],
        )

    def visit_SelectOrdinal(self, node: SelectOrdinal) -> Dump:
        return self._base(
            node,
            name=node.name,
            offset=node.offset,
            options=[self.visit(o) for o in node.options],
        )

    def visit_Option(self, node: Option) -> Dump:
        return self._base(
            node,
            selector=node.selector,
            explicit=node.explicit,
            explicit_value=node.explicit_value,
            message=self.visit(node.message),
        )

    def visit_Choice(self, node: Choice) -> Dump:
        return self._base(node, name=node.name, options=[self.visit(o) for o in node.options])

    def visit_ChoiceOption(self, node: ChoiceOption) -> Dump:
        return self._base(
            node,
            limit=node.limit,
            is_exclusive=node.is_exclusive,
            message=self.visit(node.message),
        )


def dump(message: Message, *, include_spans: bool = True) -> Dump:
    """Dump message to nested dictionaries.

    Example:
        >>> dump(parse("Hi {n}"), include_spans=False)
        {'type': 'Message', 'parts': [{'type': 'Text', 'value': 'Hi '}, {'type': 'SimpleArgument', 'name': 'n'}]}
    """
    return AstDumper(include_spans=include_spans).visit(message)
