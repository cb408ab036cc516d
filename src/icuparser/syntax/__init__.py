"""ICU MessageFormat syntax: lexer, parser, AST, visitors and printers.

Python 3.13+.
"""

from .ast import (
    ASTNode,
    Choice,
    ChoiceOption,
    DurationArgument,
    FormattedArgument,
    Message,
    MessagePart,
    Option,
    OrdinalArgument,
    Plural,
    Pound,
    Select,
    SelectOrdinal,
    SimpleArgument,
    Span,
    SpelloutArgument,
    Text,
    formatted_argument,
)
from .dumper import AstDumper, dump
from .highlighter import AnsiStyler, HtmlStyler, highlight, highlight_source
from .lexer import Lexer, tokenize
from .parser import Parser, parse
from .serializer import FormatOptions, MessagePrinter, Styler, format_message, plain_styler, serialize
from .tokens import Token, TokenStream
from .visitor import ASTVisitor, iter_child_nodes

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "AnsiStyler",
    "AstDumper",
    "Choice",
    "ChoiceOption",
    "DurationArgument",
    "FormatOptions",
    "FormattedArgument",
    "HtmlStyler",
    "Lexer",
    "Message",
    "MessagePart",
    "MessagePrinter",
    "Option",
    "OrdinalArgument",
    "Parser",
    "Plural",
    "Pound",
    "Select",
    "SelectOrdinal",
    "SimpleArgument",
    "Span",
    "SpelloutArgument",
    "Styler",
    "Text",
    "Token",
    "TokenStream",
    "dump",
    "format_message",
    "formatted_argument",
    "highlight",
    "highlight_source",
    "iter_child_nodes",
    "parse",
    "plain_styler",
    "serialize",
    "tokenize",
]
