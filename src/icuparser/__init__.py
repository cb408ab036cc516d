"""icuparser - ICU MessageFormat parser, validator and pretty-printer.

Parses ICU MessageFormat strings into an immutable AST, then hands the tree
to visitors: type inference, semantic validation, pretty-printing and
syntax highlighting. A standalone CLDR plural rule engine (Babel-backed
when installed) selects plural categories by locale.

Public API:
    tokenize - Source to TokenStream
    parse - Source to Message AST
    infer - Argument name -> inferred type (TypeMap)
    validate - Structural checks (ValidationResult)
    format_message - Pretty-print an AST (alias: format)
    serialize - Canonical single-line source
    highlight / highlight_source - Styled output (ANSI, HTML, custom)
    dump - JSON-ready tree
    PluralRules - CLDR plural category selection

Exceptions:
    IcuParserError - Base exception class
    LexingError - Invalid encoding, unterminated quotes
    ParsingError - Grammar violations

Submodules:
    icuparser.syntax - Lexer, parser, AST, visitors, printers
    icuparser.introspection - Type inference
    icuparser.validation - Semantic and pattern validators
    icuparser.runtime - Plural rules
    icuparser.diagnostics - Error codes, exceptions, validation results
"""

from .diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    IcuParserError,
    LexingError,
    ParsingError,
    ValidationError,
    ValidationResult,
)
from .enums import HighlightCategory, ParameterType
from .introspection import TypeInferer, TypeMap, infer
from .runtime import PluralRules
from .syntax import (
    AnsiStyler,
    FormatOptions,
    HtmlStyler,
    dump,
    format_message,
    highlight,
    highlight_source,
    parse,
    plain_styler,
    serialize,
    tokenize,
)
from .syntax.ast import (
    Choice,
    ChoiceOption,
    DurationArgument,
    FormattedArgument,
    Message,
    Option,
    OrdinalArgument,
    Plural,
    Pound,
    Select,
    SelectOrdinal,
    SimpleArgument,
    SpelloutArgument,
    Text,
)
from .validation import SemanticValidator, validate

# ICU-style name; shadows the builtin only for star-importers
format = format_message  # noqa: A001  # pylint: disable=redefined-builtin

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("icuparser")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnsiStyler",
    "Choice",
    "ChoiceOption",
    "DepthLimitExceededError",
    "DiagnosticCode",
    "DurationArgument",
    "FormatOptions",
    "FormattedArgument",
    "HighlightCategory",
    "HtmlStyler",
    "IcuParserError",
    "LexingError",
    "Message",
    "Option",
    "OrdinalArgument",
    "ParameterType",
    "ParsingError",
    "Plural",
    "PluralRules",
    "Pound",
    "Select",
    "SelectOrdinal",
    "SemanticValidator",
    "SimpleArgument",
    "SpelloutArgument",
    "Text",
    "TypeInferer",
    "TypeMap",
    "ValidationError",
    "ValidationResult",
    "__version__",
    "dump",
    "format",
    "format_message",
    "highlight",
    "highlight_source",
    "infer",
    "parse",
    "plain_styler",
    "serialize",
    "tokenize",
    "validate",
]
