"""Evaluator for the compact plural rule notation of the built-in table.

A rule is either a boolean condition (selecting the table's first category)
or a right-associative ternary chain naming categories:

    i == 1 && v == 0
    n == 0 ? zero : n == 1 ? one : other

Conditions use C-like operators over the five CLDR operands (n, i, v, f, t):

    ||  >  &&  >  == != < > <= >= (non-chaining)  >  + -  >  * / %  >  unary + -

Division and modulo by zero evaluate to 0. Modulo follows math.fmod.

Only numbers, true/false, the five operands and parentheses are accepted.

Python 3.13+.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "PluralOperands",
    "PluralRuleSyntaxError",
    "evaluate_condition",
    "evaluate_rule",
]


class PluralRuleSyntaxError(ValueError):
    """Malformed rule string (a defect in the rule table, not in user input)."""


# ============================================================================
# OPERANDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """CLDR operands of a number.

    Attributes:
        n: Absolute value
        i: Integer digits of n
        v: Number of visible fraction digits, trailing zeros removed
        f: Fractional part of n as a value (n - i)
        t: Visible fraction digits as an integer, trailing zeros removed
    """

    n: float
    i: int
    v: int
    f: float
    t: int

    @classmethod
    def from_number(cls, number: int | float | Decimal) -> PluralOperands:
        """Derive operands; floats are read through their shortest repr.

        Integer parts of 10**15 and above are folded onto a float-exact value
        with the same last six digits, which is all the rules ever look at
        beyond magnitude. The number must be finite.

        Example:
            >>> PluralOperands.from_number(1.50)
            PluralOperands(n=1.5, i=1, v=1, f=0.5, t=5)
        """
        if isinstance(number, int):
            value = _fold(abs(number))
            return cls(float(value), value, 0, 0.0, 0)
        dec = (number if isinstance(number, Decimal) else Decimal(repr(float(number)))).copy_abs()
        if not dec.is_finite():
            msg = f"Plural operands need a finite number, got {number!r}"
            raise ValueError(msg)
        integer, digits = _split_decimal(dec)
        digits = digits.rstrip("0")
        fraction = float(Decimal(f"0.{digits}")) if digits else 0.0
        return cls(
            n=integer + fraction,
            i=integer,
            v=len(digits),
            f=fraction,
            t=_fold_digits(digits),
        )

    def get(self, name: str) -> float:
        match name:
            case "n":
                return self.n
            case "i":
                return float(self.i)
            case "v":
                return float(self.v)
            case "f":
                return self.f
            case "t":
                return float(self.t)
            case _:
                msg = f"Unknown plural operand '{name}'"
                raise PluralRuleSyntaxError(msg)


_FOLD_THRESHOLD = 10**15
_FOLD_MODULUS = 10**6


def _fold(integer: int) -> int:
    if integer < _FOLD_THRESHOLD:
        return integer
    return _FOLD_THRESHOLD + integer % _FOLD_MODULUS


def _fold_digits(digits: str) -> int:
    """_fold() for a decimal digit string of any length."""
    significant = digits.lstrip("0")
    if len(significant) < 16:
        return _fold(int(significant or "0"))
    return _FOLD_THRESHOLD + int(significant[-6:])


def _split_decimal(dec: Decimal) -> tuple[int, str]:
    """Folded integer part and fraction digits of a finite, non-negative Decimal."""
    if dec.is_zero():
        return 0, ""
    parts = dec.as_tuple()
    digits = "".join(map(str, parts.digits))
    exponent = int(parts.exponent)
    if exponent < 0:
        return _fold_digits(digits[:exponent]), digits[exponent:].rjust(-exponent, "0")
    if dec.adjusted() < 15:
        return int(dec), ""
    # last six digits of the integer without expanding the exponent
    return _FOLD_THRESHOLD + int((digits + "0" * min(exponent, 6))[-6:]), ""


# ============================================================================
# TERNARY LAYER
# ============================================================================


def evaluate_rule(rule: str, operands: PluralOperands, categories: Sequence[str]) -> str:
    """Evaluate a table rule and return a category name.

    A rule without "?" is a guard for categories[0]; when it fails the
    result is "other".
    """
    if _find_unquoted(rule, "?") == -1:
        return categories[0] if evaluate_condition(rule, operands) else "other"
    return _evaluate_ternary(rule, operands)


def _evaluate_ternary(expression: str, operands: PluralOperands) -> str:
    question = _find_unquoted(expression, "?")
    if question == -1:
        return _category_name(expression)
    condition = expression[:question]
    branches = expression[question + 1 :]
    colon = _find_matching_colon(branches)
    if colon == -1:
        msg = f"Ternary without ':' in plural rule: {expression!r}"
        raise PluralRuleSyntaxError(msg)
    chosen = branches[:colon] if evaluate_condition(condition, operands) else branches[colon + 1 :]
    return _evaluate_ternary(chosen, operands)


def _category_name(text: str) -> str:
    name = text.strip().strip("'\"")
    if not name.isidentifier():
        msg = f"Invalid category in plural rule: {text!r}"
        raise PluralRuleSyntaxError(msg)
    return name


def _find_unquoted(text: str, target: str) -> int:
    quote = ""
    for index, char in enumerate(text):
        if quote:
            if char == quote:
                quote = ""
        elif char in "'\"":
            quote = char
        elif char == target:
            return index
    return -1


def _find_matching_colon(text: str) -> int:
    """Index of the ":" that closes the current "?", skipping nested ternaries."""
    depth = 0
    quote = ""
    for index, char in enumerate(text):
        if quote:
            if char == quote:
                quote = ""
        elif char in "'\"":
            quote = char
        elif char == "?":
            depth += 1
        elif char == ":":
            if depth == 0:
                return index
            depth -= 1
    return -1


# ============================================================================
# CONDITION LAYER
# ============================================================================

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<number>\d+(?:\.\d+)?)"
    r"|(?P<op>&&|\|\||==|!=|>=|<=|[<>+\-*/%()])"
    r"|(?P<word>[A-Za-z]+))"
)

_COMPARISONS = frozenset({"==", "!=", "<", ">", "<=", ">="})


def _tokenize(condition: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    end = len(condition.rstrip())
    while pos < end:
        match = _TOKEN_RE.match(condition, pos)
        kind = match.lastgroup if match is not None else None
        if match is None or kind is None or match.end() == pos:
            msg = f"Unexpected character in plural rule at {pos}: {condition!r}"
            raise PluralRuleSyntaxError(msg)
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def evaluate_condition(condition: str, operands: PluralOperands) -> bool:
    """Evaluate a boolean/arithmetic condition against operands.

    Example:
        >>> evaluate_condition("i % 10 == 1 && i % 100 != 11", PluralOperands.from_number(21))
        True

    Raises:
        PluralRuleSyntaxError: If condition is malformed
    """
    evaluator = _ConditionEvaluator(_tokenize(condition), operands, condition)
    return evaluator.evaluate() != 0.0


class _ConditionEvaluator:
    """Recursive-descent evaluator; booleans are 1.0/0.0."""

    __slots__ = ("_index", "_operands", "_source", "_tokens")

    def __init__(
        self, tokens: list[tuple[str, str]], operands: PluralOperands, source: str
    ) -> None:
        self._tokens = tokens
        self._operands = operands
        self._source = source
        self._index = 0

    def _peek(self) -> tuple[str, str] | None:
        return self._tokens[self._index] if self._index < len(self._tokens) else None

    def _accept(self, *ops: str) -> str | None:
        token = self._peek()
        if token is not None and token[0] == "op" and token[1] in ops:
            self._index += 1
            return token[1]
        return None

    def _fail(self, reason: str) -> PluralRuleSyntaxError:
        return PluralRuleSyntaxError(f"{reason} in plural rule: {self._source!r}")

    def evaluate(self) -> float:
        if not self._tokens:
            raise self._fail("Empty condition")
        value = self._or()
        if self._peek() is not None:
            raise self._fail(f"Unexpected token {self._peek()[1]!r}")  # type: ignore[index]
        return value

    def _or(self) -> float:
        value = self._and()
        while self._accept("||"):
            right = self._and()
            value = 1.0 if (value != 0.0 or right != 0.0) else 0.0
        return value

    def _and(self) -> float:
        value = self._comparison()
        while self._accept("&&"):
            right = self._comparison()
            value = 1.0 if (value != 0.0 and right != 0.0) else 0.0
        return value

    def _comparison(self) -> float:
        left = self._additive()
        operator = self._accept(*_COMPARISONS)
        if operator is None:
            return left
        right = self._additive()
        match operator:
            case "==":
                result = left == right
            case "!=":
                result = left != right
            case "<":
                result = left < right
            case ">":
                result = left > right
            case "<=":
                result = left <= right
            case _:
                result = left >= right
        return 1.0 if result else 0.0

    def _additive(self) -> float:
        value = self._multiplicative()
        while operator := self._accept("+", "-"):
            right = self._multiplicative()
            value = value + right if operator == "+" else value - right
        return value

    def _multiplicative(self) -> float:
        value = self._unary()
        while operator := self._accept("*", "/", "%"):
            right = self._unary()
            if operator == "*":
                value *= right
            elif right == 0.0:
                value = 0.0
            elif operator == "/":
                value /= right
            else:
                value = math.fmod(value, right)
        return value

    def _unary(self) -> float:
        if self._accept("-"):
            return -self._unary()
        if self._accept("+"):
            return self._unary()
        return self._primary()

    def _primary(self) -> float:
        token = self._peek()
        if token is None:
            raise self._fail("Unexpected end of condition")
        kind, text = token
        if kind == "op":
            if text != "(":
                raise self._fail(f"Unexpected operator {text!r}")
            self._index += 1
            value = self._or()
            if not self._accept(")"):
                raise self._fail("Missing ')'")
            return value
        self._index += 1
        if kind == "number":
            return float(text)
        match text:
            case "true":
                return 1.0
            case "false":
                return 0.0
            case _ if len(text) == 1:
                return self._operands.get(text)
            case _:
                raise self._fail(f"Unknown word {text!r}")
