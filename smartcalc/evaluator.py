"""Evaluation of reverse Polish expressions."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable

from .lexer import ErrorKind, ExpressionError
from .notation import UNARY_MINUS, to_rpn

__all__ = ["evaluate_rpn", "evaluate"]


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _odd_integer(b) else math.inf
    except ValueError:
        if a == 0 and b < 0:
            return math.copysign(math.inf, a) if _odd_integer(b) else math.inf
        return math.nan


def _modulo(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _total(function: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap a math function so domain errors give NaN instead of raising."""

    def wrapped(value: float) -> float:
        try:
            return function(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    return wrapped


def _ln(value: float) -> float:
    return -math.inf if value == 0 else math.log(value)


def _log10(value: float) -> float:
    return -math.inf if value == 0 else math.log10(value)


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
    "m": _modulo,
}

_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "c": _total(math.cos),
    "s": _total(math.sin),
    "t": _total(math.tan),
    "a": _total(math.acos),
    "i": _total(math.asin),
    "n": _total(math.atan),
    "q": _total(math.sqrt),
    "l": _total(_ln),
    "g": _total(_log10),
    UNARY_MINUS: operator.neg,
}


def _operand(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ExpressionError(ErrorKind.UNKNOWN_SYMBOL) from None


def evaluate_rpn(rpn: str | Iterable[str], x: float = 0.0) -> float:
    """Evaluate a reverse Polish expression with ``x`` bound to the variable.

    ``rpn`` is a space-separated string or a sequence of tokens. Domain
    errors yield NaN or infinities as in IEEE arithmetic.
    """
    tokens = rpn.split() if isinstance(rpn, str) else list(rpn)
    stack: list[float] = []
    for token in tokens:
        if token[:1].isdigit():
            stack.append(_operand(token))
        elif token == "x":
            stack.append(float(x))
        elif token in _BINARY:
            if len(stack) < 2:
                raise ExpressionError(ErrorKind.ERROR_OF_SEQUENCE)
            right = stack.pop()
            stack[-1] = _BINARY[token](stack[-1], right)
        elif token in _FUNCTIONS:
            if not stack:
                raise ExpressionError(ErrorKind.ERROR_OF_SEQUENCE)
            stack[-1] = _FUNCTIONS[token](stack[-1])
        else:
            raise ExpressionError(ErrorKind.UNKNOWN_SYMBOL)
    if not stack:
        raise ExpressionError(ErrorKind.ERROR_OF_SEQUENCE)
    return stack[-1]


def evaluate(expression: str, x: float = 0.0) -> float:
    """Parse and evaluate an infix ``expression`` with ``x`` bound to the variable."""
    return evaluate_rpn(to_rpn(expression), x)