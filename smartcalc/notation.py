"""Conversion of calculator expressions to reverse Polish notation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .lexer import ErrorKind, ExpressionError, Token, TokenKind, tokenize

__all__ = ["UNARY_MINUS", "to_rpn", "to_rpn_string"]

UNARY_MINUS = "~"

_LOW = 0
_MID = 1
_BRACKET = 3
_POWER = 94

_PRIORITY: dict[str, int] = {
    "+": _LOW,
    "-": _LOW,
    "m": _LOW,
    "*": _MID,
    "/": _MID,
    "^": _POWER,
}

_OPERATOR_SYMBOLS = frozenset("+-*/()^m")


class _Assoc(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    PREFIX = "prefix"


@dataclass(frozen=True)
class _Pending:
    """An operator, function or bracket waiting on the stack."""

    symbol: str
    priority: int
    assoc: _Assoc

    @property
    def is_named(self) -> bool:
        return self.symbol.isalpha()

    @property
    def is_operator(self) -> bool:
        return self.symbol in _OPERATOR_SYMBOLS


class _Converter:
    """Shunting-yard conversion of a token stream."""

    def __init__(self) -> None:
        self.output: list[str] = []
        self.stack: list[_Pending] = []
        self.operands = 0

    def _emit_top(self) -> None:
        self.output.append(self.stack.pop().symbol)

    def feed(self, token: Token) -> None:
        symbol = token.symbol
        if token.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
            self.output.append(symbol)
            self.operands += 1
            while self.stack and self.stack[-1].assoc is _Assoc.PREFIX:
                self._emit_top()
        elif token.kind is TokenKind.FUNCTION:
            self.stack.append(_Pending(symbol, _LOW, _Assoc.LEFT))
        elif symbol in "+-" and self.operands == 0:
            if symbol == "-":
                self.stack.append(_Pending(UNARY_MINUS, _LOW, _Assoc.PREFIX))
        elif token.kind is TokenKind.OPEN_BRACKET:
            self.stack.append(_Pending(symbol, _BRACKET, _Assoc.LEFT))
            self.operands = 0
        elif token.kind is TokenKind.CLOSE_BRACKET:
            self._close_bracket()
        else:
            self._push_binary(symbol)

    def _close_bracket(self) -> None:
        while self.stack and self.stack[-1].symbol != "(":
            self._emit_top()
        if not self.stack:
            raise ExpressionError(ErrorKind.NO_OPEN_BRACKET)
        self.stack.pop()
        while self.stack and self.stack[-1].symbol == UNARY_MINUS:
            self._emit_top()

    def _push_binary(self, symbol: str) -> None:
        priority = _PRIORITY[symbol]
        assoc = _Assoc.RIGHT if symbol == "^" else _Assoc.LEFT
        stack = self.stack
        if not (assoc is _Assoc.RIGHT and stack and stack[-1].assoc is _Assoc.RIGHT):
            while stack and stack[-1].is_named:
                self._emit_top()
            while (
                stack
                and stack[-1].is_operator
                and stack[-1].priority >= priority
                and stack[-1].priority != _BRACKET
            ):
                self._emit_top()
            while (
                stack
                and stack[-1].assoc is _Assoc.LEFT
                and stack[-1].priority == priority
            ):
                self._emit_top()
        stack.append(_Pending(symbol, priority, assoc))
        self.operands = 0

    def finish(self) -> list[str]:
        if any(item.symbol == "(" for item in self.stack):
            raise ExpressionError(ErrorKind.NO_CLOSE_BRACKET)
        while self.stack:
            self._emit_top()
        return self.output


def to_rpn(expression: str) -> list[str]:
    """Return the tokens of ``expression`` in reverse Polish order.

    Functions and ``mod`` appear as their one-letter symbols and unary
    minus as ``~``. Raises ExpressionError for malformed input.
    """
    converter = _Converter()
    for token in tokenize(expression):
        converter.feed(token)
    return converter.finish()


def to_rpn_string(expression: str) -> str:
    """Return the reverse Polish form of ``expression`` as a space-separated string."""
    return " ".join(to_rpn(expression))