"""Splitting of calculator expressions into checked tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "ErrorKind",
    "ExpressionError",
    "TokenKind",
    "Token",
    "FUNCTION_SYMBOLS",
    "tokenize",
    "normalize",
]


class ErrorKind(enum.Enum):
    """Kinds of malformed input; the value is the name shown to the user."""

    EMPTY_STRING = "EMPTY_STRING"
    NOT_MATCHED_ALPHA_LEKSEMA = "NOT_MATCHED_ALPHA_LEKSEMA"
    ERROR_OF_SEQUENCE = "ERROR_OF_SEQUENCE"
    MORE_THAN_ONE_POINT = "MORE_THEN_ONE_POINT"
    NO_OPEN_BRACKET = "NO_OPEN_BRACKET"
    NO_CLOSE_BRACKET = "NO_CLOSE_BRACKET"
    UNKNOWN_SYMBOL = "UNKNOWN_SYMBOL"


class ExpressionError(ValueError):
    """Raised when an expression cannot be read."""

    def __init__(self, kind: ErrorKind, position: int | None = None) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.position = position


class TokenKind(enum.Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    FUNCTION = "function"
    BINARY_OPERATOR = "binary_operator"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"


@dataclass(frozen=True)
class Token:
    """One lexeme; ``symbol`` is its compact form (number text or one character)."""

    kind: TokenKind
    symbol: str

    def __str__(self) -> str:
        return self.symbol


# Names recognised in input, in matching order, with their one-letter symbols.
FUNCTION_SYMBOLS: dict[str, str] = {
    "x": "x",
    "mod": "m",
    "cos": "c",
    "sin": "s",
    "tan": "t",
    "acos": "a",
    "asin": "i",
    "atan": "n",
    "sqrt": "q",
    "ln": "l",
    "log": "g",
}

_DIGITS = "0123456789"
_NUMBER_CHARS = _DIGITS + "."
_OPERATORS = "+-*/()^"
_WHITESPACE = " \t"


class _Entity(enum.IntEnum):
    BINARY = 0
    OPEN = 1
    CLOSE = 2
    FUNCTION = 3
    NUMBER = 4
    FIRST = 5


# For each preceding entity, the entities allowed to follow it.
_FOLLOWERS: dict[_Entity, frozenset[_Entity]] = {
    _Entity.BINARY: frozenset({_Entity.OPEN, _Entity.FUNCTION, _Entity.NUMBER}),
    _Entity.OPEN: frozenset(
        {_Entity.BINARY, _Entity.OPEN, _Entity.FUNCTION, _Entity.NUMBER}
    ),
    _Entity.CLOSE: frozenset({_Entity.BINARY, _Entity.CLOSE}),
    _Entity.FUNCTION: frozenset({_Entity.OPEN}),
    _Entity.NUMBER: frozenset({_Entity.BINARY, _Entity.CLOSE}),
    _Entity.FIRST: frozenset(
        {_Entity.BINARY, _Entity.OPEN, _Entity.FUNCTION, _Entity.NUMBER}
    ),
}

_LAST_ALLOWED = frozenset({_Entity.CLOSE, _Entity.NUMBER})


def _follow(previous: _Entity, current: _Entity, position: int) -> _Entity:
    if current not in _FOLLOWERS[previous]:
        raise ExpressionError(ErrorKind.ERROR_OF_SEQUENCE, position)
    return current


def _read_number(expression: str, pos: int) -> tuple[str, int]:
    end = pos
    while end < len(expression) and expression[end] in _NUMBER_CHARS:
        end += 1
    return expression[pos:end], end


def _match_name(expression: str, pos: int) -> tuple[str, str]:
    for name, symbol in FUNCTION_SYMBOLS.items():
        if expression[pos : pos + len(name)].lower() == name:
            return name, symbol
    raise ExpressionError(ErrorKind.NOT_MATCHED_ALPHA_LEKSEMA, pos)


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` into tokens, checking the order they come in.

    Raises ExpressionError on empty input, unknown names or symbols,
    numbers with more than one point and tokens out of sequence.
    """
    if not expression.strip(_WHITESPACE):
        raise ExpressionError(ErrorKind.EMPTY_STRING, 0)

    tokens: list[Token] = []
    state = _Entity.FIRST
    pos = 0
    while pos < len(expression):
        ch = expression[pos]
        if ch in _WHITESPACE:
            pos += 1
        elif ch in _NUMBER_CHARS:
            text, end = _read_number(expression, pos)
            state = _follow(state, _Entity.NUMBER, pos)
            if text.count(".") > 1:
                raise ExpressionError(ErrorKind.MORE_THAN_ONE_POINT, pos)
            if text.startswith("."):
                text = "0" + text
            tokens.append(Token(TokenKind.NUMBER, text))
            pos = end
        elif ch.isascii() and ch.isalpha():
            name, symbol = _match_name(expression, pos)
            if name == "x":
                kind, entity = TokenKind.VARIABLE, _Entity.NUMBER
            elif name == "mod":
                kind, entity = TokenKind.BINARY_OPERATOR, _Entity.BINARY
            else:
                kind, entity = TokenKind.FUNCTION, _Entity.FUNCTION
            state = _follow(state, entity, pos)
            tokens.append(Token(kind, symbol))
            pos += len(name)
        elif ch in _OPERATORS:
            if ch == "(":
                kind, entity = TokenKind.OPEN_BRACKET, _Entity.OPEN
            elif ch == ")":
                kind, entity = TokenKind.CLOSE_BRACKET, _Entity.CLOSE
            else:
                kind, entity = TokenKind.BINARY_OPERATOR, _Entity.BINARY
            state = _follow(state, entity, pos)
            if ch in "+-":
                # A sign may start a new operand, as at the very beginning.
                state = _Entity.FIRST
            tokens.append(Token(kind, ch))
            pos += 1
        else:
            raise ExpressionError(ErrorKind.UNKNOWN_SYMBOL, pos)

    if state not in _LAST_ALLOWED:
        raise ExpressionError(ErrorKind.ERROR_OF_SEQUENCE, len(expression))
    return tokens


def normalize(expression: str) -> str:
    """Return the tokens of ``expression`` in compact form, separated by spaces."""
    return " ".join(token.symbol for token in tokenize(expression))