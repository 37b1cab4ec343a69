"""Token types produced by the lexer."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Union


class Symbol(enum.Enum):
    """Punctuation and operator symbols."""

    DOT = "."
    COMMA = ","
    SEMICOLON = ";"
    RIGHT_ARROW = "->"
    EQUALS = "="
    PIPE = "|"
    PLUS = "+"
    HYPHEN = "-"
    SLASH = "/"
    ASTERISK = "*"
    CARET = "^"
    LESS_THAN = "<"
    GREATER_THAN = ">"

    def __str__(self) -> str:
        return self.value


class BracketType(enum.Enum):
    """The three kinds of bracket pairs."""

    ROUND = ("(", ")")
    SQUARE = ("[", "]")
    CURLY = ("{", "}")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]


class TokenKind(enum.Enum):
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string literal"
    NUMBER = "number"
    SYMBOL = "symbol"
    OPENING_BRACKET = "opening bracket"
    CLOSING_BRACKET = "closing bracket"


_VALUE_TYPES = {
    TokenKind.IDENTIFIER: str,
    TokenKind.STRING_LITERAL: str,
    TokenKind.NUMBER: str,
    TokenKind.SYMBOL: Symbol,
    TokenKind.OPENING_BRACKET: BracketType,
    TokenKind.CLOSING_BRACKET: BracketType,
}

_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
}


def _escape_debug(text: str) -> str:
    return "".join(
        _ESCAPES.get(c) or (c if c.isprintable() else f"\\u{{{ord(c):x}}}") for c in text
    )


@dataclass(frozen=True, repr=False)
class Token:
    """A lexical token: a kind and the value that goes with it."""

    kind: TokenKind
    value: Union[str, Symbol, BracketType]

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.kind]
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.kind.value} token needs a {expected.__name__}, "
                f"got {type(self.value).__name__}"
            )

    @classmethod
    def identifier(cls, name: str) -> Token:
        return cls(TokenKind.IDENTIFIER, name)

    @classmethod
    def string_literal(cls, value: str) -> Token:
        return cls(TokenKind.STRING_LITERAL, value)

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def symbol(cls, symbol: Symbol) -> Token:
        return cls(TokenKind.SYMBOL, symbol)

    @classmethod
    def opening(cls, bracket: BracketType) -> Token:
        return cls(TokenKind.OPENING_BRACKET, bracket)

    @classmethod
    def closing(cls, bracket: BracketType) -> Token:
        return cls(TokenKind.CLOSING_BRACKET, bracket)

    def __str__(self) -> str:
        if self.kind is TokenKind.STRING_LITERAL:
            return f'"{_escape_debug(self.value)}"'
        if self.kind is TokenKind.OPENING_BRACKET:
            return self.value.opening
        if self.kind is TokenKind.CLOSING_BRACKET:
            return self.value.closing
        return str(self.value)

    def __repr__(self) -> str:
        if self.kind in (TokenKind.OPENING_BRACKET, TokenKind.CLOSING_BRACKET):
            return f"Token(`{self}`)"
        return f"Token({self})"


_FIXED = {
    **{symbol.value: Token.symbol(symbol) for symbol in Symbol},
    **{bracket.opening: Token.opening(bracket) for bracket in BracketType},
    **{bracket.closing: Token.closing(bracket) for bracket in BracketType},
}

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
_NUMBER = re.compile(r"[0-9][0-9_]*(\.[0-9_]*)?([eE][+-]?[0-9_]+)?\Z")


def token(text: Union[str, int, float]) -> Token:
    """Build a token from its spelling.

    Symbols and brackets map to their tokens, names to identifiers, numerals
    (or int and float values) to numbers, and double-quoted text to string
    literals holding the text between the quotes.
    """
    if isinstance(text, bool):
        raise TypeError("a bool is not a token")
    if isinstance(text, (int, float)):
        spelled = str(text)
        if not _NUMBER.match(spelled):
            raise ValueError(f"{text!r} is not a number literal")
        return Token.number(spelled)
    if not isinstance(text, str):
        raise TypeError(f"cannot build a token from {type(text).__name__}")
    fixed = _FIXED.get(text)
    if fixed is not None:
        return fixed
    if _IDENT.match(text):
        return Token.identifier(text)
    if _NUMBER.match(text):
        return Token.number(text)
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return Token.string_literal(text[1:-1])
    raise ValueError(f"{text!r} is not a token")