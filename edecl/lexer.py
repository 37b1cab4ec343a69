"""Turn source text into a stream of spanned tokens."""

from __future__ import annotations

import re
from typing import Callable, Iterator, List, Optional

from edecl.diagnostics import Diagnostic, Hint
from edecl.spans import FullSpan, PartialSpanned, Span
from edecl.tokens import BracketType, Symbol, Token

_WHITESPACE = frozenset(" \t\n\r\x0c")

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_SINGLE_CHAR_TOKENS = {
    **{s.value: Token.symbol(s) for s in Symbol if len(s.value) == 1},
    **{b.opening: Token.opening(b) for b in BracketType},
    **{b.closing: Token.closing(b) for b in BracketType},
}

_RIGHT_ARROW = Token.symbol(Symbol.RIGHT_ARROW)

_STRING_ESCAPES = {
    "r": "\r",
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_CHAR_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
}


def _char_debug(char: str) -> str:
    escaped = _CHAR_ESCAPES.get(char)
    if escaped is None:
        escaped = char if char.isprintable() else f"\\u{{{ord(char):x}}}"
    return f"'{escaped}'"


def unexpected_character(char: str, span: FullSpan) -> Diagnostic:
    """The error for a character that starts no token."""
    return Diagnostic.error(
        "EL0001",
        f"Unexpected character {_char_debug(char)}",
        [Hint.primary("character here", span)],
    )


def invalid_escape(char: str, span: FullSpan) -> Diagnostic:
    """The error for an unknown escape sequence in a string literal."""
    return Diagnostic.error(
        "EL0002",
        f'Invalid escape sequence "\\{char}"',
        [Hint.primary("here", span)],
    )


def no_end_quote(span: FullSpan) -> Diagnostic:
    """The error for a string literal that is never closed."""
    return Diagnostic.error(
        "EL0003",
        "No end quote found for string literal",
        [Hint.primary("here", span)],
    )


class Lexer:
    """An iterator over the tokens of a source text.

    Each item is a token tagged with its span. A lexical error is raised as
    a :class:`Diagnostic`; the lexer is exhausted afterwards.
    """

    def __init__(self, src: str, file_id: int = 0) -> None:
        self._src = src
        self._file_id = file_id
        self._pos = 0
        self._failed = False

    def __repr__(self) -> str:
        return f"Lexer(file_id={self._file_id!r}, position={self._pos!r})"

    def __iter__(self) -> Iterator[PartialSpanned[Token]]:
        return self

    def __next__(self) -> PartialSpanned[Token]:
        if self._failed:
            raise StopIteration
        src = self._src
        while self._pos < len(src) and src[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(src):
            raise StopIteration

        start = self._pos
        rules: List[Callable[[], Optional[Token]]] = [
            self._lex_identifier,
            self._lex_symbol,
            self._lex_string_literal,
        ]
        try:
            tok = next((t for t in (rule() for rule in rules) if t is not None), None)
            if tok is None:
                raise unexpected_character(src[start], self._span_at(start))
        except Diagnostic:
            self._failed = True
            raise
        return PartialSpanned(tok, Span(start, self._pos))

    def _full_span(self, start: int, end: int) -> FullSpan:
        return FullSpan(Span(start, end), self._file_id)

    def _span_at(self, index: int) -> FullSpan:
        return self._full_span(index, index + 1)

    def _lex_identifier(self) -> Optional[Token]:
        match = _IDENTIFIER.match(self._src, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return Token.identifier(match.group())

    def _lex_symbol(self) -> Optional[Token]:
        if self._src.startswith("->", self._pos):
            self._pos += 2
            return _RIGHT_ARROW
        tok = _SINGLE_CHAR_TOKENS.get(self._src[self._pos])
        if tok is not None:
            self._pos += 1
        return tok

    def _lex_string_literal(self) -> Optional[Token]:
        src = self._src
        start = self._pos
        if src[start] != '"':
            return None

        parts: List[str] = []
        i = start + 1
        while i < len(src):
            char = src[i]
            if char == "\\":
                if i + 1 >= len(src):
                    break
                escaped = src[i + 1]
                i += 2
                if escaped == "\n":
                    continue
                replacement = _STRING_ESCAPES.get(escaped)
                if replacement is None:
                    self._pos = i
                    raise invalid_escape(escaped, self._span_at(i - 1))
                parts.append(replacement)
            elif char == '"':
                self._pos = i + 1
                return Token.string_literal("".join(parts))
            elif char == "\n":
                self._pos = i + 1
                raise no_end_quote(self._full_span(start, i))
            else:
                parts.append(char)
                i += 1

        self._pos = len(src)
        raise no_end_quote(self._full_span(start, len(src)))


def tokenize(src: str, file_id: int = 0) -> List[PartialSpanned[Token]]:
    """Lex the whole of ``src``, raising the first error found."""
    return list(Lexer(src, file_id))