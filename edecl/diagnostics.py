"""Diagnostics reported while processing source text."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from edecl.spans import FullSpan, Span


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    BUG = "bug"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"


class LabelStyle(enum.Enum):
    """Whether a hint marks the main cause or extra context."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class Hint:
    """A message attached to a location in the source."""

    message: str
    span: FullSpan
    style: LabelStyle

    @classmethod
    def primary(cls, message: str, span: FullSpan) -> Hint:
        return cls(message, span, LabelStyle.PRIMARY)

    @classmethod
    def secondary(cls, message: str, span: FullSpan) -> Hint:
        return cls(message, span, LabelStyle.SECONDARY)


class _Location(NamedTuple):
    line: int
    column: int
    text: str
    width: int


def _locate(source: str, span: Span) -> _Location:
    start = min(span.start, len(source))
    line_start = source.rfind("\n", 0, start) + 1
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)
    text = source[line_start:line_end].rstrip("\r")
    width = max(1, min(span.end, line_start + len(text)) - start)
    return _Location(
        line=source.count("\n", 0, start) + 1,
        column=start - line_start + 1,
        text=text,
        width=width,
    )


class Diagnostic(Exception):
    """A reportable problem with a code, a message and located hints."""

    def __init__(
        self,
        severity: Severity,
        code: str,
        message: str,
        hints: Iterable[Hint] = (),
    ) -> None:
        super().__init__(message)
        self.severity = severity
        self.code = code
        self.message = message
        self.hints = tuple(hints)

    @classmethod
    def error(cls, code: str, message: str, hints: Iterable[Hint] = ()) -> Diagnostic:
        """An error-level diagnostic."""
        return cls(Severity.ERROR, code, message, hints)

    def _key(self) -> tuple:
        return (self.severity, self.code, self.message, self.hints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Diagnostic(severity={self.severity!r}, code={self.code!r}, "
            f"message={self.message!r}, hints={list(self.hints)!r})"
        )

    def __str__(self) -> str:
        return f"{self.severity.value}[{self.code}]: {self.message}"

    def render(self, source: str, name: str = "<input>") -> str:
        """Render the diagnostic with each hint shown under its source line."""
        located = [(hint, _locate(source, hint.span.span)) for hint in self.hints]
        width = max((len(str(loc.line)) for _, loc in located), default=1)
        pad = " " * width
        out = [str(self)]
        for hint, loc in located:
            marker = "^" if hint.style is LabelStyle.PRIMARY else "-"
            indent = "".join("\t" if c == "\t" else " " for c in loc.text[: loc.column - 1])
            out.append(f"{pad}--> {name}:{loc.line}:{loc.column}")
            out.append(f"{pad} |")
            out.append(f"{loc.line:>{width}} | {loc.text}")
            out.append(f"{pad} | {indent}{marker * loc.width} {hint.message}".rstrip())
        return "\n".join(out) + "\n"