"""Source positions and values tagged with them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Span:
    """A half-open range ``[start, end)`` of positions in a source text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"span start must not be negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"span end {self.end} lies before its start {self.start}")

    @classmethod
    def at(cls, index: int) -> Span:
        """An empty span at ``index``."""
        return cls(index, index)

    def with_len(self, length: int) -> Span:
        """A span with the same start and the given length."""
        return Span(self.start, self.start + length)

    def range(self) -> range:
        """The positions covered by this span."""
        return range(self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class FullSpan:
    """A span together with the file it belongs to."""

    span: Span
    file_id: int


@dataclass(frozen=True)
class PartialSpanned(Generic[T]):
    """A value tagged with a span whose file is not yet known."""

    data: T
    span: Span

    def map(self, func: Callable[[T], U]) -> PartialSpanned[U]:
        """Apply ``func`` to the value, keeping the span."""
        return PartialSpanned(func(self.data), self.span)

    def with_file(self, file_id: int) -> Spanned[T]:
        """Attach a file id, giving a fully spanned value."""
        return Spanned(self.data, FullSpan(self.span, file_id))


@dataclass(frozen=True)
class Spanned(Generic[T]):
    """A value tagged with a span in a known file."""

    data: T
    span: FullSpan

    def map(self, func: Callable[[T], U]) -> Spanned[U]:
        """Apply ``func`` to the value, keeping the span."""
        return Spanned(func(self.data), self.span)