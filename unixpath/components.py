"""Iteration over the components of a Unix path."""

from __future__ import annotations

import copy
import functools
from typing import Iterator

from .component import UnixComponent
from .parser import Parser
from .scan import ParseError

__all__ = ["UnixComponents", "parse_component"]


def _to_bytes(path: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(path, str):
        return path.encode("utf-8")
    if isinstance(path, bytes):
        return path
    if isinstance(path, (bytearray, memoryview)):
        return bytes(path)
    raise TypeError(f"expected bytes or str, not {type(path).__name__}")


@functools.total_ordering
class UnixComponents:
    """Iterator over the components of a Unix path, usable from either end.

    Components compare by the components that remain to be iterated, so
    ``a/b`` and ``a//b/.`` are equal.
    """

    __slots__ = ("_parser",)

    def __init__(self, path: bytes | bytearray | memoryview | str) -> None:
        self._parser = Parser(_to_bytes(path))

    def __iter__(self) -> Iterator[UnixComponent]:
        return self

    def __next__(self) -> UnixComponent:
        try:
            return self._parser.next_front()
        except ParseError:
            raise StopIteration from None

    def next_back(self) -> UnixComponent | None:
        """Return the next component from the back, or None when none is left."""
        try:
            return self._parser.next_back()
        except ParseError:
            return None

    def __reversed__(self) -> Iterator[UnixComponent]:
        while (component := self.next_back()) is not None:
            yield component

    def as_bytes(self) -> bytes:
        """Return the part of the path left to iterate."""
        return self._parser.remaining()

    def as_str(self) -> str:
        """Return the part of the path left to iterate as text."""
        return self.as_bytes().decode("utf-8")

    def is_absolute(self) -> bool:
        """Return True if the remaining path is absolute; on Unix this means it has a root."""
        return self.has_root()

    def has_root(self) -> bool:
        """Return True if the remaining path begins with the root directory."""
        probe = copy.copy(self._parser)
        try:
            return probe.next_front().is_root()
        except ParseError:
            return False

    def __copy__(self) -> UnixComponents:
        clone = UnixComponents.__new__(UnixComponents)
        clone._parser = copy.copy(self._parser)
        return clone

    def _fresh(self) -> list[UnixComponent]:
        return list(UnixComponents(self.as_bytes()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnixComponents):
            return NotImplemented
        return self._fresh() == other._fresh()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UnixComponents):
            return NotImplemented
        return self._fresh() < other._fresh()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = [str(c) for c in copy.copy(self)]
        return f"UnixComponents({names!r})"


def parse_component(path: bytes | bytearray | memoryview | str) -> UnixComponent:
    """Parse ``path`` as exactly one component, raising ParseError otherwise."""
    components = UnixComponents(path)
    component = next(components, None)
    if component is None:
        raise ParseError("no component found")
    if next(components, None) is not None:
        raise ParseError("found more than one component")
    return component