"""A two-ended parser that splits a Unix path into its components.

Parsing does a small amount of normalisation:

* Repeated separators are ignored, so ``a/b`` and ``a//b`` both give
  ``a`` and ``b``.
* ``.`` entries are dropped, except at the very start of the path:
  ``a/./b``, ``a/b/``, ``a/b/.`` and ``a/b`` all give ``a`` and ``b``,
  while ``./a/b`` starts with a current-directory component.
* A trailing separator is dropped, so ``/a/b`` and ``/a/b/`` match.

Nothing else is normalised; ``a/c`` and ``a/b/../c`` stay distinct, since
``b`` may be a symbolic link.
"""

from __future__ import annotations

from .component import SEPARATOR_BYTES, UnixComponent
from .scan import (
    ParseError,
    cur_dir,
    move_back_to_next,
    move_front_to_next,
    normal,
    parent_dir,
    root_dir,
)

__all__ = ["Parser"]

_FRONT_AT_BEGINNING = (root_dir, parent_dir, cur_dir, normal)
_FRONT_LATER = (parent_dir, normal)
_BACK_ENTRY = (parent_dir, normal)


def _first_match(scanners, data: bytes) -> tuple[bytes, UnixComponent]:
    for scanner in scanners:
        try:
            return scanner(data)
        except ParseError:
            continue
    raise ParseError("no path component found")


def _matches(scanner, data: bytes) -> bool:
    try:
        scanner(data)
    except ParseError:
        return False
    return True


def _parse_front(at_beginning: bool, data: bytes) -> tuple[bytes, UnixComponent]:
    scanners = _FRONT_AT_BEGINNING if at_beginning else _FRONT_LATER
    rest, component = _first_match(scanners, data)
    return move_front_to_next(rest), component


def _parse_back(at_beginning: bool, data: bytes) -> tuple[bytes, UnixComponent]:
    original = data
    data = move_back_to_next(data)

    # Only separators and '.' entries were left: the front parser can tell
    # a root directory from a leading current directory.
    if at_beginning and not data:
        _, component = _parse_front(at_beginning, original)
        return b"", component

    cut = data.rfind(SEPARATOR_BYTES) + 1
    before, entry = data[:cut], data[cut:]
    if not entry:
        raise ParseError("no path component found")

    rest, component = _first_match(_BACK_ENTRY, entry)
    if rest:
        raise ParseError("path component was not fully consumed")

    if at_beginning and (_matches(root_dir, before) or _matches(cur_dir, before)):
        trimmed = move_back_to_next(before)
        # Keep a lone leading root or '.' so it can still be yielded.
        before = before[:1] if not trimmed else trimmed
    else:
        before = move_back_to_next(before)

    return before, component


class Parser:
    """Yields the components of a Unix path from either end."""

    __slots__ = ("_input", "_at_beginning")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise TypeError(f"expected bytes, not {type(data).__name__}")
        self._input = data
        self._at_beginning = True

    def remaining(self) -> bytes:
        """Return the part of the path not yet parsed."""
        return self._input

    def next_front(self) -> UnixComponent:
        """Parse the next component from the front; raises ParseError when none is left."""
        rest, component = _parse_front(self._at_beginning, self._input)
        self._input = rest
        self._at_beginning = False
        return component

    def next_back(self) -> UnixComponent:
        """Parse the next component from the back; raises ParseError when none is left."""
        rest, component = _parse_back(self._at_beginning, self._input)
        self._input = rest
        return component

    def __copy__(self) -> Parser:
        clone = Parser(self._input)
        clone._at_beginning = self._at_beginning
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parser):
            return NotImplemented
        return (self._input, self._at_beginning) == (other._input, other._at_beginning)

    def __hash__(self) -> int:
        return hash((self._input, self._at_beginning))

    def __repr__(self) -> str:
        return f"Parser({self._input!r}, at_beginning={self._at_beginning})"