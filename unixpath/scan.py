"""Small scanners that recognise the pieces of a Unix path in a byte string.

Each scanner looks at the front (or, for ``move_back_to_next``, the back) of
its input. Scanners that recognise a component return a pair of the input
left over and the component found. Scanners that only skip input return what
is left. A scanner that cannot match raises :class:`ParseError`.
"""

from __future__ import annotations

from .component import (
    CURRENT_DIR,
    PARENT_DIR,
    SEPARATOR_BYTES,
    UnixComponent,
)

__all__ = [
    "ParseError",
    "move_front_to_next",
    "move_back_to_next",
    "root_dir",
    "cur_dir",
    "parent_dir",
    "normal",
    "separator",
]

_SEP = SEPARATOR_BYTES[0]


class ParseError(ValueError):
    """Raised when input does not hold the path piece that was expected."""


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes, not {type(data).__name__}")


def _dot_entry(data: bytes, marker: bytes) -> bytes:
    """Match ``marker`` when it ends the input or is followed by a separator."""
    if not data.startswith(marker):
        raise ParseError(f"expected {marker!r}")
    rest = data[len(marker):]
    if rest and rest[0] != _SEP:
        raise ParseError(f"{marker!r} is followed by more than a separator")
    return rest


def separator(data: bytes) -> bytes:
    """Consume one separator from the front, returning what is left."""
    data = _as_bytes(data)
    if not data.startswith(SEPARATOR_BYTES):
        raise ParseError("expected a separator")
    return data[1:]


def root_dir(data: bytes) -> tuple[bytes, UnixComponent]:
    """Recognise the root directory at the front of ``data``."""
    return separator(data), UnixComponent.root()


def cur_dir(data: bytes) -> tuple[bytes, UnixComponent]:
    """Recognise ``.`` at the front, when it ends the input or precedes a separator."""
    return _dot_entry(_as_bytes(data), CURRENT_DIR), UnixComponent.current()


def parent_dir(data: bytes) -> tuple[bytes, UnixComponent]:
    """Recognise ``..`` at the front, when it ends the input or precedes a separator."""
    return _dot_entry(_as_bytes(data), PARENT_DIR), UnixComponent.parent()


def normal(data: bytes) -> tuple[bytes, UnixComponent]:
    """Recognise a non-empty name running up to the next separator."""
    data = _as_bytes(data)
    end = data.find(SEPARATOR_BYTES)
    if end == -1:
        end = len(data)
    if end == 0:
        raise ParseError("expected a name")
    return data[end:], UnixComponent.normal(data[:end])


def move_front_to_next(data: bytes) -> bytes:
    """Skip separators and ``.`` entries at the front, returning what is left."""
    data = _as_bytes(data)
    while data:
        try:
            data = separator(data)
            continue
        except ParseError:
            pass
        try:
            data, _ = cur_dir(data)
        except ParseError:
            break
    return data


def move_back_to_next(data: bytes) -> bytes:
    """Strip trailing separators and ``.`` entries, returning what is left."""
    data = _as_bytes(data)
    while data:
        data = data.rstrip(SEPARATOR_BYTES)
        if not data.endswith(CURRENT_DIR):
            break
        before = data[: -len(CURRENT_DIR)]
        if before.endswith(SEPARATOR_BYTES) or not before:
            data = before
        else:
            break
    return data