"""Operations that define how Unix paths are joined, checked and hashed."""

from __future__ import annotations

from typing import TypeVar

from .component import DISALLOWED_FILENAME_BYTES, SEPARATOR_BYTES, CURRENT_DIR
from .components import UnixComponents

__all__ = [
    "CheckedPathError",
    "UnexpectedRootError",
    "PathTraversalError",
    "InvalidFilenameError",
    "label",
    "components",
    "path_hash",
    "push",
    "push_checked",
]

PathT = TypeVar("PathT", bytes, str)


class CheckedPathError(ValueError):
    """Raised when a path pushed onto another would break the checked rules."""


class UnexpectedRootError(CheckedPathError):
    """The pushed path holds a root directory component."""


class PathTraversalError(CheckedPathError):
    """The pushed path climbs above the path it is pushed onto."""


class InvalidFilenameError(CheckedPathError):
    """The pushed path holds a name with disallowed bytes."""


def _to_bytes(path: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(path, str):
        return path.encode("utf-8")
    if isinstance(path, bytes):
        return path
    if isinstance(path, (bytearray, memoryview)):
        return bytes(path)
    raise TypeError(f"expected bytes or str, not {type(path).__name__}")


def _check_same_kind(current_path: object, path: object) -> None:
    if isinstance(current_path, str) != isinstance(path, str):
        raise TypeError("cannot mix bytes and str paths")
    if not isinstance(current_path, (bytes, str)):
        raise TypeError(f"expected bytes or str, not {type(current_path).__name__}")


def label() -> str:
    """Return the name of this encoding."""
    return "unix"


def components(path: bytes | str) -> UnixComponents:
    """Return an iterator over the components of ``path``."""
    return UnixComponents(path)


def path_hash(path: bytes | str) -> int:
    """Hash ``path`` so that paths with the same components hash alike.

    Repeated separators, a trailing separator and ``.`` entries after the
    first position do not change the hash.
    """
    first, *rest = _to_bytes(path).split(SEPARATOR_BYTES)
    kept = [first] if first else []
    kept.extend(piece for piece in rest if piece and piece != CURRENT_DIR)
    joined = b"".join(kept)
    return hash((joined, len(joined)))


def push(current_path: PathT, path: PathT) -> PathT:
    """Return ``current_path`` extended by ``path``.

    An absolute ``path`` replaces ``current_path``; otherwise the two are
    joined with a single separator.
    """
    _check_same_kind(current_path, path)
    if not path:
        return current_path
    sep = "/" if isinstance(path, str) else SEPARATOR_BYTES
    if components(path).is_absolute():
        return path
    if current_path and not current_path.endswith(sep):
        return current_path + sep + path
    return current_path + path


def push_checked(current_path: PathT, path: PathT) -> PathT:
    """Like :func:`push`, but first check ``path`` is safe to add.

    Raises UnexpectedRootError if ``path`` has a root, InvalidFilenameError
    if a name holds disallowed bytes, and PathTraversalError if ``..``
    entries would climb above ``current_path``.
    """
    _check_same_kind(current_path, path)
    depth = 0
    for component in components(path):
        if component.is_root():
            raise UnexpectedRootError("path has an unexpected root")
        if component.is_parent():
            if depth == 0:
                raise PathTraversalError("path would escape the current path")
            depth -= 1
        elif component.is_normal():
            if any(b in DISALLOWED_FILENAME_BYTES for b in component.name):
                raise InvalidFilenameError(f"invalid file name {component.name!r}")
            depth += 1
    return push(current_path, path)