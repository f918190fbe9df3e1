"""Unix path components and the constants that define them."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

SEPARATOR = "/"
"""The separator of path components, as text."""

SEPARATOR_BYTES = b"/"
"""The separator of path components, as bytes."""

PARENT_DIR = b".."
"""Component value that names the parent directory."""

PARENT_DIR_STR = ".."
"""Component value that names the parent directory, as text."""

CURRENT_DIR = b"."
"""Component value that names the current directory."""

CURRENT_DIR_STR = "."
"""Component value that names the current directory, as text."""

DISALLOWED_FILENAME_BYTES = b"/\0"
"""Bytes that may not appear in a file or directory name."""

DISALLOWED_FILENAME_CHARS = ("/", "\0")
"""Characters that may not appear in a file or directory name."""


class ComponentKind(enum.IntEnum):
    """The kinds of Unix path component, in their sort order."""

    ROOT_DIR = 0
    CUR_DIR = 1
    PARENT_DIR = 2
    NORMAL = 3


_FIXED_BYTES = {
    ComponentKind.ROOT_DIR: SEPARATOR_BYTES,
    ComponentKind.CUR_DIR: CURRENT_DIR,
    ComponentKind.PARENT_DIR: PARENT_DIR,
}


@functools.total_ordering
@dataclass(frozen=True)
class UnixComponent:
    """A single component of a Unix path.

    Components order as root < current < parent < normal, with normal
    components ordered by their bytes.
    """

    kind: ComponentKind
    name: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ComponentKind):
            raise TypeError(f"kind must be a ComponentKind, not {type(self.kind).__name__}")
        if not isinstance(self.name, bytes):
            raise TypeError(f"name must be bytes, not {type(self.name).__name__}")
        if self.kind is not ComponentKind.NORMAL and self.name:
            raise ValueError(f"{self.kind.name} component carries no name")

    @classmethod
    def root(cls) -> UnixComponent:
        """Return the root directory component."""
        return cls(ComponentKind.ROOT_DIR)

    @classmethod
    def current(cls) -> UnixComponent:
        """Return the current directory component."""
        return cls(ComponentKind.CUR_DIR)

    @classmethod
    def parent(cls) -> UnixComponent:
        """Return the parent directory component."""
        return cls(ComponentKind.PARENT_DIR)

    @classmethod
    def normal(cls, name: bytes | str) -> UnixComponent:
        """Return a normal component holding ``name`` (text is UTF-8 encoded)."""
        if isinstance(name, str):
            name = name.encode("utf-8")
        elif isinstance(name, (bytearray, memoryview)):
            name = bytes(name)
        elif not isinstance(name, bytes):
            raise TypeError(f"name must be bytes or str, not {type(name).__name__}")
        return cls(ComponentKind.NORMAL, name)

    def as_bytes(self) -> bytes:
        """Return the bytes this component stands for in a path."""
        if self.kind is ComponentKind.NORMAL:
            return self.name
        return _FIXED_BYTES[self.kind]

    def as_str(self) -> str:
        """Return the component as text; raises UnicodeDecodeError if not UTF-8."""
        return self.as_bytes().decode("utf-8")

    def is_root(self) -> bool:
        """Return True if this is the root directory component."""
        return self.kind is ComponentKind.ROOT_DIR

    def is_normal(self) -> bool:
        """Return True if this is a normal component."""
        return self.kind is ComponentKind.NORMAL

    def is_parent(self) -> bool:
        """Return True if this is the parent directory component."""
        return self.kind is ComponentKind.PARENT_DIR

    def is_current(self) -> bool:
        """Return True if this is the current directory component."""
        return self.kind is ComponentKind.CUR_DIR

    def is_valid(self) -> bool:
        """Return False only for a normal component holding disallowed bytes."""
        if self.kind is not ComponentKind.NORMAL:
            return True
        return not any(b in DISALLOWED_FILENAME_BYTES for b in self.name)

    def __len__(self) -> int:
        return len(self.as_bytes())

    def __str__(self) -> str:
        return self.as_bytes().decode("utf-8", errors="replace")

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def _sort_key(self) -> tuple[int, bytes]:
        return (int(self.kind), self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UnixComponent):
            return NotImplemented
        return self._sort_key() < other._sort_key()