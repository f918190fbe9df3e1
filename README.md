# unixpath

Parse and combine Unix paths as plain bytes. Nothing here touches the
file system or depends on the platform the code runs on. The rules
follow POSIX path syntax:

- `/` is the only separator, and repeated separators collapse.
- `.` is dropped everywhere except at the very start of a path.
- `..` is kept as written.

## Installing

```
pip install unixpath
```

## Components

```python
from unixpath.components import UnixComponents, parse_component

parts = UnixComponents(b"/tmp/foo/../bar.txt")
print([c.as_bytes() for c in parts])
# [b'/', b'tmp', b'foo', b'..', b'bar.txt']

parts = UnixComponents(b"a/b/c")
print(parts.next_back().as_bytes())   # b'c'
print(parts.as_bytes())               # b'a/b'

print(UnixComponents(b"/etc").is_absolute())   # True
print(parse_component(b"dir/").as_bytes())    # b'dir'
```

`UnixComponents` accepts `bytes` or `str`. `str` is encoded as UTF-8.

It is an iterator that can be used from either end:

- `next()` takes the next component from the front.
- `next_back()` takes the next component from the back, and returns `None` when nothing is left.
- `reversed()` also works from the back.

`as_bytes()` and `as_str()` return the part of the path still to be iterated. `has_root()` and `is_absolute()` report whether that part begins with the root directory.

Two `UnixComponents` compare equal and order by the components they have left. For example, `a/b` and `a//b/.` are equal.

`parse_component` parses its argument as exactly one component. It raises `unixpath.scan.ParseError` when the input holds no component or more than one.

A single component is a frozen `unixpath.component.UnixComponent` tagged with a `ComponentKind`: `ROOT_DIR`, `CUR_DIR`, `PARENT_DIR` or `NORMAL`.

- Build one with `UnixComponent.root()`, `current()`, `parent()` or `normal(name)`.
- It answers `is_root()`, `is_normal()`, `is_parent()`, `is_current()` and `is_valid()`. A normal component holding `/` or a NUL byte is not valid.
- `as_bytes()`, `as_str()`, `len()` and `str()` give its text.
- Components sort as root < current < parent < normal. Normal components sort by their bytes.

The module also defines the constants these rules rest on:

- `SEPARATOR` and `SEPARATOR_BYTES`
- `CURRENT_DIR` and `PARENT_DIR`, with their `_STR` forms
- `DISALLOWED_FILENAME_BYTES` and `DISALLOWED_FILENAME_CHARS`

## Lower-level parsing

`unixpath.parser.Parser` is the two-ended parser behind `UnixComponents`:

- `next_front()` and `next_back()` return one `UnixComponent` each. They raise `ParseError` once the input is used up.
- `remaining()` returns the bytes not yet parsed.

`unixpath.scan` holds the small scanners the parser is built from.

- `root_dir`, `cur_dir`, `parent_dir` and `normal` each return a pair: the input left over and the component found.
- `separator`, `move_front_to_next` and `move_back_to_next` only skip input, and return what is left.
- Each raises `ParseError`, a `ValueError`, when it cannot match.

## Joining paths

```python
from unixpath.encoding import push, push_checked, PathTraversalError

print(push(b"some/path", b"abc"))    # b'some/path/abc'
print(push(b"some/path", b"/abc"))   # b'/abc'

try:
    push_checked(b"/srv/data", b"../../etc/passwd")
except PathTraversalError:
    print("rejected")
```

`push` returns a new path and leaves its arguments unchanged:

- an empty `path` leaves `current_path` as it is;
- an absolute `path` replaces `current_path`;
- otherwise the two are joined with a single `/`.

`push_checked` first checks `path` and raises a subclass of `CheckedPathError`, itself a `ValueError`:

- `UnexpectedRootError` when `path` has a root.
- `InvalidFilenameError` when a name in it holds a disallowed byte.
- `PathTraversalError` when its `..` entries would climb above the path it is pushed onto.

Both functions take two `bytes` or two `str` values and return the same type. Mixing the two raises `TypeError`.

The `encoding` module also provides:

- `label()`, which returns `"unix"`;
- `components(path)`, which returns a `UnixComponents`;
- `path_hash(path)`, which hashes the path's names with separators and non-leading `.` entries left out. Paths that differ only in those hash alike.

## What this package does not do

There is no path object. This package has no type offering parent, file name, extension, normalisation or ancestors. Building such a type on top of these pieces is left to the caller.

Only Unix syntax is handled. Windows paths, drive prefixes and backslash separators are not understood.

Paths are never looked up on disk, and there is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```