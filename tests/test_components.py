import copy

import pytest

from unixpath.component import UnixComponent
from unixpath.components import UnixComponents, parse_component
from unixpath.scan import ParseError


def test_as_bytes_tracks_remaining_path():
    components = UnixComponents(b"/tmp/foo/bar.txt")
    next(components)
    next(components)
    assert components.as_bytes() == b"foo/bar.txt"
    assert components.as_str() == "foo/bar.txt"


def test_component_listing_matches_documented_example():
    names = [c.as_bytes() for c in UnixComponents(b"/tmp/foo/../bar.txt")]
    assert names == [b"/", b"tmp", b"foo", b"..", b"bar.txt"]


def test_text_input_yields_text_components():
    names = [c.as_str() for c in UnixComponents("/tmp/foo/../bar.txt")]
    assert names == ["/", "tmp", "foo", "..", "bar.txt"]


def test_reverse_iteration_is_the_forward_order_reversed():
    path = b"/////a///.//..///"
    forward = list(UnixComponents(path))
    backward = list(reversed(UnixComponents(path)))
    assert backward == forward[::-1]
    assert forward == [UnixComponent.root(), UnixComponent.normal(b"a"), UnixComponent.parent()]


def test_next_back_returns_none_when_exhausted():
    components = UnixComponents(b"a")
    assert components.next_back() == UnixComponent.normal(b"a")
    assert components.next_back() is None


def test_iteration_stays_exhausted():
    components = UnixComponents(b"a")
    assert list(components) == [UnixComponent.normal(b"a")]
    assert list(components) == []


def test_has_root_and_is_absolute():
    assert UnixComponents(b"/etc/passwd").has_root()
    assert UnixComponents(b"/etc/passwd").is_absolute()
    assert not UnixComponents(b"etc/passwd").has_root()
    assert not UnixComponents(b"").is_absolute()


def test_has_root_does_not_consume():
    components = UnixComponents(b"/a")
    assert components.has_root()
    assert next(components) == UnixComponent.root()


def test_has_root_false_after_root_consumed():
    components = UnixComponents(b"/a/b")
    next(components)
    assert not components.has_root()


def test_equality_ignores_redundant_separators_and_dots():
    assert UnixComponents(b"a/b") == UnixComponents(b"a//b/.")
    assert UnixComponents(b"/a/b/") == UnixComponents("/a/./b")
    assert UnixComponents(b"a/c") != UnixComponents(b"a/b/../c")


def test_equality_uses_remaining_components():
    left = UnixComponents(b"/x/a/b")
    next(left)
    next(left)
    assert left == UnixComponents(b"a/b")


def test_ordering_follows_component_order():
    assert UnixComponents(b"/a") < UnixComponents(b"a")
    assert UnixComponents(b"a/b") < UnixComponents(b"a/c")
    assert UnixComponents(b"a") <= UnixComponents(b"a/b")
    assert not UnixComponents(b"b") < UnixComponents(b"a")


def test_copy_is_independent():
    components = UnixComponents(b"a/b")
    clone = copy.copy(components)
    next(components)
    assert list(clone) == [UnixComponent.normal(b"a"), UnixComponent.normal(b"b")]


@pytest.mark.parametrize(
    "path, expected",
    [
        (b"/", UnixComponent.root()),
        (b".", UnixComponent.current()),
        (b"..", UnixComponent.parent()),
        (b"file.txt", UnixComponent.normal(b"file.txt")),
        (b"dir/", UnixComponent.normal(b"dir")),
        ("/", UnixComponent.root()),
        ("file.txt", UnixComponent.normal("file.txt")),
    ],
)
def test_parse_component(path, expected):
    assert parse_component(path) == expected


def test_parse_component_rejects_more_than_one():
    with pytest.raises(ParseError, match="more than one"):
        parse_component(b"/file")


def test_parse_component_rejects_empty():
    with pytest.raises(ParseError, match="no component"):
        parse_component(b"")


def test_utf8_component_round_trip():
    component = parse_component(bytes([240, 159, 146, 150]))
    assert component.as_str() == "💖"
    assert parse_component(component.as_str()) == component


def test_invalid_utf8_component_fails_as_text():
    component = UnixComponent.normal(bytes([0, 159, 146, 150]))
    with pytest.raises(UnicodeDecodeError):
        component.as_str()


def test_rejects_non_path_input():
    with pytest.raises(TypeError):
        UnixComponents(42)