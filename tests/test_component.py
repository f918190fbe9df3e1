import pytest

from unixpath.component import (
    CURRENT_DIR,
    DISALLOWED_FILENAME_BYTES,
    PARENT_DIR,
    SEPARATOR_BYTES,
    ComponentKind,
    UnixComponent,
)


def test_constructors_match_kinds():
    assert UnixComponent.root() == UnixComponent(ComponentKind.ROOT_DIR)
    assert UnixComponent.parent() == UnixComponent(ComponentKind.PARENT_DIR)
    assert UnixComponent.current() == UnixComponent(ComponentKind.CUR_DIR)


def test_as_bytes_of_fixed_components():
    assert UnixComponent.root().as_bytes() == b"/"
    assert UnixComponent.current().as_bytes() == b"."
    assert UnixComponent.parent().as_bytes() == b".."
    assert UnixComponent.root().as_bytes() == SEPARATOR_BYTES
    assert UnixComponent.current().as_bytes() == CURRENT_DIR
    assert UnixComponent.parent().as_bytes() == PARENT_DIR


def test_normal_round_trip_bytes_and_str():
    comp = UnixComponent.normal(b"file.txt")
    assert comp.as_bytes() == b"file.txt"
    assert comp.as_str() == "file.txt"
    assert UnixComponent.normal("file.txt") == comp


def test_predicates():
    root = UnixComponent.root()
    normal = UnixComponent.normal(b"file.txt")
    parent = UnixComponent.parent()
    current = UnixComponent.current()
    assert root.is_root() and not normal.is_root()
    assert normal.is_normal() and not root.is_normal()
    assert parent.is_parent() and not root.is_parent()
    assert current.is_current() and not root.is_current()


def test_is_valid():
    assert UnixComponent.root().is_valid()
    assert UnixComponent.parent().is_valid()
    assert UnixComponent.current().is_valid()
    assert UnixComponent.normal(b"abc").is_valid()
    assert not UnixComponent.normal(b"\0").is_valid()


@pytest.mark.parametrize("bad", list(DISALLOWED_FILENAME_BYTES))
def test_disallowed_bytes_make_invalid(bad):
    assert not UnixComponent.normal(b"ab" + bytes([bad]) + b"cd").is_valid()


def test_len_matches_bytes():
    for comp in (
        UnixComponent.root(),
        UnixComponent.current(),
        UnixComponent.parent(),
        UnixComponent.normal(b"hello"),
    ):
        assert len(comp) == len(comp.as_bytes())


def test_utf8_normal_component():
    comp = UnixComponent.normal(bytes([240, 159, 146, 150]))
    assert comp.as_str() == "💖"
    assert str(comp) == "💖"


def test_invalid_utf8_raises():
    comp = UnixComponent.normal(bytes([0, 159, 146, 150]))
    with pytest.raises(UnicodeDecodeError):
        comp.as_str()


def test_ordering_follows_kind_then_bytes():
    ordered = [
        UnixComponent.root(),
        UnixComponent.current(),
        UnixComponent.parent(),
        UnixComponent.normal(b"a"),
        UnixComponent.normal(b"b"),
    ]
    assert sorted(reversed(ordered)) == ordered


def test_hashable_and_equal():
    assert len({UnixComponent.normal(b"x"), UnixComponent.normal("x")}) == 1


def test_normal_rejects_non_text():
    with pytest.raises(TypeError):
        UnixComponent.normal(123)


def test_fixed_kind_rejects_name():
    with pytest.raises(ValueError):
        UnixComponent(ComponentKind.ROOT_DIR, b"x")