import pytest

from cminus.types import Type


def test_numeric_values_match_declared_constants():
    members = [Type(value) for value in (0, 1, 2, 3)]
    assert members == [Type.INT, Type.VOID, Type.ERR, Type.STRING]
    assert [member.spelling() for member in members] == ["int", "void", "void", "void"]


def test_lookup_by_value():
    assert Type(2) is Type.ERR
    assert Type(3) is Type.STRING


def test_int_spelling():
    assert Type.INT.spelling() == "int"


@pytest.mark.parametrize("t", [Type.VOID, Type.ERR, Type.STRING])
def test_everything_else_spells_void(t):
    assert t.spelling() == "void"


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Type(42)