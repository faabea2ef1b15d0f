import io

import pytest

from cminus.symtab import SymbolTable
from cminus.utils import Emitter, dump_symtab, indentation


@pytest.mark.parametrize("n", [1, 3, 8])
def test_indentation_length(n):
    result = indentation(n)
    assert len(result) == n
    assert set(result) == {" "}


@pytest.mark.parametrize("n", [0, -4])
def test_indentation_non_positive_is_empty(n):
    assert indentation(n) == ""


def test_dump_none_is_empty():
    assert dump_symtab(None) == ""


def test_dump_nested_scopes():
    outer = SymbolTable().add("x", object())
    inner = outer.enter().add("y", object()).add("z", object())
    assert dump_symtab(inner) == (
        "scope begins:\n"
        "  y\n"
        "  z\n"
        "    scope begins:\n"
        "      x\n"
    )


def test_dump_counts_scopes():
    table = SymbolTable().enter().enter()
    assert dump_symtab(table).count("scope begins:") == 3


def _emitter():
    buf = io.StringIO()
    return Emitter(buf), buf


def test_emit_operand_forms():
    em, buf = _emitter()
    em.emit("ret")
    em.emit("push", "rax")
    em.emit("mov", "rax", "rbx")
    assert buf.getvalue() == "\tret\n\tpush rax\n\tmov rax, rbx\n"


def test_emit_label():
    em, buf = _emitter()
    em.emit_label("main")
    assert buf.getvalue() == "main:\n"


def test_new_labels_are_sequential_per_emitter():
    em, _ = _emitter()
    assert [em.new_label(), em.new_label()] == [".L0", ".L1"]
    other, _ = _emitter()
    assert other.new_label() == ".L0"


def test_emit_string():
    em, buf = _emitter()
    em.emit_string(".L0", "hello")
    assert buf.getvalue().splitlines() == [
        "\t.section .rodata",
        ".L0:",
        '\t.asciz "hello"',
        "\t.text",
    ]


def test_emit_comment():
    em, buf = _emitter()
    em.emit_comment("loop start")
    assert buf.getvalue() == "\t# loop start\n"


def test_default_stream_is_stdout(capsys):
    Emitter().emit("nop")
    assert capsys.readouterr().out == "\tnop\n"