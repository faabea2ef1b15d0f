import pytest

from cminus.ast import (
    ArrayAccess,
    Assign,
    BinaryExpr,
    BinOp,
    Call,
    Compound,
    Function,
    IfThen,
    Num,
    Param,
    Print,
    Return,
    StringLiteral,
    VarDecl,
    Variable,
    While,
)
from cminus.symtab import SymbolTable
from cminus.types import Type


def test_num_is_typed_int():
    assert Num(5).type is Type.INT


@pytest.mark.parametrize(
    "node",
    [
        Variable("x"),
        StringLiteral("hi"),
        Call("f"),
        Return(),
        Compound(),
        Print(),
        BinaryExpr(BinOp.ADD, Num(1), Num(2)),
    ],
)
def test_other_nodes_start_with_error_type(node):
    assert node.type is Type.ERR
    assert node.methods is None and node.variables is None


def test_lineno_keyword():
    assert Variable("x", lineno=7).lineno == 7
    assert Variable("x").lineno == 0


def test_optional_children_default_to_none():
    assert IfThen(Num(1), Return()).otherwise is None
    assert Return().expr is None


def test_list_defaults_are_independent():
    a, b = Compound(), Compound()
    a.stmts.append(Num(1))
    assert b.stmts == []


def test_var_decl_defaults():
    decl = VarDecl(Type.INT, "a")
    assert decl.size == 0
    assert decl.ref is False


def test_symbol_tables_do_not_affect_equality():
    left = Variable("x", variables=SymbolTable())
    right = Variable("x")
    assert left == right


def test_structure_equality():
    fn = Function(Type.INT, "f", [Param(Type.INT, "n")], Compound([], [Return(Variable("n"))]))
    same = Function(Type.INT, "f", [Param(Type.INT, "n")], Compound([], [Return(Variable("n"))]))
    assert fn == same
    assert fn != Function(Type.INT, "g", [], Compound())


def test_assign_and_access_fields():
    node = Assign(ArrayAccess("arr", Num(2)), Num(9))
    assert node.target.name == "arr"
    assert node.target.index.value == 2
    assert node.expr.value == 9


def test_while_fields():
    loop = While(Num(0), Print([Num(1)]))
    assert loop.cond == Num(0)
    assert loop.body.args == [Num(1)]


@pytest.mark.parametrize("op", list(BinOp))
def test_binop_lookup_by_symbol(op):
    assert BinOp(op.symbol) is op


@pytest.mark.parametrize("a,b", [(3, 4), (-3, 4), (10, -7), (0, 0)])
def test_arithmetic(a, b):
    assert BinOp.ADD.apply(a, b) == a + b
    assert BinOp.SUB.apply(a, b) == a - b
    assert BinOp.MUL.apply(a, b) == a * b


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (6, 3)])
def test_division_truncates_toward_zero(a, b):
    q = BinOp.DIV.apply(a, b)
    r = BinOp.MOD.apply(a, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)
    assert abs(q) == abs(a) // abs(b)


@pytest.mark.parametrize("op", [BinOp.DIV, BinOp.MOD])
def test_division_by_zero(op):
    with pytest.raises(ZeroDivisionError):
        op.apply(1, 0)


def test_comparisons_give_plain_ints():
    assert BinOp.LT.apply(1, 2) == 1
    assert BinOp.LT.apply(2, 1) == 0
    assert not isinstance(BinOp.EQ.apply(3, 3), bool)
    assert BinOp.GTE.apply(3, 3) == BinOp.LTE.apply(3, 3) == BinOp.EQ.apply(3, 3)
    assert BinOp.NEQ.apply(3, 3) == BinOp.GT.apply(3, 3)