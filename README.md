# cminus

`cminus` works on programs in a small C-like language with integer variables
and arrays, functions with parameters, `if`/`else`, `while`, `return` and
`print`. It takes a syntax tree that you build and checks it, prints it and
runs it.

## Modules

* **`cminus.ast`**: the tree node dataclasses `Num`, `StringLiteral`,
  `BinaryExpr`, `Call`, `Assign`, `Variable`, `ArrayAccess`, `Return`,
  `While`, `IfThen`, `Compound`, `Param`, `Function`, `VarDecl` and `Print`,
  all derived from `Node`, and the `BinOp` operator enum. `BinOp.apply`
  computes an operator with C integer rules: division and remainder truncate
  towards zero, comparisons give `0` or `1`, and a zero divisor raises
  `ZeroDivisionError`.
* **`cminus.types`**: `Type` (`INT`, `VOID`, `ERR`, `STRING`); `Type.spelling()`
  gives `"int"` for `INT` and `"void"` for everything else.
* **`cminus.symtab`**: `SymbolTable`, one scope linked to its enclosing scope,
  with `enter`, `exit`, `add`, `probe` (this scope only), `lookup` (innermost
  scope outwards) and `scopes`.
* **`cminus.semant`**: `Analyzer` and `analyze` resolve names, give every node
  a `Type`, attach the scopes to the nodes and return a list of `Diagnostic`
  records. A diagnostic prints as `error:<line>: <message>`.
  `analyze(program)` also writes each diagnostic to standard error;
  `Analyzer(err=stream)` writes them to `stream`, and `Analyzer()` only
  collects them. A node of an unknown class raises `TypeError`.
* **`cminus.pretty_print`**: `format_tree(node)` returns an indented text
  rendering of one node; `pretty_print(node, out)` writes it to `out`, or to
  standard output when `out` is omitted.
* **`cminus.interp`**: `Interpreter` with `run`, `exec_stmt` and `eval_expr`,
  and `interpret_program(program, out)`.
* **`cminus.utils`**: `indentation`, `dump_symtab` (renders a scope chain as
  text) and `Emitter`, which writes assembler-style lines, labels, read-only
  strings and comments to a stream and hands out fresh labels `.L0`, `.L1`, …

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

A program is a list of top-level nodes, usually `Function` and `VarDecl`:

```python
import sys

from cminus.ast import BinOp, BinaryExpr, Call, Compound, Function, Num, Param, Print, Return, Variable
from cminus.interp import interpret_program
from cminus.pretty_print import format_tree
from cminus.semant import Analyzer
from cminus.types import Type

square = Function(
    Type.INT, "square", [Param(Type.INT, "x")],
    Compound(stmts=[Return(BinaryExpr(BinOp.MUL, Variable("x"), Variable("x")))]),
)
main = Function(
    Type.VOID, "main", [],
    Compound(stmts=[Print([Call("square", [Num(7)])])]),
)
program = [square, main]

for diagnostic in Analyzer().analyze(program):
    print(diagnostic, file=sys.stderr)

print(format_tree(main), end="")
interpret_program(program, sys.stdout)   # prints 49
```

Semantic analysis must run before interpretation: it attaches the scopes in
which the interpreter finds called functions. Without them a call writes
`Unknown or unsupported function call: <name>` to standard error and gives 0.

## How programs run

* `Interpreter.run` executes every top-level node in order; a top-level
  `Function` has its body executed too, with its parameters unbound.
* All variables live in one flat, global namespace shared by every function,
  parameters included. Reading an unknown variable gives 0.
* An array declaration (`VarDecl` with `size > 0`) creates 100 zeroed
  elements whatever the size given. Reading an element of an undeclared array
  gives 0 and writing one is ignored; an index outside 0–99 of a declared
  array raises `IndexError`.
* `print` writes the integer value of each argument on a line of its own.
  String literals are not evaluated: they print as `0` with a warning on the
  error stream.
* A `return` ends the enclosing `Compound` when it is one of its statements
  directly, and ends a `while` whose body is the `return` itself.

## What this package does not do

There is no lexer or parser and no command-line program: programs have to be
built as trees of `cminus.ast` nodes. There is no code generator either;
`Emitter` only writes the text it is given.