# kplc

Building blocks of a compiler for KPL, a small Pascal-like teaching
language. The package has these parts:

- a character classifier and a character reader that tracks positions,
- types and constant values,
- a symbol table with nested scopes and stack-frame offsets,
- text listings of symbol-table contents,
- stack-machine instructions, with a code generator that emits them.

The package needs only the Python standard library. It supports Python
3.10 and later.

## Modules

| Module              | Purpose                                                                 |
|---------------------|-------------------------------------------------------------------------|
| `kplc.charcode`     | `CharCode` and `char_code(ch)` give the lexical class of a character.   |
| `kplc.reader`       | `Reader` walks source text and keeps track of line and column numbers.  |
| `kplc.types`        | `Type`, `TypeClass`, `ConstantValue` and helpers such as `int_type()`.  |
| `kplc.symtab`       | `SymbolTable`, `Scope` and the kinds of declared objects.               |
| `kplc.debug`        | Text listings of types, constants, objects and scopes.                  |
| `kplc.instructions` | `OpCode`, `Instruction`, `CodeBlock` and the block's binary form.       |
| `kplc.codegen`      | `CodeGenerator` emits instructions into a `CodeBlock`.                  |

## Reading source text

```python
from kplc.reader import Reader
from kplc.charcode import char_code, CharCode

reader = Reader("x := 1")
while reader.current_char is not None:
    print(reader.line_no, reader.col_no, char_code(reader.current_char))
    reader.read_char()
```

`Reader.from_file(path)` reads a file as Latin-1. `current_char` is
`None` at the end of the input. When the reader reaches a newline, the
line number goes up by one and the column is reset to 0.

`char_code` classifies any single character. Letters, digits, whitespace
and the language's punctuation each get their own class. Everything else
is `CharCode.UNKNOWN`.

## Types

```python
from kplc.types import int_type, char_type, array_type, make_int_constant

matrix = array_type(3, array_type(4, int_type()))
matrix.size()            # 12 stack words
matrix == array_type(3, array_type(4, int_type()))   # True: structural equality
make_int_constant(7).type == int_type()              # True
```

Types and constants are immutable. An array type must have an element
type. Integer constants hold an `int` and character constants hold a
one-character `str`. Any other value raises an error.

## Symbol table

```python
from kplc.symtab import SymbolTable, VariableObject, ProcedureObject
from kplc.types import int_type
from kplc.debug import format_object

symtab = SymbolTable()
program = symtab.create_program("DEMO")
symtab.enter_block(program.scope)
symtab.declare(VariableObject("X", type=int_type()))
proc = ProcedureObject("P")
symtab.declare(proc)
symtab.exit_block()

print(format_object(program))
```

A new `SymbolTable` already holds the predefined subprograms `READC`,
`READI`, `WRITEI`, `WRITEC` and `WRITELN` as global objects.

`declare` behaves as follows:

- Outside any block, the object is added to the globals.
- Inside a block, a variable gets the next frame offset, and the frame
  grows by the size of the variable's type.
- A parameter takes one word, and it is also added to the parameter
  list of the function or procedure that owns the scope.
- A declared function or procedure gets the current scope as its outer
  scope.

Every frame starts with four reserved words: return value, dynamic link,
return address and static link. Because of this, the first local is at
offset 4.

`lookup(name)` searches the current scope first, then each enclosing
scope, and finally the globals. It returns `None` if the name is not
found.

## Code generation

```python
from kplc.codegen import CodeGenerator
from kplc.symtab import SymbolTable

generator = CodeGenerator(SymbolTable(), 10000)
generator.gen_lc(1)
generator.gen_lc(2)
generator.gen_ad()
generator.gen_wri()
jump = generator.gen_j(0)
generator.gen_hl()
generator.update_jump(jump, generator.current_address())

print(generator.dump())
generator.serialize("out.bin")
```

Each `gen_*` method appends one instruction and returns it.
`update_jump` changes the target of a `J` or `FJ` instruction. Called on
any other instruction, it raises `ValueError`.

The predefined subprograms map to single instructions through
`gen_predefined_procedure_call` and `gen_predefined_function_call`:

| Subprogram | Instruction |
|------------|-------------|
| `WRITEI`   | `WRI`       |
| `WRITEC`   | `WRC`       |
| `WRITELN`  | `WLN`       |
| `READI`    | `RI`        |
| `READC`    | `RC`        |

A `CodeBlock` has a fixed capacity. Emitting past it raises
`CodeOverflowError`. The binary form stores each instruction as three
32-bit little-endian integers (op, p, q). `CodeBlock.load` and
`CodeBlock.from_bytes` read it back.

## What this package does not do

The package does not turn KPL source text into tokens. It does not parse
programs, and it does not run semantic checks such as undeclared
identifiers or type mismatches. No compile command is installed.

The code generator emits only the instructions it is asked for. Turning
a program into code is left to the caller, who drives `SymbolTable` and
`CodeGenerator` directly. The package has no virtual machine to execute
the generated code.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.