import pytest

from kplc.debug import format_constant_value, format_object, format_scope, format_type
from kplc.symtab import (
    RESERVED_WORDS,
    ConstantObject,
    FunctionObject,
    ParameterObject,
    ParamKind,
    Scope,
    SymbolTable,
    TypeObject,
    VariableObject,
)
from kplc.types import (
    array_type,
    char_type,
    int_type,
    make_char_constant,
    make_int_constant,
)


def test_basic_types():
    assert format_type(int_type()) == "Int"
    assert format_type(char_type()) == "Char"


def test_array_type_nests_element():
    inner = array_type(2, char_type())
    outer = array_type(3, inner)
    assert format_type(inner) == f"Arr(2,{format_type(char_type())})"
    assert format_type(outer) == f"Arr(3,{format_type(inner)})"


def test_constant_values():
    assert format_constant_value(make_int_constant(42)) == "42"
    assert format_constant_value(make_char_constant("a")) == "'a'"


def test_constant_and_type_objects():
    const = ConstantObject("C", make_int_constant(5))
    typ = TypeObject("T", char_type())
    assert format_object(const, 0) == "Const C = 5"
    assert format_object(typ, 2) == "  Type T = Char"


def test_variable_object_after_declaration():
    table = SymbolTable()
    program = table.create_program("P")
    table.enter_block(program.scope)
    var = VariableObject("X", int_type())
    table.declare(var)
    text = format_object(var, 2)
    assert text.startswith("  Var X : Int")
    assert text.endswith(f" at offset {RESERVED_WORDS}")


def test_parameter_kinds():
    value = ParameterObject("A", ParamKind.VALUE, int_type())
    ref = ParameterObject("B", ParamKind.REFERENCE, int_type())
    assert format_object(value, 0).startswith("Param A : Int")
    assert format_object(ref, 0).startswith("Param VAR B : Int")


def test_function_includes_indented_scope():
    table = SymbolTable()
    program = table.create_program("P")
    table.enter_block(program.scope)
    func = FunctionObject("F", return_type=char_type())
    table.declare(func)
    table.enter_block(func.scope)
    table.declare(VariableObject("Y", int_type()))
    text = format_object(func, 0)
    lines = text.splitlines()
    assert lines[0] == "Function F : Char at address 0"
    assert lines[1] == " " * 4 + format_object(func.scope.find("Y"), 0)


def test_program_scope_listing():
    table = SymbolTable()
    program = table.create_program("P")
    table.enter_block(program.scope)
    table.declare(VariableObject("A", int_type()))
    table.declare(VariableObject("B", char_type()))
    listing = format_scope(program.scope, 4)
    lines = listing.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("    Var ") for line in lines)
    assert listing.endswith("\n")
    full = format_object(program, 0)
    assert full == "Program P at address 0\n" + listing


def test_empty_scope():
    assert format_scope(Scope(), 0) == ""


def test_unknown_object_rejected():
    with pytest.raises(TypeError):
        format_object(object(), 0)