import pytest

from kplc.symtab import (
    RESERVED_WORDS,
    ConstantObject,
    FunctionObject,
    ObjectKind,
    ParameterObject,
    ParamKind,
    ProcedureObject,
    Scope,
    SymbolTable,
    TypeObject,
    VariableObject,
)
from kplc.types import array_type, char_type, int_type, make_int_constant


@pytest.fixture
def table():
    return SymbolTable()


@pytest.fixture
def program_table(table):
    program = table.create_program("DEMO")
    table.enter_block(program.scope)
    return table


def test_predefined_functions(table):
    readc = table.lookup("READC")
    readi = table.lookup("READI")
    assert readc is table.readc_function
    assert readi is table.readi_function
    assert readc.return_type == char_type()
    assert readi.return_type == int_type()
    assert readc.kind is ObjectKind.FUNCTION


def test_predefined_procedures_have_parameters(table):
    writei = table.lookup("WRITEI")
    writec = table.lookup("WRITEC")
    writeln = table.lookup("WRITELN")
    assert [p.name for p in writei.params] == ["i"]
    assert writei.params[0].type == int_type()
    assert writec.params[0].type == char_type()
    assert writeln.param_count == 0
    assert writei.params[0].local_offset == RESERVED_WORDS
    assert writei.scope.frame_size == RESERVED_WORDS + 1


def test_globals_order(table):
    names = [obj.name for obj in table.global_objects]
    assert names == ["READC", "READI", "WRITEI", "WRITEC", "WRITELN"]
    assert table.current_scope is None


def test_create_program(table):
    program = table.create_program("DEMO")
    assert table.program is program
    assert program.kind is ObjectKind.PROGRAM
    assert program.scope.owner is program
    assert program.scope.outer is None
    assert program.scope.frame_size == RESERVED_WORDS


def test_variable_offsets(program_table):
    scope = program_table.current_scope
    x = VariableObject("X", int_type())
    a = VariableObject("A", array_type(3, int_type()))
    y = VariableObject("Y", char_type())
    for var in (x, a, y):
        program_table.declare(var)
    assert x.local_offset == RESERVED_WORDS
    assert a.local_offset == RESERVED_WORDS + 1
    assert y.local_offset == RESERVED_WORDS + 1 + 3
    assert scope.frame_size == y.local_offset + 1
    assert x.scope is scope


def test_variable_without_type_rejected(program_table):
    with pytest.raises(ValueError):
        program_table.declare(VariableObject("X"))


def test_constants_and_types_do_not_use_frame(program_table):
    scope = program_table.current_scope
    program_table.declare(ConstantObject("C", make_int_constant(7)))
    program_table.declare(TypeObject("T", int_type()))
    assert scope.frame_size == RESERVED_WORDS
    assert scope.find("C").value == make_int_constant(7)
    assert scope.find("T").actual_type == int_type()


def test_function_scope_nesting_and_params(program_table):
    outer = program_table.current_scope
    func = FunctionObject("F", return_type=int_type())
    program_table.declare(func)
    assert func.scope.outer is outer
    program_table.enter_block(func.scope)
    p1 = ParameterObject("P1", ParamKind.VALUE, int_type())
    p2 = ParameterObject("P2", ParamKind.REFERENCE, char_type())
    program_table.declare(p1)
    program_table.declare(p2)
    assert func.params == [p1, p2]
    assert func.param_count == 2
    assert p2.local_offset == p1.local_offset + 1
    assert p1.scope is func.scope
    program_table.exit_block()
    assert program_table.current_scope is outer


def test_procedure_params(program_table):
    proc = ProcedureObject("P")
    program_table.declare(proc)
    program_table.enter_block(proc.scope)
    param = ParameterObject("N", ParamKind.VALUE, int_type())
    program_table.declare(param)
    assert proc.params == [param]
    assert proc.scope.find("N") is param


def test_lookup_shadowing_and_outer(program_table):
    outer_x = VariableObject("X", int_type())
    program_table.declare(outer_x)
    proc = ProcedureObject("P")
    program_table.declare(proc)
    program_table.enter_block(proc.scope)
    assert program_table.lookup("X") is outer_x
    inner_x = VariableObject("X", char_type())
    program_table.declare(inner_x)
    assert program_table.lookup("X") is inner_x
    assert program_table.lookup("WRITELN") is program_table.writeln_procedure
    program_table.exit_block()
    assert program_table.lookup("X") is outer_x


def test_lookup_missing(program_table):
    assert program_table.lookup("NOPE") is None
    assert program_table.current_scope.find("NOPE") is None


def test_exit_block_past_outermost(program_table):
    program_table.exit_block()
    assert program_table.current_scope is None
    with pytest.raises(RuntimeError):
        program_table.exit_block()


def test_scope_iteration():
    scope = Scope()
    assert len(scope) == 0
    assert scope.owner is None
    assert list(scope) == []
    assert scope.frame_size == RESERVED_WORDS