"""Symbol table: scopes, declared objects and name lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator

from .instructions import DC_VALUE
from .types import ConstantValue, Type, char_type, int_type

__all__ = [
    "RESERVED_WORDS",
    "ObjectKind",
    "ParamKind",
    "Scope",
    "SymbolObject",
    "ConstantObject",
    "TypeObject",
    "VariableObject",
    "FunctionObject",
    "ProcedureObject",
    "ParameterObject",
    "ProgramObject",
    "SymbolTable",
]

# Words at the base of every stack frame: return value, dynamic link,
# return address and static link.
RESERVED_WORDS = 4


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = "constant"
    VARIABLE = "variable"
    TYPE = "type"
    FUNCTION = "function"
    PROCEDURE = "procedure"
    PARAMETER = "parameter"
    PROGRAM = "program"


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = "value"
    REFERENCE = "reference"


class Scope:
    """A block's declarations, in declaration order.

    ``frame_size`` counts the stack words the block's frame needs; it starts
    at :data:`RESERVED_WORDS` and grows as variables and parameters are
    declared.
    """

    def __init__(self, owner: SymbolObject | None = None) -> None:
        self.owner = owner
        self.outer: Scope | None = None
        self.objects: list[SymbolObject] = []
        self.frame_size = RESERVED_WORDS

    def find(self, name: str) -> SymbolObject | None:
        """Return the object declared here under ``name``, or ``None``."""
        return next((obj for obj in self.objects if obj.name == name), None)

    def __iter__(self) -> Iterator[SymbolObject]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __repr__(self) -> str:
        owner = self.owner.name if self.owner is not None else None
        return f"Scope(owner={owner!r}, objects={[o.name for o in self.objects]!r})"


@dataclass(eq=False)
class SymbolObject:
    """Base of every named object in the symbol table."""

    name: str
    kind: ClassVar[ObjectKind]


@dataclass(eq=False)
class ConstantObject(SymbolObject):
    """A named constant."""

    value: ConstantValue | None = None
    kind: ClassVar[ObjectKind] = ObjectKind.CONSTANT


@dataclass(eq=False)
class TypeObject(SymbolObject):
    """A named type."""

    actual_type: Type | None = None
    kind: ClassVar[ObjectKind] = ObjectKind.TYPE


@dataclass(eq=False)
class VariableObject(SymbolObject):
    """A variable; its scope and frame offset are set when declared."""

    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)
    local_offset: int = 0
    kind: ClassVar[ObjectKind] = ObjectKind.VARIABLE


@dataclass(eq=False)
class ParameterObject(SymbolObject):
    """A formal parameter; its scope and frame offset are set when declared."""

    param_kind: ParamKind = ParamKind.VALUE
    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)
    local_offset: int = 0
    kind: ClassVar[ObjectKind] = ObjectKind.PARAMETER


@dataclass(eq=False)
class FunctionObject(SymbolObject):
    """A function with its own scope and parameter list."""

    return_type: Type | None = None
    params: list[ParameterObject] = field(default_factory=list, repr=False)
    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)
    kind: ClassVar[ObjectKind] = ObjectKind.FUNCTION

    def __post_init__(self) -> None:
        self.scope = Scope(self)

    @property
    def param_count(self) -> int:
        """Number of declared parameters."""
        return len(self.params)


@dataclass(eq=False)
class ProcedureObject(SymbolObject):
    """A procedure with its own scope and parameter list."""

    params: list[ParameterObject] = field(default_factory=list, repr=False)
    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)
    kind: ClassVar[ObjectKind] = ObjectKind.PROCEDURE

    def __post_init__(self) -> None:
        self.scope = Scope(self)

    @property
    def param_count(self) -> int:
        """Number of declared parameters."""
        return len(self.params)


@dataclass(eq=False)
class ProgramObject(SymbolObject):
    """The program; its scope is the outermost block."""

    code_address: int = DC_VALUE
    scope: Scope = field(init=False, repr=False)
    kind: ClassVar[ObjectKind] = ObjectKind.PROGRAM

    def __post_init__(self) -> None:
        self.scope = Scope(self)


class SymbolTable:
    """Holds the program, the current scope and the predefined routines."""

    def __init__(self) -> None:
        self.program: ProgramObject | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[SymbolObject] = []

        self.readc_function = FunctionObject("READC", return_type=char_type())
        self.declare(self.readc_function)

        self.readi_function = FunctionObject("READI", return_type=int_type())
        self.declare(self.readi_function)

        self.writei_procedure = ProcedureObject("WRITEI")
        self.declare(self.writei_procedure)
        self.enter_block(self.writei_procedure.scope)
        self.declare(ParameterObject("i", ParamKind.VALUE, int_type()))
        self.exit_block()

        self.writec_procedure = ProcedureObject("WRITEC")
        self.declare(self.writec_procedure)
        self.enter_block(self.writec_procedure.scope)
        self.declare(ParameterObject("ch", ParamKind.VALUE, char_type()))
        self.exit_block()

        self.writeln_procedure = ProcedureObject("WRITELN")
        self.declare(self.writeln_procedure)

    def create_program(self, name: str) -> ProgramObject:
        """Create the program object and record it in the table."""
        self.program = ProgramObject(name)
        return self.program

    def declare(self, obj: SymbolObject) -> None:
        """Add ``obj`` to the current scope, or to the globals outside any block.

        Variables and parameters get their frame offset; parameters are also
        added to the owning routine's parameter list; routines get the
        current scope as their outer scope.
        """
        scope = self.current_scope
        if scope is None:
            self.global_objects.append(obj)
            return

        if isinstance(obj, VariableObject):
            if obj.type is None:
                raise ValueError(f"variable {obj.name} has no type")
            obj.scope = scope
            obj.local_offset = scope.frame_size
            scope.frame_size += obj.type.size()
        elif isinstance(obj, ParameterObject):
            obj.scope = scope
            obj.local_offset = scope.frame_size
            scope.frame_size += 1
            if isinstance(scope.owner, (FunctionObject, ProcedureObject)):
                scope.owner.params.append(obj)
        elif isinstance(obj, (FunctionObject, ProcedureObject)):
            obj.scope.outer = scope
        scope.objects.append(obj)

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current scope."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the scope enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def lookup(self, name: str) -> SymbolObject | None:
        """Find ``name`` from the current scope outwards, then among globals."""
        scope = self.current_scope
        while scope is not None:
            obj = scope.find(name)
            if obj is not None:
                return obj
            scope = scope.outer
        return next((obj for obj in self.global_objects if obj.name == name), None)