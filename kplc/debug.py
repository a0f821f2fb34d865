"""Text listings of types, constants and symbol-table contents."""

from __future__ import annotations

from .symtab import (
    ConstantObject,
    FunctionObject,
    ParameterObject,
    ParamKind,
    ProcedureObject,
    ProgramObject,
    Scope,
    SymbolObject,
    TypeObject,
    VariableObject,
)
from .types import ConstantValue, Type, TypeClass

__all__ = ["format_type", "format_constant_value", "format_object", "format_scope"]


def format_type(type_: Type) -> str:
    """Return ``Int``, ``Char`` or ``Arr(size,element)`` for ``type_``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Return an integer constant as digits and a char constant in quotes."""
    if value.type_class is TypeClass.INT:
        return str(value.value)
    return f"'{value.value}'"


def format_object(obj: SymbolObject, indent: int = 0) -> str:
    """Return the listing of ``obj``; routines and programs include their scope."""
    pad = " " * indent
    if isinstance(obj, ConstantObject):
        return f"{pad}Const {obj.name} = {format_constant_value(obj.value)}"
    if isinstance(obj, TypeObject):
        return f"{pad}Type {obj.name} = {format_type(obj.actual_type)}"
    if isinstance(obj, VariableObject):
        return f"{pad}Var {obj.name} : {format_type(obj.type)} at offset {obj.local_offset}"
    if isinstance(obj, ParameterObject):
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return (
            f"{pad}{label} {obj.name} : {format_type(obj.type)}"
            f" at offset {obj.local_offset}"
        )
    if isinstance(obj, FunctionObject):
        return (
            f"{pad}Function {obj.name} : {format_type(obj.return_type)}"
            f" at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    if isinstance(obj, ProcedureObject):
        return (
            f"{pad}Procedure {obj.name} at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    if isinstance(obj, ProgramObject):
        return (
            f"{pad}Program {obj.name} at address {obj.code_address}\n"
            + format_scope(obj.scope, indent + 4)
        )
    raise TypeError(f"cannot format {obj!r}")


def format_scope(scope: Scope, indent: int = 0) -> str:
    """Return the listing of every object in ``scope``, each ending a line."""
    return "".join(format_object(obj, indent) + "\n" for obj in scope)