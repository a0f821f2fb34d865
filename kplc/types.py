"""Types and constant values of the source language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .instructions import CHAR_SIZE, INT_SIZE

__all__ = [
    "TypeClass",
    "Type",
    "ConstantValue",
    "int_type",
    "char_type",
    "array_type",
    "make_int_constant",
    "make_char_constant",
]


class TypeClass(Enum):
    """Kind of a type."""

    INT = "int"
    CHAR = "char"
    ARRAY = "array"


@dataclass(frozen=True)
class Type:
    """An immutable type.

    Basic types have no element type. Array types carry their length and
    element type. Two types compare equal when they have the same structure.
    """

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None

    def __post_init__(self) -> None:
        if self.type_class is TypeClass.ARRAY:
            if not isinstance(self.element_type, Type):
                raise ValueError("an array type needs an element type")
        elif self.element_type is not None or self.array_size:
            raise ValueError(f"{self.type_class.name} type takes no array attributes")

    @property
    def is_basic(self) -> bool:
        """True for the integer and character types."""
        return self.type_class in (TypeClass.INT, TypeClass.CHAR)

    def size(self) -> int:
        """Return the number of stack words a value of this type occupies."""
        if self.type_class is TypeClass.INT:
            return INT_SIZE
        if self.type_class is TypeClass.CHAR:
            return CHAR_SIZE
        assert self.element_type is not None
        return self.array_size * self.element_type.size()


def int_type() -> Type:
    """Return the integer type."""
    return Type(TypeClass.INT)


def char_type() -> Type:
    """Return the character type."""
    return Type(TypeClass.CHAR)


def array_type(size: int, element_type: Type) -> Type:
    """Return an array type of ``size`` elements of ``element_type``."""
    if not isinstance(element_type, Type):
        raise TypeError(f"element type must be a Type, got {element_type!r}")
    return Type(TypeClass.ARRAY, size, element_type)


@dataclass(frozen=True)
class ConstantValue:
    """A constant: an integer, or a single character."""

    type_class: TypeClass
    value: int | str

    def __post_init__(self) -> None:
        if self.type_class is TypeClass.INT:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"integer constant needs an int, got {self.value!r}")
        elif self.type_class is TypeClass.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"char constant needs one character, got {self.value!r}")
        else:
            raise ValueError("constants are integers or characters only")

    @property
    def type(self) -> Type:
        """The basic type of this constant."""
        return int_type() if self.type_class is TypeClass.INT else char_type()


def make_int_constant(value: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, value)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a character constant."""
    return ConstantValue(TypeClass.CHAR, ch)