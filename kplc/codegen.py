"""Code generation into a stack-machine code block."""

from __future__ import annotations

import os

from .instructions import DEFAULT_CODE_SIZE, CodeBlock, Instruction, OpCode
from .symtab import SymbolObject, SymbolTable

__all__ = [
    "RETURN_VALUE_OFFSET",
    "DYNAMIC_LINK_OFFSET",
    "RETURN_ADDRESS_OFFSET",
    "STATIC_LINK_OFFSET",
    "CodeGenerator",
]

RETURN_VALUE_OFFSET = 0
DYNAMIC_LINK_OFFSET = 1
RETURN_ADDRESS_OFFSET = 2
STATIC_LINK_OFFSET = 3


class CodeGenerator:
    """Emits instructions into a :class:`CodeBlock`.

    Emitting past ``code_size`` instructions raises
    :class:`~kplc.instructions.CodeOverflowError`.
    """

    def __init__(self, symtab: SymbolTable, code_size: int = DEFAULT_CODE_SIZE) -> None:
        self.symtab = symtab
        self.code = CodeBlock(code_size)

    def gen_la(self, level: int, offset: int) -> Instruction:
        return self.code.emit(OpCode.LA, level, offset)

    def gen_lv(self, level: int, offset: int) -> Instruction:
        return self.code.emit(OpCode.LV, level, offset)

    def gen_lc(self, constant: int) -> Instruction:
        return self.code.emit(OpCode.LC, q=constant)

    def gen_li(self) -> Instruction:
        return self.code.emit(OpCode.LI)

    def gen_int(self, delta: int) -> Instruction:
        return self.code.emit(OpCode.INT, q=delta)

    def gen_dct(self, delta: int) -> Instruction:
        return self.code.emit(OpCode.DCT, q=delta)

    def gen_j(self, label: int) -> Instruction:
        """Emit a jump and return it so its target can be patched later."""
        return self.code.emit(OpCode.J, q=label)

    def gen_fj(self, label: int) -> Instruction:
        """Emit a false jump and return it so its target can be patched later."""
        return self.code.emit(OpCode.FJ, q=label)

    def gen_hl(self) -> Instruction:
        return self.code.emit(OpCode.HL)

    def gen_st(self) -> Instruction:
        return self.code.emit(OpCode.ST)

    def gen_call(self, level: int, label: int) -> Instruction:
        return self.code.emit(OpCode.CALL, level, label)

    def gen_ep(self) -> Instruction:
        return self.code.emit(OpCode.EP)

    def gen_ef(self) -> Instruction:
        return self.code.emit(OpCode.EF)

    def gen_rc(self) -> Instruction:
        return self.code.emit(OpCode.RC)

    def gen_ri(self) -> Instruction:
        return self.code.emit(OpCode.RI)

    def gen_wrc(self) -> Instruction:
        return self.code.emit(OpCode.WRC)

    def gen_wri(self) -> Instruction:
        return self.code.emit(OpCode.WRI)

    def gen_wln(self) -> Instruction:
        return self.code.emit(OpCode.WLN)

    def gen_ad(self) -> Instruction:
        return self.code.emit(OpCode.AD)

    def gen_sb(self) -> Instruction:
        return self.code.emit(OpCode.SB)

    def gen_ml(self) -> Instruction:
        return self.code.emit(OpCode.ML)

    def gen_dv(self) -> Instruction:
        return self.code.emit(OpCode.DV)

    def gen_neg(self) -> Instruction:
        return self.code.emit(OpCode.NEG)

    def gen_cv(self) -> Instruction:
        return self.code.emit(OpCode.CV)

    def gen_eq(self) -> Instruction:
        return self.code.emit(OpCode.EQ)

    def gen_ne(self) -> Instruction:
        return self.code.emit(OpCode.NE)

    def gen_gt(self) -> Instruction:
        return self.code.emit(OpCode.GT)

    def gen_ge(self) -> Instruction:
        return self.code.emit(OpCode.GE)

    def gen_lt(self) -> Instruction:
        return self.code.emit(OpCode.LT)

    def gen_le(self) -> Instruction:
        return self.code.emit(OpCode.LE)

    def update_jump(self, instruction: Instruction, label: int) -> None:
        """Set the target of an emitted jump or false jump."""
        if instruction.op not in (OpCode.J, OpCode.FJ):
            raise ValueError(f"{instruction.op.name} is not a jump")
        instruction.q = label

    def current_address(self) -> int:
        """Return the address the next instruction will have."""
        return len(self.code)

    def is_predefined_function(self, obj: SymbolObject) -> bool:
        """True for the built-in READI and READC functions."""
        return obj is self.symtab.readi_function or obj is self.symtab.readc_function

    def is_predefined_procedure(self, obj: SymbolObject) -> bool:
        """True for the built-in WRITEI, WRITEC and WRITELN procedures."""
        return obj in (
            self.symtab.writei_procedure,
            self.symtab.writec_procedure,
            self.symtab.writeln_procedure,
        ) and any(
            obj is p
            for p in (
                self.symtab.writei_procedure,
                self.symtab.writec_procedure,
                self.symtab.writeln_procedure,
            )
        )

    def gen_predefined_procedure_call(self, proc: SymbolObject) -> Instruction:
        """Emit the instruction that carries out a built-in procedure."""
        if proc is self.symtab.writei_procedure:
            return self.gen_wri()
        if proc is self.symtab.writec_procedure:
            return self.gen_wrc()
        if proc is self.symtab.writeln_procedure:
            return self.gen_wln()
        raise ValueError(f"{proc.name} is not a predefined procedure")

    def gen_predefined_function_call(self, func: SymbolObject) -> Instruction:
        """Emit the instruction that carries out a built-in function."""
        if func is self.symtab.readi_function:
            return self.gen_ri()
        if func is self.symtab.readc_function:
            return self.gen_rc()
        raise ValueError(f"{func.name} is not a predefined function")

    def serialize(self, path: str | os.PathLike[str]) -> None:
        """Write the generated code to ``path`` in binary form."""
        with open(path, "wb") as stream:
            self.code.save(stream)

    def dump(self) -> str:
        """Return a numbered listing of the generated code."""
        return self.code.dump()