"""Stack-machine instructions and code blocks."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Iterator

__all__ = [
    "DC_VALUE",
    "INT_SIZE",
    "CHAR_SIZE",
    "DEFAULT_CODE_SIZE",
    "OpCode",
    "Instruction",
    "CodeBlock",
    "CodeOverflowError",
    "format_instruction",
]

DC_VALUE = 0
INT_SIZE = 1
CHAR_SIZE = 1
DEFAULT_CODE_SIZE = 10000

_RECORD = struct.Struct("<iii")


class OpCode(IntEnum):
    """Operation codes of the stack machine."""

    LA = 0    # Load address:     t += 1; s[t] = base(p) + q
    LV = 1    # Load value:       t += 1; s[t] = s[base(p) + q]
    LC = 2    # Load constant:    t += 1; s[t] = q
    LI = 3    # Load indirect:    s[t] = s[s[t]]
    INT = 4   # Increment t:      t += q
    DCT = 5   # Decrement t:      t -= q
    J = 6     # Jump:             pc = q
    FJ = 7    # False jump:       if s[t] == 0: pc = q; t -= 1
    HL = 8    # Halt
    ST = 9    # Store:            s[s[t-1]] = s[t]; t -= 2
    CALL = 10
    EP = 11   # Exit procedure
    EF = 12   # Exit function
    RC = 13   # Read char
    RI = 14   # Read integer
    WRC = 15  # Write char
    WRI = 16  # Write integer
    WLN = 17  # Write newline
    AD = 18
    SB = 19
    ML = 20
    DV = 21
    NEG = 22
    CV = 23   # Copy top
    EQ = 24
    NE = 25
    GT = 26
    LT = 27
    GE = 28
    LE = 29
    BP = 30   # Break point


_TWO_OPERANDS = frozenset({OpCode.LA, OpCode.LV, OpCode.CALL})
_ONE_OPERAND = frozenset({OpCode.LC, OpCode.INT, OpCode.DCT, OpCode.J, OpCode.FJ})


class CodeOverflowError(Exception):
    """Raised when a code block has no room for another instruction."""


@dataclass
class Instruction:
    """One machine instruction; ``q`` may be patched after emission."""

    op: OpCode
    p: int = DC_VALUE
    q: int = DC_VALUE

    def __str__(self) -> str:
        return format_instruction(self)


def format_instruction(instruction: Instruction) -> str:
    """Return the assembly text of ``instruction``."""
    op = instruction.op
    if op in _TWO_OPERANDS:
        return f"{op.name} {instruction.p},{instruction.q}"
    if op in _ONE_OPERAND:
        return f"{op.name} {instruction.q}"
    return op.name


class CodeBlock:
    """A bounded sequence of instructions."""

    def __init__(self, max_size: int = DEFAULT_CODE_SIZE) -> None:
        self.max_size = max_size
        self._code: list[Instruction] = []

    def emit(self, op: OpCode, p: int = DC_VALUE, q: int = DC_VALUE) -> Instruction:
        """Append an instruction and return it."""
        if len(self._code) >= self.max_size:
            raise CodeOverflowError(f"code block is full ({self.max_size} instructions)")
        instruction = Instruction(OpCode(op), p, q)
        self._code.append(instruction)
        return instruction

    def __len__(self) -> int:
        return len(self._code)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._code)

    def __getitem__(self, index: int) -> Instruction:
        return self._code[index]

    def dump(self) -> str:
        """Return a numbered listing of the block, one instruction per line."""
        return "".join(
            f"{address}:  {format_instruction(instruction)}\n"
            for address, instruction in enumerate(self._code)
        )

    def to_bytes(self) -> bytes:
        """Encode the block as 32-bit little-endian (op, p, q) records."""
        return b"".join(_RECORD.pack(int(i.op), i.p, i.q) for i in self._code)

    @classmethod
    def from_bytes(cls, data: bytes, max_size: int = DEFAULT_CODE_SIZE) -> "CodeBlock":
        """Decode a block produced by :meth:`to_bytes`."""
        if len(data) % _RECORD.size:
            raise ValueError("truncated instruction record")
        block = cls(max_size)
        for op, p, q in _RECORD.iter_unpack(data):
            block.emit(OpCode(op), p, q)
        return block

    def save(self, stream: BinaryIO) -> None:
        """Write the encoded block to a binary stream."""
        stream.write(self.to_bytes())

    @classmethod
    def load(cls, stream: BinaryIO, max_size: int = DEFAULT_CODE_SIZE) -> "CodeBlock":
        """Read an encoded block from a binary stream."""
        return cls.from_bytes(stream.read(), max_size)