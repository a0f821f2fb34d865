"""Character reader, types, symbol table and stack-machine code generation for KPL."""

__version__ = "0.1.0"