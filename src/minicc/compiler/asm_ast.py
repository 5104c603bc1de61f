"""
Assembly AST Definitions
========================

Target-instruction tree produced by lowering the source AST. It is
independent of text formatting; codegen.AssemblyEmitter renders it.

Node Hierarchy
--------------
AssemblyProgram
└── AssemblyFunction - name + instruction sequence
    └── Instruction
        ├── Move(src, dst) - copy an operand into another
        └── Return - return to the caller

Operand
├── Immediate(value) - constant operand
└── Register - the accumulator (return value register)

For the current grammar every function lowers to exactly
(Move(Immediate(v), Register()), Return()).
"""

from dataclasses import dataclass


# =============================================================================
# Operands
# =============================================================================

@dataclass(frozen=True)
class Operand:
    """Base class for instruction operands."""
    pass


@dataclass(frozen=True)
class Immediate(Operand):
    """Immediate (constant) operand."""
    value: int


@dataclass(frozen=True)
class Register(Operand):
    """The accumulator register, which also holds function return values."""
    pass


# =============================================================================
# Instructions
# =============================================================================

@dataclass(frozen=True)
class Instruction:
    """Base class for assembly instructions."""
    pass


@dataclass(frozen=True)
class Move(Instruction):
    """Copy src into dst."""
    src: Operand
    dst: Operand


@dataclass(frozen=True)
class Return(Instruction):
    """Return from the current function."""
    pass


# =============================================================================
# Program Structure
# =============================================================================

@dataclass(frozen=True)
class AssemblyFunction:
    """
    One function of the assembly program.

    Attributes:
        name: Symbol name, before any target-specific decoration
        instructions: Instructions in emission order
    """
    name: str
    instructions: tuple[Instruction, ...]


@dataclass(frozen=True)
class AssemblyProgram:
    """Root of the assembly AST."""
    function: AssemblyFunction
