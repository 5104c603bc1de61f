"""
x86-64 Code Generator for minicc
================================

This module turns the source AST into assembly text in two steps:

1. **Lowering** (`lower`): source AST -> assembly AST (minicc.compiler.asm_ast)
2. **Rendering** (`AssemblyEmitter` / `render`): assembly AST -> AT&T syntax text

Register Usage
--------------
| Register | Usage                        |
|----------|------------------------------|
| %eax     | Accumulator, function result |

Generated Assembly Format
-------------------------
GNU as, AT&T syntax. For 'int main(void) { return 42; }' on Linux:

        .globl main
    main:
        movl $42, %eax
        ret
        .section .note.GNU-stack,"",@progbits

The final directive marks the stack as non-executable for the GNU
linker. On macOS symbols take a leading underscore and the note is
omitted.

Usage
-----
>>> from minicc.compiler.parser import parse_source
>>> from minicc.compiler.codegen import CodeGenerator
>>> print(CodeGenerator().generate(parse_source('int main() { return 2; }')))
"""

from dataclasses import dataclass
from typing import Optional

from minicc.compiler.ast import (
    Program,
    Statement,
    ReturnStatement,
    Expression,
    Constant,
)
from minicc.compiler.asm_ast import (
    AssemblyProgram,
    AssemblyFunction,
    Instruction,
    Move,
    Return,
    Operand,
    Immediate,
    Register,
)
from minicc.compiler.errors import (
    CodeGenError,
    InvalidFunctionBodyError,
    UnsupportedExpressionError,
)


# =============================================================================
# Lowering: Source AST -> Assembly AST
# =============================================================================

def lower(program: Program) -> AssemblyProgram:
    """
    Lower a source program to the assembly AST.

    Raises:
        InvalidFunctionBodyError: If the body is not a return statement
        UnsupportedExpressionError: If the returned expression has no lowering
    """
    function = program.function
    body: Statement = function.body

    if not isinstance(body, ReturnStatement):
        raise InvalidFunctionBodyError(type(body).__name__, body.location)

    instructions: tuple[Instruction, ...] = (
        Move(lower_operand(body.value), Register()),
        Return(),
    )
    return AssemblyProgram(AssemblyFunction(function.name, instructions))


def lower_operand(expr: Expression) -> Operand:
    """Lower an expression to an instruction operand."""
    if isinstance(expr, Constant):
        return Immediate(expr.value)
    raise UnsupportedExpressionError(type(expr).__name__, expr.location)


# =============================================================================
# Target Descriptions
# =============================================================================

@dataclass(frozen=True)
class TargetInfo:
    """
    Platform-specific rendering details.

    Attributes:
        symbol_prefix: Prepended to every global symbol name
        trailer: Directive emitted after the last function, if any
    """
    symbol_prefix: str = ""
    trailer: Optional[str] = None


TARGETS: dict[str, TargetInfo] = {
    "linux": TargetInfo(trailer='.section .note.GNU-stack,"",@progbits'),
    "macos": TargetInfo(symbol_prefix="_"),
}

DEFAULT_TARGET = "linux"


# =============================================================================
# Rendering: Assembly AST -> Text
# =============================================================================

class AssemblyEmitter:
    """
    Renders an assembly AST as GNU as source text.

    Attributes:
        target: Name of the target platform (a key of TARGETS)
    """

    INDENT = "    "

    REGISTER_NAME = "%eax"

    def __init__(self, target: str = DEFAULT_TARGET):
        if target not in TARGETS:
            valid = ", ".join(sorted(TARGETS))
            raise ValueError(f"unknown target '{target}' (expected one of: {valid})")
        self.target = target
        self._info = TARGETS[target]
        self._output: list[str] = []

    def emit(self, program: AssemblyProgram) -> str:
        """
        Render a complete assembly program.

        Returns:
            Assembly text terminated by a single newline
        """
        self._output = []

        self._emit_function(program.function)

        if self._info.trailer:
            self._emit_directive(self._info.trailer)

        return "\n".join(self._output) + "\n"

    # =========================================================================
    # Assembly Output Methods
    # =========================================================================

    def _emit(self, line: str) -> None:
        self._output.append(line)

    def _emit_directive(self, directive: str) -> None:
        self._emit(f"{self.INDENT}{directive}")

    def _emit_label(self, label: str) -> None:
        self._emit(f"{label}:")

    def _emit_instruction(self, mnemonic: str, *operands: str) -> None:
        if operands:
            self._emit(f"{self.INDENT}{mnemonic} {', '.join(operands)}")
        else:
            self._emit(f"{self.INDENT}{mnemonic}")

    # =========================================================================
    # Node Rendering
    # =========================================================================

    def _emit_function(self, function: AssemblyFunction) -> None:
        symbol = f"{self._info.symbol_prefix}{function.name}"
        self._emit_directive(f".globl {symbol}")
        self._emit_label(symbol)
        for instruction in function.instructions:
            self._render_instruction(instruction)

    def _render_instruction(self, instruction: Instruction) -> None:
        if isinstance(instruction, Move):
            self._emit_instruction(
                "movl",
                self._operand(instruction.src),
                self._operand(instruction.dst),
            )
        elif isinstance(instruction, Return):
            self._emit_instruction("ret")
        else:
            raise CodeGenError(f"cannot render instruction {type(instruction).__name__}")

    def _operand(self, operand: Operand) -> str:
        if isinstance(operand, Immediate):
            return f"${operand.value}"
        if isinstance(operand, Register):
            return self.REGISTER_NAME
        raise CodeGenError(f"cannot render operand {type(operand).__name__}")


def render(program: AssemblyProgram, target: str = DEFAULT_TARGET) -> str:
    """Render an assembly AST to text for the given target."""
    return AssemblyEmitter(target).emit(program)


# =============================================================================
# Code Generator Class
# =============================================================================

class CodeGenerator:
    """
    Generates assembly text from a source AST.

    Combines lowering and rendering for callers that do not need the
    intermediate assembly AST.

    Example:
        asm = CodeGenerator(target="linux").generate(program)
    """

    def __init__(self, target: str = DEFAULT_TARGET):
        self._emitter = AssemblyEmitter(target)

    @property
    def target(self) -> str:
        return self._emitter.target

    def generate(self, program: Program) -> str:
        return self._emitter.emit(lower(program))
