"""
minicc Abstract Syntax Tree (AST) Definitions
=============================================

This module defines the source AST produced by the parser.

Node Hierarchy
--------------
ASTNode (base)
├── Program - root node owning exactly one function
├── FunctionDeclaration - named function with a single statement body
├── Statements
│   └── ReturnStatement - return <expression>;
└── Expressions
    └── Constant - signed 32-bit integer constant

Design Notes
------------
- All nodes are dataclasses; locations are excluded from equality so
  hand-built trees compare equal to parsed ones
- The parser never builds a malformed tree: a failed parse raises before
  any Program exists
- Statement and Expression are closed sets; every consumer ends its
  dispatch with an explicit error branch for kinds it does not know
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from minicc.errors import SourceLocation


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """
    Base class for all AST nodes.

    Attributes:
        location: Source location where this node starts (optional)
    """
    location: Optional[SourceLocation] = field(default=None, compare=False, kw_only=True)


@dataclass
class Expression(ASTNode):
    """Base class for all expression nodes."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for all statement nodes."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass
class Constant(Expression):
    """
    Integer constant.

    Attributes:
        value: The value, within the signed 32-bit range
    """
    value: int


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class ReturnStatement(Statement):
    """
    Return statement.

    Attributes:
        value: The returned expression
    """
    value: Expression


# =============================================================================
# Declarations and Program Root
# =============================================================================

@dataclass
class FunctionDeclaration(ASTNode):
    """
    Function definition.

    Attributes:
        name: Function name, exactly as spelled in the source
        body: The single statement forming the body
    """
    name: str
    body: Statement


@dataclass
class Program(ASTNode):
    """
    Root node of the AST representing one translation unit.

    Attributes:
        function: The one function defined by the unit
    """
    function: FunctionDeclaration


# =============================================================================
# AST Visitor
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Dispatches on the node's class name:

        class MyVisitor(ASTVisitor):
            def visit_Constant(self, node):
                ...
    """

    def visit(self, node: ASTNode) -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: ASTNode) -> Any:
        raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")


# =============================================================================
# AST Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Renders an AST as indented text for debugging.

    Output for 'int main(void) { return 42; }':

        FUN INT main:
            params: ()
            body:
                RETURN Int<42>
    """

    def __init__(self, indent: str = "    "):
        self.indent = indent
        self.indent_level = 0
        self.lines: list[str] = []

    def print(self, node: ASTNode) -> str:
        self.lines = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.lines)

    def _emit(self, text: str) -> None:
        self.lines.append(self.indent * self.indent_level + text)

    def visit_Program(self, node: Program) -> None:
        self.visit(node.function)

    def visit_FunctionDeclaration(self, node: FunctionDeclaration) -> None:
        self._emit(f"FUN INT {node.name}:")
        self.indent_level += 1
        self._emit("params: ()")
        self._emit("body:")
        self.indent_level += 1
        self.visit(node.body)
        self.indent_level -= 2

    def visit_ReturnStatement(self, node: ReturnStatement) -> None:
        self._emit(f"RETURN {self.visit(node.value)}")

    def visit_Constant(self, node: Constant) -> str:
        return f"Int<{node.value}>"
