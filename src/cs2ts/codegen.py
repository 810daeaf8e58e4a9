"""TypeScript code generator.

Walks a C# syntax tree depth-first and emits TypeScript-shaped source. Types
and visibility go through ``cs2ts.types``; all output state lives in the
``Emitter``.

Return statements, expression statements and initializers are passed through
as their source text. Nothing inside an expression is rewritten.
"""

from __future__ import annotations

import logging
from typing import Callable

from .ast_nodes import (
    INFERRED_TYPE, Block, ClassDecl, CompilationUnit, ExprStmt, FieldDecl,
    MethodDecl, NamespaceDecl, NodeKind, PropertyDecl, ReturnStmt, TryStmt,
    VarDeclStmt,
)
from .emitter import Emitter
from .types import map_type, map_visibility

logger = logging.getLogger(__name__)

_VAR_PREFIX = "var "


class CodeGenError(Exception):
    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.line = line
        self.col = col
        super().__init__(f"{message} at {line}:{col}")


class CodeGen:
    """Visits syntax nodes and writes their translation to an Emitter."""

    def __init__(self, emitter: Emitter | None = None):
        self.emitter = emitter if emitter is not None else Emitter()
        self._handlers: dict[NodeKind, Callable] = {
            NodeKind.COMPILATION_UNIT: self._visit_compilation_unit,
            NodeKind.NAMESPACE: self._visit_namespace,
            NodeKind.CLASS: self._visit_class,
            NodeKind.FIELD: self._visit_field,
            NodeKind.PROPERTY: self._visit_property,
            NodeKind.METHOD: self._visit_method,
            NodeKind.BLOCK: self._visit_block,
            NodeKind.TRY: self._visit_try,
            NodeKind.RETURN: self._visit_return,
            NodeKind.EXPRESSION_STATEMENT: self._visit_expr_stmt,
            NodeKind.VARIABLE_DECLARATION: self._visit_var_decl,
        }

    def generate(self, root) -> list[str]:
        """Translate ``root`` and return every line emitted so far."""
        self.visit(root)
        lines = self.emitter.finalize()
        logger.debug("generated %d lines", len(lines))
        return lines

    def visit(self, node):
        kind = getattr(node, "kind", None)
        handler = self._handlers.get(kind)
        if handler is None:
            name = kind.value if isinstance(kind, NodeKind) else type(node).__name__
            raise CodeGenError(f"cannot translate node of kind '{name}'",
                               getattr(node, "line", 0), getattr(node, "col", 0))
        handler(node)

    # ---- Declarations ----

    def _visit_compilation_unit(self, node: CompilationUnit):
        for member in node.members:
            self.visit(member)

    def _visit_namespace(self, node: NamespaceDecl):
        logger.debug("namespace %s", node.name)
        self.emitter.emit_format("module {0}", node.name)
        with self.emitter.scope():
            for member in node.members:
                self.visit(member)

    def _visit_class(self, node: ClassDecl):
        logger.debug("class %s", node.name)
        visibility = map_visibility(node.modifiers)
        self.emitter.emit(f"{visibility} class {node.name}")
        with self.emitter.scope():
            for member in node.members:
                self.visit(member)

    def _visit_field(self, node: FieldDecl):
        visibility = map_visibility(node.modifiers)
        mapped = map_type(node.type)
        for var in node.variables:
            self.emitter.emit_format("{0} {1}: {2};", visibility, var.name, mapped)

    def _visit_method(self, node: MethodDecl):
        logger.debug("method %s", node.name)
        if node.body is None:
            raise CodeGenError(f"method '{node.name}' has no body",
                               node.line, node.col)
        visibility = map_visibility(node.modifiers)
        params = ", ".join(f"{p.name}: {map_type(p.type)}" for p in node.params)
        self.emitter.emit(
            f"{visibility} {node.name}({params}): {map_type(node.return_type)}")
        with self.emitter.scope():
            self._visit_block(node.body)

    def _visit_property(self, node: PropertyDecl):
        visibility = map_visibility(node.modifiers)
        mapped = map_type(node.type)

        if all(a.body is None for a in node.accessors):
            self.emitter.emit(f"{visibility} {node.name}: {mapped}")
            return

        # Accessor modifiers are ignored; the property's visibility wins
        for accessor in node.accessors:
            if accessor.body is None:
                continue
            if accessor.is_getter:
                self.emitter.emit(f"{visibility} get {node.name}: {mapped}")
            else:
                self.emitter.emit(f"{visibility} set {node.name}(value: {mapped})")
            with self.emitter.scope():
                self._visit_block(accessor.body)

    # ---- Statements ----

    def _visit_block(self, node: Block):
        # Braces belong to the owning construct, not the block
        for stmt in node.statements:
            self.visit(stmt)

    def _visit_try(self, node: TryStmt):
        self.emitter.emit("try")
        with self.emitter.scope():
            self._visit_block(node.block)
        for clause in node.catches:
            if clause.identifier:
                self.emitter.emit(f"catch ({clause.identifier})")
            else:
                self.emitter.emit("catch")
            with self.emitter.scope():
                self._visit_block(clause.block)

    def _visit_return(self, node: ReturnStmt):
        self.emitter.emit(node.text)

    def _visit_expr_stmt(self, node: ExprStmt):
        self.emitter.emit(node.text)

    def _visit_var_decl(self, node: VarDeclStmt):
        if not node.variables:
            raise CodeGenError("variable declaration declares nothing",
                               node.line, node.col)
        type_clause = ""
        if node.type != INFERRED_TYPE:
            type_clause = f": {map_type(node.type)}"

        # Only the last declarator's initializer is kept
        last = node.variables[-1]
        initializer = ""
        if last.initializer is not None:
            initializer = f" = {last.initializer}"

        if len(node.variables) == 1:
            self.emitter.emit(f"{_VAR_PREFIX}{last.name}{type_clause}{initializer};")
            return

        # Continuation lines line up under the first identifier
        padding = " " * len(_VAR_PREFIX)
        first, middle = node.variables[0], node.variables[1:-1]
        self.emitter.emit(f"{_VAR_PREFIX}{first.name},")
        for var in middle:
            self.emitter.emit(f"{padding}{var.name},")
        self.emitter.emit(f"{padding}{last.name}{type_clause}{initializer};")


def translate(root, newline: str = "\n") -> str:
    """Translate a tree with a fresh generator and return the joined output."""
    gen = CodeGen()
    gen.generate(root)
    return gen.emitter.output(newline)
