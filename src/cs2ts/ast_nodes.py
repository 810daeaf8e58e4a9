"""Syntax tree node definitions consumed by the translator.

Trees are built by an external parser (or loaded from JSON by
``cs2ts.loader``); the translator only reads them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional


class NodeKind(Enum):
    COMPILATION_UNIT = "CompilationUnit"
    NAMESPACE = "Namespace"
    CLASS = "Class"
    FIELD = "Field"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    PROPERTY = "Property"
    ACCESSOR = "Accessor"
    METHOD = "Method"
    PARAMETER = "Parameter"
    BLOCK = "Block"
    TRY = "Try"
    CATCH = "Catch"
    RETURN = "Return"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    VARIABLE_DECLARATION = "VariableDeclaration"


# ---- Declarations ----

@dataclass
class CompilationUnit:
    kind: ClassVar[NodeKind] = NodeKind.COMPILATION_UNIT
    members: list = field(default_factory=list)   # NamespaceDecl | ClassDecl


@dataclass
class NamespaceDecl:
    kind: ClassVar[NodeKind] = NodeKind.NAMESPACE
    name: str = ""
    members: list = field(default_factory=list)   # NamespaceDecl | ClassDecl
    line: int = 0
    col: int = 0


@dataclass
class ClassDecl:
    kind: ClassVar[NodeKind] = NodeKind.CLASS
    name: str = ""
    modifiers: list[str] = field(default_factory=list)
    members: list = field(default_factory=list)   # Field | Property | Method | Class
    line: int = 0
    col: int = 0


@dataclass
class VariableDeclarator:
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATOR
    name: str = ""
    initializer: Optional[str] = None             # value expression text, no "="
    line: int = 0
    col: int = 0


@dataclass
class FieldDecl:
    kind: ClassVar[NodeKind] = NodeKind.FIELD
    modifiers: list[str] = field(default_factory=list)
    type: str = ""
    variables: list[VariableDeclarator] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class Accessor:
    kind: ClassVar[NodeKind] = NodeKind.ACCESSOR
    keyword: str = "get"                          # "get" | "set" | "init"
    modifiers: list[str] = field(default_factory=list)
    body: Optional[Block] = None                  # None for auto accessors
    line: int = 0
    col: int = 0

    @property
    def is_getter(self) -> bool:
        return self.keyword == "get"


@dataclass
class PropertyDecl:
    kind: ClassVar[NodeKind] = NodeKind.PROPERTY
    modifiers: list[str] = field(default_factory=list)
    type: str = ""
    name: str = ""
    accessors: list[Accessor] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class Param:
    kind: ClassVar[NodeKind] = NodeKind.PARAMETER
    name: str = ""
    type: str = ""
    line: int = 0
    col: int = 0


@dataclass
class MethodDecl:
    kind: ClassVar[NodeKind] = NodeKind.METHOD
    modifiers: list[str] = field(default_factory=list)
    return_type: str = "void"
    name: str = ""
    params: list[Param] = field(default_factory=list)
    body: Optional[Block] = None
    line: int = 0
    col: int = 0


# ---- Statements ----

@dataclass
class Block:
    kind: ClassVar[NodeKind] = NodeKind.BLOCK
    statements: list = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class CatchClause:
    kind: ClassVar[NodeKind] = NodeKind.CATCH
    identifier: Optional[str] = None              # bound exception variable
    block: Block = field(default_factory=Block)
    line: int = 0
    col: int = 0


@dataclass
class TryStmt:
    kind: ClassVar[NodeKind] = NodeKind.TRY
    block: Block = field(default_factory=Block)
    catches: list[CatchClause] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class ReturnStmt:
    kind: ClassVar[NodeKind] = NodeKind.RETURN
    text: str = "return;"                         # full statement source text
    line: int = 0
    col: int = 0


@dataclass
class ExprStmt:
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STATEMENT
    text: str = ""                                # full statement source text
    line: int = 0
    col: int = 0


@dataclass
class VarDeclStmt:
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATION
    type: str = "var"                             # "var" = inferred
    variables: list[VariableDeclarator] = field(default_factory=list)
    line: int = 0
    col: int = 0


INFERRED_TYPE = "var"
