"""Load a JSON-serialized syntax tree into ``cs2ts.ast_nodes`` dataclasses.

Each node is an object with a ``kind`` tag (a ``NodeKind`` value) plus its
attributes, e.g.::

    {"kind": "Class", "name": "Foo", "modifiers": ["public"], "members": []}
"""

from __future__ import annotations

import json
from typing import Any

from .ast_nodes import (
    Accessor, Block, CatchClause, ClassDecl, CompilationUnit, ExprStmt,
    FieldDecl, MethodDecl, NamespaceDecl, NodeKind, Param, PropertyDecl,
    ReturnStmt, TryStmt, VarDeclStmt, VariableDeclarator,
)


class TreeLoadError(Exception):
    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} at {path}")


class _Loader:
    def load(self, data: Any, path: str = "$"):
        if not isinstance(data, dict):
            raise TreeLoadError("expected a node object", path)
        tag = data.get("kind")
        try:
            kind = NodeKind(tag)
        except ValueError:
            raise TreeLoadError(f"unknown node kind {tag!r}", path) from None
        builder = getattr(self, "_load_" + kind.name.lower())
        return builder(data, path)

    # ---- Attribute helpers ----

    def _str(self, data: dict, key: str, path: str, default: str | None = None) -> str:
        value = data.get(key)
        if value is None:
            value = default
        if value is None:
            raise TreeLoadError(f"missing required '{key}'", path)
        if not isinstance(value, str):
            raise TreeLoadError(f"'{key}' must be a string", f"{path}.{key}")
        return value

    def _opt_str(self, data: dict, key: str, path: str) -> str | None:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise TreeLoadError(f"'{key}' must be a string", f"{path}.{key}")
        return value

    def _list(self, data: dict, key: str, path: str) -> list:
        value = data.get(key, [])
        if not isinstance(value, list):
            raise TreeLoadError(f"'{key}' must be a list", f"{path}.{key}")
        return value

    def _strings(self, data: dict, key: str, path: str) -> list[str]:
        values = self._list(data, key, path)
        for i, v in enumerate(values):
            if not isinstance(v, str):
                raise TreeLoadError(f"'{key}' entries must be strings", f"{path}.{key}[{i}]")
        return list(values)

    def _nodes(self, data: dict, key: str, path: str, expected: type | None = None) -> list:
        nodes = []
        for i, item in enumerate(self._list(data, key, path)):
            nodes.append(self._node(item, f"{path}.{key}[{i}]", expected))
        return nodes

    def _node(self, item: Any, path: str, expected: type | None = None):
        node = self.load(item, path)
        if expected is not None and not isinstance(node, expected):
            raise TreeLoadError(
                f"expected {expected.kind.value}, got {node.kind.value}", path)
        return node

    def _block(self, data: dict, key: str, path: str, required: bool = True) -> Block | None:
        value = data.get(key)
        if value is None:
            if required:
                raise TreeLoadError(f"missing required '{key}'", path)
            return None
        return self._node(value, f"{path}.{key}", Block)

    def _int(self, data: dict, key: str, path: str) -> int:
        if key not in data:
            return 0
        value = data[key]
        if not isinstance(value, int) or isinstance(value, bool):
            raise TreeLoadError(f"'{key}' must be an integer", f"{path}.{key}")
        return value

    def _pos(self, data: dict, path: str) -> dict:
        return {"line": self._int(data, "line", path), "col": self._int(data, "col", path)}

    # ---- Node builders ----

    def _load_compilation_unit(self, data, path):
        return CompilationUnit(members=self._nodes(data, "members", path))

    def _load_namespace(self, data, path):
        return NamespaceDecl(name=self._str(data, "name", path),
                             members=self._nodes(data, "members", path),
                             **self._pos(data, path))

    def _load_class(self, data, path):
        return ClassDecl(name=self._str(data, "name", path),
                         modifiers=self._strings(data, "modifiers", path),
                         members=self._nodes(data, "members", path),
                         **self._pos(data, path))

    def _load_variable_declarator(self, data, path):
        return VariableDeclarator(name=self._str(data, "name", path),
                                  initializer=self._opt_str(data, "initializer", path),
                                  **self._pos(data, path))

    def _load_field(self, data, path):
        return FieldDecl(modifiers=self._strings(data, "modifiers", path),
                         type=self._str(data, "type", path),
                         variables=self._nodes(data, "variables", path, VariableDeclarator),
                         **self._pos(data, path))

    def _load_accessor(self, data, path):
        return Accessor(keyword=self._str(data, "keyword", path),
                        modifiers=self._strings(data, "modifiers", path),
                        body=self._block(data, "body", path, required=False),
                        **self._pos(data, path))

    def _load_property(self, data, path):
        return PropertyDecl(modifiers=self._strings(data, "modifiers", path),
                            type=self._str(data, "type", path),
                            name=self._str(data, "name", path),
                            accessors=self._nodes(data, "accessors", path, Accessor),
                            **self._pos(data, path))

    def _load_parameter(self, data, path):
        return Param(name=self._str(data, "name", path),
                     type=self._str(data, "type", path),
                     **self._pos(data, path))

    def _load_method(self, data, path):
        return MethodDecl(modifiers=self._strings(data, "modifiers", path),
                          return_type=self._str(data, "return_type", path, "void"),
                          name=self._str(data, "name", path),
                          params=self._nodes(data, "params", path, Param),
                          body=self._block(data, "body", path, required=False),
                          **self._pos(data, path))

    def _load_block(self, data, path):
        return Block(statements=self._nodes(data, "statements", path),
                     **self._pos(data, path))

    def _load_catch(self, data, path):
        return CatchClause(identifier=self._opt_str(data, "identifier", path),
                           block=self._block(data, "block", path),
                           **self._pos(data, path))

    def _load_try(self, data, path):
        return TryStmt(block=self._block(data, "block", path),
                       catches=self._nodes(data, "catches", path, CatchClause),
                       **self._pos(data, path))

    def _load_return(self, data, path):
        return ReturnStmt(text=self._str(data, "text", path, "return;"),
                          **self._pos(data, path))

    def _load_expression_statement(self, data, path):
        return ExprStmt(text=self._str(data, "text", path), **self._pos(data, path))

    def _load_variable_declaration(self, data, path):
        return VarDeclStmt(type=self._str(data, "type", path, "var"),
                           variables=self._nodes(data, "variables", path, VariableDeclarator),
                           **self._pos(data, path))


def load_tree(data: Any):
    """Build a syntax tree from decoded JSON data."""
    return _Loader().load(data)


def load_tree_text(text: str):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeLoadError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return load_tree(data)


def load_tree_file(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return load_tree_text(f.read())
