"""Tests for loading JSON syntax trees."""

import json

import pytest

from cs2ts.ast_nodes import (
    Accessor, Block, CatchClause, ClassDecl, CompilationUnit, FieldDecl,
    MethodDecl, NamespaceDecl, PropertyDecl, ReturnStmt, TryStmt, VarDeclStmt,
)
from cs2ts.codegen import translate
from cs2ts.loader import TreeLoadError, load_tree, load_tree_file, load_tree_text


SAMPLE = {
    "kind": "CompilationUnit",
    "members": [{
        "kind": "Namespace",
        "name": "Shop",
        "members": [{
            "kind": "Class",
            "name": "Cart",
            "modifiers": ["public"],
            "line": 3,
            "members": [
                {"kind": "Field", "type": "int", "variables": [
                    {"kind": "VariableDeclarator", "name": "count"}]},
                {"kind": "Property", "modifiers": ["public"], "type": "string", "name": "Owner",
                 "accessors": [{"kind": "Accessor", "keyword": "get"},
                               {"kind": "Accessor", "keyword": "set"}]},
                {"kind": "Method", "modifiers": ["public"], "return_type": "int", "name": "Add",
                 "params": [{"kind": "Parameter", "name": "n", "type": "int"}],
                 "body": {"kind": "Block", "statements": [
                     {"kind": "Try",
                      "block": {"kind": "Block", "statements": [
                          {"kind": "ExpressionStatement", "text": "count += n;"}]},
                      "catches": [{"kind": "Catch", "identifier": "ex",
                                   "block": {"kind": "Block"}}]},
                     {"kind": "VariableDeclaration", "type": "var", "variables": [
                         {"kind": "VariableDeclarator", "name": "total", "initializer": "count"}]},
                     {"kind": "Return", "text": "return total;"},
                 ]}},
            ],
        }],
    }],
}


class TestLoadTree:
    def test_sample_shapes(self):
        tree = load_tree(SAMPLE)
        assert isinstance(tree, CompilationUnit)
        ns = tree.members[0]
        assert isinstance(ns, NamespaceDecl) and ns.name == "Shop"
        cls = ns.members[0]
        assert isinstance(cls, ClassDecl) and cls.line == 3
        field, prop, meth = cls.members
        assert isinstance(field, FieldDecl) and field.variables[0].name == "count"
        assert isinstance(prop, PropertyDecl)
        assert all(isinstance(a, Accessor) and a.body is None for a in prop.accessors)
        assert isinstance(meth, MethodDecl) and meth.params[0].type == "int"
        try_stmt, var_decl, ret = meth.body.statements
        assert isinstance(try_stmt, TryStmt)
        assert isinstance(try_stmt.catches[0], CatchClause)
        assert isinstance(try_stmt.catches[0].block, Block)
        assert isinstance(var_decl, VarDeclStmt) and var_decl.variables[0].initializer == "count"
        assert isinstance(ret, ReturnStmt)

    def test_sample_translates(self):
        assert translate(load_tree(SAMPLE)) == "\n".join([
            "module Shop",
            "{",
            "    public class Cart",
            "    {",
            "        private count: number;",
            "        public Owner: string",
            "        public Add(n: number): number",
            "        {",
            "            try",
            "            {",
            "                count += n;",
            "            }",
            "            catch (ex)",
            "            {",
            "            }",
            "            var total = count;",
            "            return total;",
            "        }",
            "    }",
            "}",
        ])

    def test_defaults(self):
        method = load_tree({"kind": "Method", "name": "M"})
        assert method.return_type == "void"
        assert method.params == [] and method.modifiers == []
        assert method.body is None
        assert load_tree({"kind": "VariableDeclaration"}).type == "var"
        assert load_tree({"kind": "Return"}).text == "return;"


class TestLoadErrors:
    def test_unknown_kind(self):
        with pytest.raises(TreeLoadError, match="unknown node kind 'While'"):
            load_tree({"kind": "While"})

    def test_not_an_object(self):
        with pytest.raises(TreeLoadError, match=r"at \$"):
            load_tree([1, 2])

    def test_missing_name_reports_path(self):
        data = {"kind": "Namespace", "name": "N", "members": [{"kind": "Class"}]}
        with pytest.raises(TreeLoadError, match=r"'name' at \$\.members\[0\]"):
            load_tree(data)

    def test_wrong_child_kind(self):
        data = {"kind": "Field", "type": "int", "variables": [{"kind": "Return"}]}
        with pytest.raises(TreeLoadError, match="expected VariableDeclarator, got Return"):
            load_tree(data)

    def test_non_string_modifier(self):
        with pytest.raises(TreeLoadError, match=r"modifiers\[1\]"):
            load_tree({"kind": "Class", "name": "C", "modifiers": ["public", 7]})

    def test_members_not_a_list(self):
        with pytest.raises(TreeLoadError, match="must be a list"):
            load_tree({"kind": "Class", "name": "C", "members": {}})

    def test_try_requires_block(self):
        with pytest.raises(TreeLoadError, match="'block'"):
            load_tree({"kind": "Try"})

    def test_invalid_json(self):
        with pytest.raises(TreeLoadError, match="invalid JSON"):
            load_tree_text("{not json")


class TestLoadFile:
    def test_round_trip_through_file(self, tmp_path):
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")
        assert load_tree_file(str(path)) == load_tree(SAMPLE)


class TestPositions:
    def test_positions_loaded(self):
        node = load_tree({"kind": "Class", "name": "A", "line": 7, "col": 2})
        assert (node.line, node.col) == (7, 2)

    @pytest.mark.parametrize("value", ["x", None, 1.5, True])
    def test_non_integer_line_rejected(self, value):
        with pytest.raises(TreeLoadError, match=r"'line' must be an integer at \$\.line"):
            load_tree({"kind": "Class", "name": "A", "line": value})

    def test_nested_bad_col_reports_path(self):
        data = {"kind": "Namespace", "name": "N",
                "members": [{"kind": "Class", "name": "A", "col": "3"}]}
        with pytest.raises(TreeLoadError, match=r"\$\.members\[0\]\.col"):
            load_tree(data)


class TestNullDefaults:
    def test_null_return_type_defaults_to_void(self):
        method = load_tree({"kind": "Method", "name": "M", "return_type": None,
                            "body": {"kind": "Block"}})
        assert method.return_type == "void"

    def test_null_declaration_type_is_inferred(self):
        assert load_tree({"kind": "VariableDeclaration", "type": None}).type == "var"

    def test_null_required_key_still_missing(self):
        with pytest.raises(TreeLoadError, match="missing required 'name'"):
            load_tree({"kind": "Class", "name": None})
