"""Syntax tree model for one compilation unit.

Exports:
    SyntaxTree, SyntaxNode: Immutable arena tree with parent links by index
    NodeKind, Role: Node kinds and well-known child slots
    MethodBinding: Resolved method signature
    node, build_tree, tree_from_dict: Tree construction

Python 3.13+.
"""

from .builder import NodeSpec, build_tree, node, tree_from_dict
from .tree import (
    CONTROL_STATEMENT_KINDS,
    DECLARATION_STATEMENT_KINDS,
    MethodBinding,
    NodeKind,
    Role,
    SyntaxNode,
    SyntaxTree,
)

__all__ = [
    "CONTROL_STATEMENT_KINDS",
    "DECLARATION_STATEMENT_KINDS",
    "MethodBinding",
    "NodeKind",
    "NodeSpec",
    "Role",
    "SyntaxNode",
    "SyntaxTree",
    "build_tree",
    "node",
    "tree_from_dict",
]
