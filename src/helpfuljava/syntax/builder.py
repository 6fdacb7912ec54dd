"""Syntax tree construction.

Parsers and tests describe trees as nested ``NodeSpec`` values; the builders
flatten them into a ``SyntaxTree`` arena in preorder, assigning parent
indices and source spans.

Two entry points:
    build_tree: Locate each spec's text inside its parent's span in the
        source, left to right. Children must be listed in source order.
    tree_from_dict: Load the JSON-friendly form emitted by an external
        parser, with explicit offsets.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from helpfuljava.diagnostics.errors import TreeBuildError

from .tree import MethodBinding, NodeKind, SyntaxNode, SyntaxTree

__all__ = ["NodeSpec", "build_tree", "node", "tree_from_dict"]


@dataclass(frozen=True, slots=True)
class NodeSpec:
    """Description of one node and its subtree, before spans are assigned.

    Attributes:
        kind: Node kind
        text: Exact source text of the node
        children: (role, spec) pairs in source order
        operator: Operator token, if the node has one
        resolved_type: Resolved type name, if binding resolution succeeded
        method: Resolved method binding, if binding resolution succeeded
    """

    kind: NodeKind
    text: str
    children: tuple[tuple[str, NodeSpec], ...] = ()
    operator: str | None = None
    resolved_type: str | None = None
    method: MethodBinding | None = None


def node(
    kind: NodeKind,
    text: str,
    *children: tuple[str, NodeSpec],
    operator: str | None = None,
    resolved_type: str | None = None,
    method: MethodBinding | None = None,
) -> NodeSpec:
    """Describe a node; children are ``(role, spec)`` pairs in source order.

    Example:
        >>> spec = node(
        ...     NodeKind.INFIX_EXPRESSION, "i < n",
        ...     ("left_operand", node(NodeKind.SIMPLE_NAME, "i", resolved_type="int")),
        ...     ("right_operand", node(NodeKind.SIMPLE_NAME, "n")),
        ...     operator="<",
        ... )
        >>> build_tree("i < n", spec).root.operator
        '<'
    """
    return NodeSpec(
        kind=kind,
        text=text,
        children=tuple(children),
        operator=operator,
        resolved_type=resolved_type,
        method=method,
    )


class _Arena:
    """Collects nodes in preorder while a spec tree is flattened."""

    __slots__ = ("slots",)

    def __init__(self) -> None:
        self.slots: list[SyntaxNode | None] = []

    def reserve(self) -> int:
        self.slots.append(None)
        return len(self.slots) - 1

    def place(self, built: SyntaxNode) -> None:
        self.slots[built.index] = built

    def freeze(self, source: str) -> SyntaxTree:
        nodes = [slot for slot in self.slots if slot is not None]
        return SyntaxTree(nodes, source=source)


def _freeze_roles(roles: dict[str, list[int]]) -> Mapping[str, tuple[int, ...]]:
    return MappingProxyType({role: tuple(indices) for role, indices in roles.items()})


def build_tree(source: str, root: NodeSpec, *, offset: int | None = None) -> SyntaxTree:
    """Flatten a spec tree into an arena, locating spans in ``source``.

    Args:
        source: Source text of the compilation unit
        root: Spec of the root node
        offset: Start offset of the root (keyword-only); defaults to the
            first occurrence of the root's text

    Returns:
        The built tree

    Raises:
        TreeBuildError: If a node's text cannot be found inside its parent's
            span after its preceding siblings
    """
    root_start = source.find(root.text) if offset is None else offset
    if root_start < 0 or source[root_start : root_start + len(root.text)] != root.text:
        msg = f"Root text {root.text!r} not found in source"
        raise TreeBuildError(msg)

    arena = _Arena()
    _place_spec(arena, source, root, root_start, parent=None)
    return arena.freeze(source)


def _place_spec(
    arena: _Arena, source: str, spec: NodeSpec, start: int, *, parent: int | None
) -> int:
    index = arena.reserve()
    end = start + len(spec.text)
    roles: dict[str, list[int]] = {}

    cursor = start
    for role, child in spec.children:
        child_start = source.find(child.text, cursor, end)
        if child_start < 0:
            msg = (
                f"Child {child.kind} text {child.text!r} not found in "
                f"{spec.kind} span [{cursor}, {end})"
            )
            raise TreeBuildError(msg)
        roles.setdefault(role, []).append(
            _place_spec(arena, source, child, child_start, parent=index)
        )
        cursor = child_start + len(child.text)

    arena.place(
        SyntaxNode(
            index=index,
            kind=spec.kind,
            start=start,
            end=end,
            text=spec.text,
            parent=parent,
            roles=_freeze_roles(roles),
            operator=spec.operator,
            resolved_type=spec.resolved_type,
            method=spec.method,
        )
    )
    return index


def tree_from_dict(data: Mapping[str, Any], *, source: str = "") -> SyntaxTree:
    """Load a tree from its JSON-friendly form.

    Each node is a mapping with ``kind``, ``start`` and ``end``, and
    optionally ``text`` (defaults to the source slice), ``operator``,
    ``type``, ``method`` (``name``, ``parameter_types``, ``return_type``) and
    ``children`` (a list of node mappings each carrying a ``role``).

    Raises:
        TreeBuildError: If a node mapping is missing fields or names an
            unknown kind
    """
    arena = _Arena()
    _place_dict(arena, data, source, parent=None)
    return arena.freeze(source)


def _method_from_dict(data: Mapping[str, Any] | None) -> MethodBinding | None:
    if data is None:
        return None
    return MethodBinding(
        name=str(data.get("name", "")),
        parameter_types=tuple(str(t) for t in data.get("parameter_types", ())),
        return_type=str(data.get("return_type", "void")),
    )


def _place_dict(
    arena: _Arena, data: Mapping[str, Any], source: str, *, parent: int | None
) -> int:
    try:
        kind = NodeKind(data["kind"])
        start = int(data["start"])
        end = int(data["end"])
    except KeyError as e:
        msg = f"Node mapping is missing field {e}"
        raise TreeBuildError(msg) from e
    except (TypeError, ValueError) as e:
        msg = f"Invalid node mapping: {e}"
        raise TreeBuildError(msg) from e

    index = arena.reserve()
    roles: dict[str, list[int]] = {}
    children: Sequence[Mapping[str, Any]] = data.get("children", ())
    for child in children:
        role = str(child.get("role", ""))
        roles.setdefault(role, []).append(_place_dict(arena, child, source, parent=index))

    try:
        built = SyntaxNode(
            index=index,
            kind=kind,
            start=start,
            end=end,
            text=str(data.get("text", source[start:end])),
            parent=parent,
            roles=_freeze_roles(roles),
            operator=data.get("operator"),
            resolved_type=data.get("type"),
            method=_method_from_dict(data.get("method")),
        )
    except ValueError as e:
        msg = f"Invalid node span: {e}"
        raise TreeBuildError(msg) from e
    arena.place(built)
    return index
