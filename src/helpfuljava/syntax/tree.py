"""Language-neutral syntax tree for one compilation unit.

Nodes are tagged variants: a ``NodeKind``, a source span and text, optional
resolved semantic information, and named child slots ("roles"). The tree is
an arena: nodes live in one tuple and refer to their parent and children by
index, so walking upward is O(depth) without mutable back-references.

Resolved bindings are present only when the producing parser finished full
binding resolution. On stale or partially-parsed units ``resolved_type`` and
``method`` are ``None`` and consumers fall back to safe defaults.

Thread Safety:
    Trees are immutable after construction and safe to share across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

__all__ = [
    "CONTROL_STATEMENT_KINDS",
    "DECLARATION_STATEMENT_KINDS",
    "MethodBinding",
    "NodeKind",
    "Role",
    "SyntaxNode",
    "SyntaxTree",
]


class NodeKind(StrEnum):
    """Syntax node kinds."""

    # Structure
    COMPILATION_UNIT = "compilation_unit"
    TYPE_DECLARATION = "type_declaration"
    METHOD_DECLARATION = "method_declaration"
    FIELD_DECLARATION = "field_declaration"
    SINGLE_VARIABLE_DECLARATION = "single_variable_declaration"
    VARIABLE_DECLARATION_STATEMENT = "variable_declaration_statement"
    VARIABLE_DECLARATION_EXPRESSION = "variable_declaration_expression"
    VARIABLE_DECLARATION_FRAGMENT = "variable_declaration_fragment"
    BLOCK = "block"

    # Statements
    EXPRESSION_STATEMENT = "expression_statement"
    RETURN_STATEMENT = "return_statement"
    FOR_STATEMENT = "for_statement"
    ENHANCED_FOR_STATEMENT = "enhanced_for_statement"
    WHILE_STATEMENT = "while_statement"
    DO_STATEMENT = "do_statement"
    IF_STATEMENT = "if_statement"
    SWITCH_STATEMENT = "switch_statement"
    TRY_STATEMENT = "try_statement"

    # Expressions
    PREFIX_EXPRESSION = "prefix_expression"
    INFIX_EXPRESSION = "infix_expression"
    POSTFIX_EXPRESSION = "postfix_expression"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    INSTANCEOF_EXPRESSION = "instanceof_expression"
    ASSIGNMENT = "assignment"
    CAST_EXPRESSION = "cast_expression"
    METHOD_INVOCATION = "method_invocation"
    ARRAY_CREATION = "array_creation"
    ARRAY_ACCESS = "array_access"
    ARRAY_INITIALIZER = "array_initializer"
    PARENTHESIZED_EXPRESSION = "parenthesized_expression"

    # Names and types
    SIMPLE_NAME = "simple_name"
    QUALIFIED_NAME = "qualified_name"
    PRIMITIVE_TYPE = "primitive_type"
    SIMPLE_TYPE = "simple_type"
    ARRAY_TYPE = "array_type"

    # Literals
    CHARACTER_LITERAL = "character_literal"
    BOOLEAN_LITERAL = "boolean_literal"
    NUMBER_LITERAL = "number_literal"
    STRING_LITERAL = "string_literal"
    NULL_LITERAL = "null_literal"

    OTHER = "other"


class Role(StrEnum):
    """Well-known child slot names.

    Any string is accepted as a role; these are the ones the classifier reads.
    """

    NAME = "name"
    TYPE = "type"
    RETURN_TYPE = "return_type"
    PARAMETERS = "parameters"
    ARGUMENTS = "arguments"
    EXPRESSION = "expression"
    FRAGMENTS = "fragments"
    LEFT_OPERAND = "left_operand"
    RIGHT_OPERAND = "right_operand"
    OPERAND = "operand"
    INITIALIZER = "initializer"
    DIMENSIONS = "dimensions"
    ARRAY = "array"
    INDEX = "index"
    BODY = "body"
    STATEMENTS = "statements"
    QUALIFIER = "qualifier"


CONTROL_STATEMENT_KINDS: frozenset[NodeKind] = frozenset({
    NodeKind.FOR_STATEMENT,
    NodeKind.TRY_STATEMENT,
    NodeKind.DO_STATEMENT,
    NodeKind.SWITCH_STATEMENT,
    NodeKind.IF_STATEMENT,
    NodeKind.ENHANCED_FOR_STATEMENT,
    NodeKind.WHILE_STATEMENT,
})

# Declarations whose first fragment stands in for the whole statement.
DECLARATION_STATEMENT_KINDS: frozenset[NodeKind] = frozenset({
    NodeKind.FIELD_DECLARATION,
    NodeKind.VARIABLE_DECLARATION_STATEMENT,
})

_NO_ROLES: Mapping[str, tuple[int, ...]] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MethodBinding:
    """Resolved method signature.

    Attributes:
        name: Method name
        parameter_types: Declared parameter type names, in order
        return_type: Declared return type name
    """

    name: str
    parameter_types: tuple[str, ...] = ()
    return_type: str = "void"


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """One node of a syntax tree arena.

    Attributes:
        index: Position of this node in its tree
        kind: Node kind
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)
        text: Source text of the node
        parent: Index of the parent node, None for the root
        roles: Child node indices by role name, in source order
        operator: Operator token for prefix, infix, postfix and assignment nodes
        resolved_type: Resolved expression type, or the declared type of a
            variable declaration fragment; None when unresolved
        method: Resolved method binding of an invocation or declaration;
            None when unresolved
    """

    index: int
    kind: NodeKind
    start: int
    end: int
    text: str = ""
    parent: int | None = None
    roles: Mapping[str, tuple[int, ...]] = field(default_factory=lambda: _NO_ROLES)
    operator: str | None = None
    resolved_type: str | None = None
    method: MethodBinding | None = None

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"SyntaxNode start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SyntaxNode end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def child_indices(self) -> tuple[int, ...]:
        """All child indices across roles."""
        return tuple(index for indices in self.roles.values() for index in indices)

    def covers(self, start: int, end: int) -> bool:
        """Check if this node's span covers the range [start, end)."""
        return self.start <= start and end <= self.end

    def is_inside(self, start: int, end: int) -> bool:
        """Check if this node's span lies inside the range [start, end)."""
        return start <= self.start and self.end <= end


class SyntaxTree:
    """Immutable arena of syntax nodes with parent links by index.

    The node at index 0 is the root.
    """

    __slots__ = ("_nodes", "source")

    def __init__(self, nodes: Sequence[SyntaxNode], *, source: str = "") -> None:
        """Initialize tree.

        Args:
            nodes: All nodes, with ``nodes[i].index == i`` and the root first
            source: Source text of the compilation unit (keyword-only)

        Raises:
            ValueError: If the nodes do not form a consistent arena
        """
        if not nodes:
            msg = "SyntaxTree requires at least a root node"
            raise ValueError(msg)
        for position, current in enumerate(nodes):
            if current.index != position:
                msg = f"Node at position {position} has index {current.index}"
                raise ValueError(msg)
            if position == 0:
                if current.parent is not None:
                    msg = "Root node must not have a parent"
                    raise ValueError(msg)
            elif current.parent is None or not 0 <= current.parent < len(nodes):
                msg = f"Node {position} has invalid parent {current.parent!r}"
                raise ValueError(msg)
            elif current.parent == position:
                msg = f"Node {position} is its own parent"
                raise ValueError(msg)
        self._nodes: tuple[SyntaxNode, ...] = tuple(nodes)
        self.source = source

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SyntaxNode]:
        return iter(self._nodes)

    @property
    def root(self) -> SyntaxNode:
        """Root node of the compilation unit."""
        return self._nodes[0]

    def node(self, index: int) -> SyntaxNode:
        """Return the node at ``index``."""
        return self._nodes[index]

    def parent(self, node: SyntaxNode | None) -> SyntaxNode | None:
        """Return the parent of ``node``, None for the root or for None."""
        if node is None or node.parent is None:
            return None
        return self._nodes[node.parent]

    def ancestors(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Yield ``node`` and then each of its ancestors up to the root."""
        current: SyntaxNode | None = node
        depth = 0
        while current is not None:
            yield current
            depth += 1
            if depth > len(self._nodes):
                # Parent links form a cycle; stop rather than loop forever
                return
            current = self.parent(current)

    def first_ancestor(
        self, node: SyntaxNode, kinds: NodeKind | frozenset[NodeKind]
    ) -> SyntaxNode | None:
        """Return the nearest node at or above ``node`` of one of ``kinds``."""
        wanted = frozenset({kinds}) if isinstance(kinds, NodeKind) else kinds
        for candidate in self.ancestors(node):
            if candidate.kind in wanted:
                return candidate
        return None

    def children(self, node: SyntaxNode, role: str | None = None) -> tuple[SyntaxNode, ...]:
        """Return children in ``role``, or all children in source order."""
        if role is None:
            found = [self._nodes[i] for i in node.child_indices]
            return tuple(sorted(found, key=lambda child: (child.start, child.index)))
        return tuple(self._nodes[i] for i in node.roles.get(role, ()))

    def child(self, node: SyntaxNode, role: str) -> SyntaxNode | None:
        """Return the first child in ``role``, or None."""
        indices = node.roles.get(role, ())
        return self._nodes[indices[0]] if indices else None

    def find(self, kind: NodeKind, text: str | None = None) -> SyntaxNode | None:
        """Return the first node (in index order) of ``kind`` with ``text``."""
        for candidate in self._nodes:
            if candidate.kind is kind and (text is None or candidate.text == text):
                return candidate
        return None

    def node_at(self, start: int, end: int) -> SyntaxNode:
        """Locate the node for a problem range [start, end).

        Prefers the outermost node lying entirely inside the range (the
        "covered" node); otherwise returns the innermost node covering the
        range. Ranges outside the unit resolve to the root.
        """
        covering = self.root
        descended = True
        while descended:
            descended = False
            for candidate in self.children(covering):
                if candidate.covers(start, end):
                    if candidate.is_inside(start, end):
                        return candidate
                    covering = candidate
                    descended = True
                    break

        if covering.start == start and covering.end == end:
            return covering
        if end > start:
            covered = self._first_covered(covering, start, end)
            if covered is not None:
                return covered
        return covering

    def _first_covered(self, node: SyntaxNode, start: int, end: int) -> SyntaxNode | None:
        for candidate in self.children(node):
            if candidate.is_inside(start, end) and candidate.end > candidate.start:
                return candidate
            if candidate.start < end and start < candidate.end:
                nested = self._first_covered(candidate, start, end)
                if nested is not None:
                    return nested
        return None
