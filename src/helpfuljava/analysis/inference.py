"""Type inference and declaration lookup by upward tree walks.

Compiler diagnostics rarely say what type a missing name should have. The
surrounding expression usually does: ``!ready`` wants a boolean, ``i < n``
wants whatever ``i`` is, ``fill(x)`` wants the declared parameter type.

``infer_type`` ascends from a node and applies the rule of the first
ancestor whose kind it understands. Proximity decides, not a global
priority. When no ancestor matches, or the matching ancestor lacks the
binding its rule needs, the result is ``"Object"``.

Thread Safety:
    Pure functions over immutable trees; safe for concurrent use.

Python 3.13+.
"""

from __future__ import annotations

from helpfuljava.constants import (
    BOOLEAN_TYPE,
    CHAR_TYPE,
    FALLBACK_TYPE,
    INT_TYPE,
    PLACEHOLDER_VARIABLE_NAME,
    STRING_TYPE,
)
from helpfuljava.core.type_names import element_type
from helpfuljava.syntax.tree import (
    DECLARATION_STATEMENT_KINDS,
    NodeKind,
    Role,
    SyntaxNode,
    SyntaxTree,
)

__all__ = [
    "BOOLEAN_INFIX_OPERATORS",
    "NUMERIC_INFIX_OPERATORS",
    "declared_name",
    "declared_type",
    "find_declaration_fragment",
    "infer_type",
    "variable_name_near",
]

BOOLEAN_INFIX_OPERATORS: frozenset[str] = frozenset({"||", "&&"})

# Arithmetic, shift, relational and bitwise operators all accept integers.
NUMERIC_INFIX_OPERATORS: frozenset[str] = frozenset({
    "*", "/", "%", "+", "-",
    "<<", ">>", ">>>",
    "<", ">", "<=", ">=",
    "^", "|", "&",
})

_LOGICAL_NOT = "!"


def infer_type(missing_name: str, tree: SyntaxTree, node: SyntaxNode | None) -> str:
    """Infer the type expected at ``node`` from its nearest understood context.

    Args:
        missing_name: Text of the missing value; matched against invocation
            arguments to pick a declared parameter type. Pass ``""`` when
            there is no particular name.
        tree: Tree containing ``node``
        node: Node to start ascending from (inclusive); None yields "Object"

    Returns:
        Type name as found in the tree (possibly qualified)
    """
    if node is None:
        return FALLBACK_TYPE
    for candidate in tree.ancestors(node):
        inferred = _type_from_context(missing_name, tree, candidate)
        if inferred is not None:
            return inferred
    return FALLBACK_TYPE


def _type_from_context(missing_name: str, tree: SyntaxTree, node: SyntaxNode) -> str | None:
    """Apply the rule for ``node``'s kind, or None if the kind has no rule."""
    match node.kind:
        case NodeKind.PREFIX_EXPRESSION:
            # Other unary operators also accept floating point, but all accept int
            return BOOLEAN_TYPE if node.operator == _LOGICAL_NOT else INT_TYPE
        case NodeKind.INFIX_EXPRESSION:
            return _type_from_infix(tree, node)
        case NodeKind.POSTFIX_EXPRESSION:
            # Only increment and decrement exist
            return INT_TYPE
        case NodeKind.CONDITIONAL_EXPRESSION:
            return BOOLEAN_TYPE
        case NodeKind.INSTANCEOF_EXPRESSION:
            return FALLBACK_TYPE
        case NodeKind.VARIABLE_DECLARATION_FRAGMENT:
            return node.resolved_type or FALLBACK_TYPE
        case NodeKind.METHOD_INVOCATION:
            return _type_from_invocation(missing_name, tree, node)
        case NodeKind.ARRAY_CREATION | NodeKind.ARRAY_ACCESS:
            return INT_TYPE
        case NodeKind.ARRAY_INITIALIZER:
            if node.resolved_type is None:
                return FALLBACK_TYPE
            return element_type(node.resolved_type)
        case NodeKind.CAST_EXPRESSION:
            cast_type = tree.child(node, Role.TYPE)
            return cast_type.text if cast_type is not None else FALLBACK_TYPE
        case NodeKind.ASSIGNMENT:
            return node.resolved_type or FALLBACK_TYPE
        case NodeKind.EXPRESSION_STATEMENT:
            expression = tree.child(node, Role.EXPRESSION)
            if expression is None or expression.resolved_type is None:
                return FALLBACK_TYPE
            return expression.resolved_type
        case NodeKind.CHARACTER_LITERAL:
            return CHAR_TYPE
        case NodeKind.BOOLEAN_LITERAL:
            return BOOLEAN_TYPE
        case NodeKind.NUMBER_LITERAL:
            return node.resolved_type or FALLBACK_TYPE
        case NodeKind.STRING_LITERAL:
            return STRING_TYPE
        case NodeKind.NULL_LITERAL:
            return FALLBACK_TYPE
        case _:
            return None


def _type_from_infix(tree: SyntaxTree, node: SyntaxNode) -> str:
    # The other operand is the best evidence
    for role in (Role.LEFT_OPERAND, Role.RIGHT_OPERAND):
        operand = tree.child(node, role)
        if operand is not None and operand.resolved_type is not None:
            return operand.resolved_type

    if node.operator in BOOLEAN_INFIX_OPERATORS:
        return BOOLEAN_TYPE
    if node.operator in NUMERIC_INFIX_OPERATORS:
        return INT_TYPE
    return BOOLEAN_TYPE


def _type_from_invocation(missing_name: str, tree: SyntaxTree, node: SyntaxNode) -> str:
    if node.method is None:
        return FALLBACK_TYPE

    arguments = [argument.text for argument in tree.children(node, Role.ARGUMENTS)]
    try:
        position = arguments.index(missing_name)
    except ValueError:
        return FALLBACK_TYPE

    parameter_types = node.method.parameter_types
    if position >= len(parameter_types):
        return FALLBACK_TYPE
    return parameter_types[position]


def find_declaration_fragment(tree: SyntaxTree, node: SyntaxNode | None) -> SyntaxNode | None:
    """Find the variable declaration fragment nearest above ``node``.

    A field declaration or local declaration statement met on the way up
    stands for its first fragment; all its variables share one type.
    """
    if node is None:
        return None
    for candidate in tree.ancestors(node):
        if candidate.kind is NodeKind.VARIABLE_DECLARATION_FRAGMENT:
            return candidate
        if candidate.kind in DECLARATION_STATEMENT_KINDS:
            return tree.child(candidate, Role.FRAGMENTS)
    return None


def declared_name(tree: SyntaxTree, fragment: SyntaxNode) -> str:
    """Name declared by a fragment."""
    name = tree.child(fragment, Role.NAME)
    if name is not None:
        return name.text
    return fragment.text.split("=", 1)[0].strip()


def declared_type(tree: SyntaxTree, fragment: SyntaxNode) -> str | None:
    """Declared type of a fragment: its binding, else its declaration's type text."""
    if fragment.resolved_type is not None:
        return fragment.resolved_type
    declaration = tree.parent(fragment)
    if declaration is None:
        return None
    type_node = tree.child(declaration, Role.TYPE)
    return type_node.text if type_node is not None else None


def variable_name_near(tree: SyntaxTree, node: SyntaxNode) -> str:
    """Name of the nearest declared variable, or a placeholder."""
    fragment = find_declaration_fragment(tree, node)
    if fragment is None:
        return PLACEHOLDER_VARIABLE_NAME
    return declared_name(tree, fragment)
