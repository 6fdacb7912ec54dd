"""Problem classifier: compiler diagnostic -> help-page hint.

Maps each diagnostic code to a handler that inspects the problem node and
its ancestors to fill in the page parameters the diagnostic itself lacks.

Contract:
    - Pure: never mutates the tree, keeps no state between calls
    - Total: unmapped codes, structural mismatches and unresolved bindings
      yield None or fallback names, never exceptions

Thread Safety:
    Stateless; safe to call concurrently for different diagnostics.

Python 3.13+.
"""

from __future__ import annotations

import logging

from helpfuljava.constants import FALLBACK_TYPE, INT_TYPE, VOID_TYPE
from helpfuljava.core.type_names import could_be_type, element_type, trim_type
from helpfuljava.diagnostics.codes import Diagnostic, ProblemCode
from helpfuljava.syntax.tree import CONTROL_STATEMENT_KINDS, NodeKind, Role, SyntaxNode, SyntaxTree

from .hints import (
    ArrayMissingDimension,
    ArrayTwoDimMismatch,
    ArrayTwoInitializers,
    Hint,
    IncorrectVariableDeclaration,
    MethodCallOnWrongType,
    MissingMethod,
    MissingReturn,
    MissingType,
    MissingVariable,
    NonStaticFromStatic,
    ParamMismatch,
    TypeMismatch,
    UnexpectedToken,
    UninitializedVariable,
    VariableDeclaratorsSyntaxError,
)
from .inference import (
    declared_name,
    declared_type,
    find_declaration_fragment,
    infer_type,
    variable_name_near,
)

__all__ = ["classify", "classify_node", "unexpected_token"]

logger = logging.getLogger(__name__)

# Problem arguments naming the syntax the parser wanted to insert
VARIABLE_DECLARATORS_ARGUMENT = "VariableDeclarators"
DIMENSIONS_ARGUMENT = "Dimensions"


def classify(diagnostic: Diagnostic, tree: SyntaxTree) -> Hint | None:
    """Classify a diagnostic, locating its problem node in ``tree``.

    Args:
        diagnostic: Compiler problem to classify
        tree: Syntax tree of the compiled unit

    Returns:
        The hint for the problem, or None if it is not classifiable
    """
    problem_node = tree.node_at(diagnostic.source_start, diagnostic.source_end)
    return classify_node(diagnostic, tree, problem_node)


def classify_node(diagnostic: Diagnostic, tree: SyntaxTree, problem_node: SyntaxNode) -> Hint | None:
    """Classify a diagnostic whose problem node is already known."""
    hint = _dispatch(diagnostic, tree, problem_node)
    if hint is None:
        logger.debug("Unclassified problem %s at [%d, %d)",
                     diagnostic.code, diagnostic.source_start, diagnostic.source_end)
    else:
        logger.debug("Classified problem %s as %s", diagnostic.code, hint.category)
    return hint


def _dispatch(diagnostic: Diagnostic, tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    match diagnostic.code:
        case ProblemCode.MUST_DEFINE_EITHER_DIMENSION_EXPRESSIONS_OR_INITIALIZER:
            return _array_missing_dimension(tree, node)
        case ProblemCode.ILLEGAL_DIMENSION:
            return _array_creation_hint(ArrayTwoDimMismatch, tree, node)
        case ProblemCode.CANNOT_DEFINE_DIMENSION_EXPRESSIONS_WITH_INIT:
            return _array_creation_hint(ArrayTwoInitializers, tree, node)
        case ProblemCode.UNDEFINED_METHOD:
            return _missing_method(tree, node)
        case ProblemCode.PARAMETER_MISMATCH:
            return _param_mismatch(diagnostic, tree, node)
        case ProblemCode.SHOULD_RETURN_VALUE:
            return _missing_return(tree, node)
        case ProblemCode.TYPE_MISMATCH | ProblemCode.RETURN_TYPE_MISMATCH:
            return TypeMismatch(
                provided_type=trim_type(diagnostic.argument(0)),
                required_type=trim_type(diagnostic.argument(1)),
                variable_name=variable_name_near(tree, node),
            )
        case ProblemCode.UNDEFINED_TYPE:
            return MissingType(
                missing_type=trim_type(diagnostic.argument(0)),
                variable_name=variable_name_near(tree, node),
            )
        case ProblemCode.UNRESOLVED_VARIABLE:
            name = diagnostic.argument(0)
            return MissingVariable(
                variable_name=name,
                variable_type=trim_type(infer_type(name, tree, tree.parent(node))),
            )
        case ProblemCode.UNINITIALIZED_LOCAL_VARIABLE:
            name = diagnostic.argument(0)
            return UninitializedVariable(
                variable_name=name,
                variable_type=trim_type(infer_type(name, tree, tree.parent(node))),
            )
        case ProblemCode.STATIC_METHOD_REQUESTED:
            return _non_static_from_static(diagnostic, tree, node)
        case ProblemCode.UNDEFINED_FIELD | ProblemCode.UNDEFINED_NAME:
            return _variable_declarators(tree, node)
        case ProblemCode.PARSING_ERROR_INSERT_TO_COMPLETE:
            return _insert_to_complete(diagnostic, tree, node)
        case ProblemCode.PARSING_ERROR_DELETE_TOKEN:
            return unexpected_token(diagnostic.argument(0))
        case ProblemCode.NO_MESSAGE_SEND_ON_BASE_TYPE | ProblemCode.NO_MESSAGE_SEND_ON_ARRAY_TYPE:
            return _method_call_on_wrong_type(diagnostic, tree, node)
        case _:
            return None


def unexpected_token(token: str) -> UnexpectedToken | None:
    """Hint for an unexpected token, only if the token could name a type."""
    if not could_be_type(token):
        return None
    return UnexpectedToken(type_name=trim_type(token))


# ============================================================================
# ARRAYS
# ============================================================================


def _array_missing_dimension(tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    fragment = find_declaration_fragment(tree, node)
    if fragment is None:
        return None
    return ArrayMissingDimension(type_name=trim_type(node.text), array_name=declared_name(tree, fragment))


def _array_creation_hint(
    variant: type[ArrayTwoDimMismatch] | type[ArrayTwoInitializers],
    tree: SyntaxTree,
    node: SyntaxNode,
) -> Hint | None:
    creation = tree.parent(node)
    fragment = find_declaration_fragment(tree, node)
    if creation is None or creation.kind is not NodeKind.ARRAY_CREATION or fragment is None:
        return None

    array_type = _creation_type(tree, creation)
    return variant(
        type_name=trim_type(element_type(array_type)) if array_type else FALLBACK_TYPE,
        array_name=declared_name(tree, fragment),
    )


def _creation_type(tree: SyntaxTree, creation: SyntaxNode) -> str:
    type_node = tree.child(creation, Role.TYPE)
    if type_node is not None:
        return type_node.text
    return creation.resolved_type or ""


def _incorrect_variable_declaration(tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    fragment = find_declaration_fragment(tree, node)
    if fragment is None:
        return None

    array_type = declared_type(tree, fragment)
    parent = tree.parent(node)
    if not array_type and parent is not None and parent.kind is NodeKind.ARRAY_CREATION:
        array_type = _creation_type(tree, parent)

    type_name = trim_type(element_type(array_type)) if array_type else FALLBACK_TYPE
    return IncorrectVariableDeclaration(type_name=type_name, found_name=declared_name(tree, fragment))


# ============================================================================
# METHODS
# ============================================================================


def _method_name(tree: SyntaxTree, owner: SyntaxNode, fallback: str) -> str:
    name = tree.child(owner, Role.NAME)
    return name.text if name is not None else fallback


def _missing_method(tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    invocation = tree.parent(node)
    if invocation is None or invocation.kind is not NodeKind.METHOD_INVOCATION:
        return None

    arguments = tree.children(invocation, Role.ARGUMENTS)
    return MissingMethod(
        method_name=_method_name(tree, invocation, node.text),
        return_type=trim_type(infer_type("", tree, tree.parent(invocation))),
        provided_params=tuple(argument.text for argument in arguments),
        provided_types=tuple(
            trim_type(infer_type("", tree, tree.parent(argument))) for argument in arguments
        ),
    )


def _param_mismatch(diagnostic: Diagnostic, tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    invocation = tree.parent(node)
    if invocation is None or invocation.kind is not NodeKind.METHOD_INVOCATION:
        return None
    binding = invocation.method
    if binding is None:
        return None

    arguments = tree.children(invocation, Role.ARGUMENTS)
    return ParamMismatch(
        class_name=trim_type(diagnostic.argument(0)),
        method_name=_method_name(tree, invocation, binding.name),
        method_return_type=trim_type(binding.return_type),
        provided_types=tuple(trim_type(infer_type("", tree, argument)) for argument in arguments),
        required_types=tuple(trim_type(t) for t in binding.parameter_types),
    )


def _missing_return(tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    declaration = tree.parent(node)
    if declaration is None or declaration.kind is not NodeKind.METHOD_DECLARATION:
        return None
    binding = declaration.method
    if binding is None:
        return None

    return_type = tree.child(declaration, Role.RETURN_TYPE)
    return MissingReturn(
        method_name=_method_name(tree, declaration, binding.name),
        return_type=trim_type(return_type.text if return_type is not None else binding.return_type),
        required_types=tuple(trim_type(t) for t in binding.parameter_types),
    )


def _non_static_from_static(diagnostic: Diagnostic, tree: SyntaxTree, node: SyntaxNode) -> Hint:
    declaration = tree.first_ancestor(node, NodeKind.METHOD_DECLARATION)
    invocation = tree.first_ancestor(node, NodeKind.METHOD_INVOCATION)

    static_name: str | None = None
    static_return_type: str | None = None
    if declaration is not None:
        fallback_name = declaration.method.name if declaration.method is not None else ""
        static_name = _method_name(tree, declaration, fallback_name)
        return_type = tree.child(declaration, Role.RETURN_TYPE)
        if return_type is not None:
            static_return_type = trim_type(return_type.text)
        elif declaration.method is not None:
            static_return_type = trim_type(declaration.method.return_type)
        else:
            static_return_type = VOID_TYPE

    called_return_type: str | None = None
    if invocation is not None and invocation.method is not None:
        called_return_type = trim_type(invocation.method.return_type)

    return NonStaticFromStatic(
        file_name=diagnostic.argument(0),
        method_name=diagnostic.argument(1),
        static_method_name=static_name,
        static_method_return_type=static_return_type,
        method_return_type=called_return_type,
    )


def _method_call_on_wrong_type(diagnostic: Diagnostic, tree: SyntaxTree, node: SyntaxNode) -> Hint:
    return_type = VOID_TYPE
    invocation = tree.first_ancestor(node, NodeKind.METHOD_INVOCATION)
    if invocation is not None:
        context = tree.parent(invocation)
        # A bare statement call whose value goes nowhere reads as void
        if context is not None and not _is_untyped_statement(tree, context):
            return_type = trim_type(infer_type("", tree, context))

    return MethodCallOnWrongType(
        method_name=diagnostic.argument(1),
        return_type=return_type,
        type_name=trim_type(diagnostic.argument(0)),
        variable_text=node.text,
    )


def _is_untyped_statement(tree: SyntaxTree, node: SyntaxNode) -> bool:
    if node.kind is not NodeKind.EXPRESSION_STATEMENT:
        return False
    expression = tree.child(node, Role.EXPRESSION)
    return expression is None or expression.resolved_type is None


# ============================================================================
# SYNTAX
# ============================================================================


def _variable_declarators(tree: SyntaxTree, node: SyntaxNode) -> Hint:
    parent = tree.parent(node)
    expression_text = node.text
    if parent is not None and parent.kind is NodeKind.QUALIFIED_NAME:
        expression_text = parent.text
    return VariableDeclaratorsSyntaxError(
        expression_text=expression_text,
        type_name=trim_type(infer_type("", tree, parent)),
    )


def _is_array_field(tree: SyntaxTree, node: SyntaxNode | None) -> bool:
    if node is None or node.kind is not NodeKind.FIELD_DECLARATION:
        return False
    field_type = tree.child(node, Role.TYPE)
    return field_type is not None and field_type.kind is NodeKind.ARRAY_TYPE


def _insert_to_complete(diagnostic: Diagnostic, tree: SyntaxTree, node: SyntaxNode) -> Hint | None:
    if diagnostic.has_argument(VARIABLE_DECLARATORS_ARGUMENT):
        return _variable_declarators(tree, node)

    parent = tree.parent(node)
    grandparent = tree.parent(parent)
    if (
        (parent is not None and parent.kind is NodeKind.ARRAY_CREATION)
        or (grandparent is not None and grandparent.kind is NodeKind.ARRAY_ACCESS)
        or diagnostic.has_argument(DIMENSIONS_ARGUMENT)
        or _is_array_field(tree, parent)
    ):
        return _incorrect_variable_declaration(tree, node)

    # Broken control structures are almost always about an integer condition
    for nearby in (node, parent, grandparent):
        if nearby is not None and nearby.kind in CONTROL_STATEMENT_KINDS:
            return unexpected_token(INT_TYPE)

    return None
