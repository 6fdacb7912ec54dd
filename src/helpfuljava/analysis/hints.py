"""Classification results: one variant per help-page category.

Each variant carries exactly the parameters its page needs, with names and
type strings already reduced to their simple form. ``parameters()`` yields
them as ``(key, value)`` pairs in the fixed order the pages expect; the keys
and the category paths are shared with the pre-authored pages and must not
change.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias

from helpfuljava.constants import (
    LIST_SEPARATOR,
    PLACEHOLDER_CLASS_NAME,
    PLACEHOLDER_METHOD_NAME,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "Category",
    "Hint",
    "Parameters",
    # Arrays
    "ArrayMissingDimension",
    "ArrayTwoDimMismatch",
    "ArrayTwoInitializers",
    "IncorrectVariableDeclaration",
    # Methods
    "IncorrectMethodDeclaration",
    "MissingMethod",
    "ParamMismatch",
    "MissingReturn",
    "NonStaticFromStatic",
    "MethodCallOnWrongType",
    # Types and variables
    "TypeMismatch",
    "MissingType",
    "MissingVariable",
    "UninitializedVariable",
    # Syntax
    "ExtraneousClosingBrace",
    "UnexpectedToken",
    "VariableDeclaratorsSyntaxError",
]

Parameters: TypeAlias = tuple[tuple[str, str], ...]


class Category(StrEnum):
    """Help-page categories; each value is the page's path segment."""

    ARRAY_MISSING_DIMENSION = "incorrectdimensionexpression1"
    ARRAY_TWO_DIM_MISMATCH = "incorrectdimensionexpression2"
    ARRAY_TWO_INITIALIZERS = "incorrectdimensionexpression3"
    INCORRECT_VARIABLE_DECLARATION = "incorrectvariabledeclaration"
    INCORRECT_METHOD_DECLARATION = "incorrectmethoddeclaration"
    EXTRANEOUS_CLOSING_BRACE = "extraneousclosingcurlybrace"
    MISSING_METHOD = "methodnotfound"
    PARAM_MISMATCH = "parametermismatch"
    MISSING_RETURN = "returnmissing"
    TYPE_MISMATCH = "typemismatch"
    MISSING_TYPE = "typenotfound"
    MISSING_VARIABLE = "variablenotfound"
    UNINITIALIZED_VARIABLE = "variablenotinit"
    UNEXPECTED_TOKEN = "unexpectedtoken"
    NON_STATIC_FROM_STATIC = "nonstaticfromstatic"
    VARIABLE_DECLARATORS_SYNTAX_ERROR = "syntaxerrorvariabledeclarators"
    METHOD_CALL_ON_WRONG_TYPE = "methodcallonwrongtype"


def _join(values: Iterable[str]) -> str:
    return LIST_SEPARATOR.join(values)


class Hint:
    """Abstract base class for classification results.

    Never instantiated directly; every category variant overrides
    ``parameters()`` and sets ``category``.
    """

    __slots__ = ()

    category: ClassVar[Category]

    def parameters(self) -> Parameters:
        """Page parameters as ordered ``(key, value)`` pairs."""
        raise NotImplementedError


# ============================================================================
# ARRAYS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ArrayMissingDimension(Hint):
    """Array created without dimension expressions or an initializer."""

    category: ClassVar[Category] = Category.ARRAY_MISSING_DIMENSION

    type_name: str
    array_name: str

    def parameters(self) -> Parameters:
        return (("typename", self.type_name), ("arrname", self.array_name))


@dataclass(frozen=True, slots=True)
class ArrayTwoDimMismatch(Hint):
    """Second dimension given while the first is missing."""

    category: ClassVar[Category] = Category.ARRAY_TWO_DIM_MISMATCH

    type_name: str
    array_name: str

    def parameters(self) -> Parameters:
        return (("typename", self.type_name), ("arrname", self.array_name))


@dataclass(frozen=True, slots=True)
class ArrayTwoInitializers(Hint):
    """Dimension expressions combined with an initializer."""

    category: ClassVar[Category] = Category.ARRAY_TWO_INITIALIZERS

    type_name: str
    array_name: str

    def parameters(self) -> Parameters:
        return (("typename", self.type_name), ("arrname", self.array_name))


@dataclass(frozen=True, slots=True)
class IncorrectVariableDeclaration(Hint):
    """Malformed array variable declaration."""

    category: ClassVar[Category] = Category.INCORRECT_VARIABLE_DECLARATION

    type_name: str
    found_name: str

    def parameters(self) -> Parameters:
        return (("typename", self.type_name), ("foundname", self.found_name))


# ============================================================================
# METHODS
# ============================================================================


@dataclass(frozen=True, slots=True)
class IncorrectMethodDeclaration(Hint):
    """Method declared among statements (mixing active and static modes)."""

    category: ClassVar[Category] = Category.INCORRECT_METHOD_DECLARATION

    method_name: str

    def parameters(self) -> Parameters:
        return (("methodname", self.method_name),)


@dataclass(frozen=True, slots=True)
class MissingMethod(Hint):
    """Call to a method that does not exist.

    Attributes:
        method_name: Name used in the call
        return_type: Type the call's context expects
        provided_params: Source text of each argument
        provided_types: Inferred type of each argument
        correct_method_name: Suggested name shown in the corrected example
    """

    category: ClassVar[Category] = Category.MISSING_METHOD

    method_name: str
    return_type: str
    provided_params: tuple[str, ...] = ()
    provided_types: tuple[str, ...] = ()
    correct_method_name: str = PLACEHOLDER_METHOD_NAME

    def parameters(self) -> Parameters:
        return (
            ("methodname", self.method_name),
            ("correctmethodname", self.correct_method_name),
            ("typename", self.return_type),
            ("providedparams", _join(self.provided_params)),
            ("providedtypes", _join(self.provided_types)),
        )


@dataclass(frozen=True, slots=True)
class ParamMismatch(Hint):
    """Call whose argument types do not fit the resolved method."""

    category: ClassVar[Category] = Category.PARAM_MISMATCH

    class_name: str
    method_name: str
    method_return_type: str
    provided_types: tuple[str, ...] = ()
    required_types: tuple[str, ...] = ()

    def parameters(self) -> Parameters:
        return (
            ("classname", self.class_name),
            ("methodname", self.method_name),
            ("methodtypename", self.method_return_type),
            ("providedtypes", _join(self.provided_types)),
            ("requiredtypes", _join(self.required_types)),
        )


@dataclass(frozen=True, slots=True)
class MissingReturn(Hint):
    """Non-void method without a return statement."""

    category: ClassVar[Category] = Category.MISSING_RETURN

    method_name: str
    return_type: str
    required_types: tuple[str, ...] = ()

    def parameters(self) -> Parameters:
        return (
            ("methodname", self.method_name),
            ("typename", self.return_type),
            ("requiredtypes", _join(self.required_types)),
        )


@dataclass(frozen=True, slots=True)
class NonStaticFromStatic(Hint):
    """Non-static method called from a static context.

    The enclosing static method and the calling invocation are optional;
    their parameters are emitted only when they were found.
    """

    category: ClassVar[Category] = Category.NON_STATIC_FROM_STATIC

    file_name: str
    method_name: str
    static_method_name: str | None = None
    static_method_return_type: str | None = None
    method_return_type: str | None = None

    def parameters(self) -> Parameters:
        params: list[tuple[str, str]] = [("methodname", self.method_name)]
        if self.static_method_name is not None:
            params.append(("staticmethodname", self.static_method_name))
            params.append(("staticmethodreturntype", self.static_method_return_type or ""))
        if self.method_return_type is not None:
            params.append(("methodreturntype", self.method_return_type))
        params.append(("filename", self.file_name))
        return tuple(params)


@dataclass(frozen=True, slots=True)
class MethodCallOnWrongType(Hint):
    """Method invoked on a primitive or array value."""

    category: ClassVar[Category] = Category.METHOD_CALL_ON_WRONG_TYPE

    method_name: str
    return_type: str
    type_name: str
    variable_text: str

    def parameters(self) -> Parameters:
        return (
            ("methodname", self.method_name),
            ("returntype", self.return_type),
            ("typename", self.type_name),
            ("varname", self.variable_text),
        )


# ============================================================================
# TYPES AND VARIABLES
# ============================================================================


@dataclass(frozen=True, slots=True)
class TypeMismatch(Hint):
    """Value of one type used where another is required."""

    category: ClassVar[Category] = Category.TYPE_MISMATCH

    provided_type: str
    required_type: str
    variable_name: str

    def parameters(self) -> Parameters:
        return (
            ("typeonename", self.provided_type),
            ("typetwoname", self.required_type),
            ("varname", self.variable_name),
        )


@dataclass(frozen=True, slots=True)
class MissingType(Hint):
    """Reference to a type that does not exist."""

    category: ClassVar[Category] = Category.MISSING_TYPE

    missing_type: str
    variable_name: str
    correct_class_name: str = PLACEHOLDER_CLASS_NAME

    def parameters(self) -> Parameters:
        return (
            ("classname", self.missing_type),
            ("correctclassname", self.correct_class_name),
            ("varname", self.variable_name),
        )


@dataclass(frozen=True, slots=True)
class MissingVariable(Hint):
    """Reference to a variable that does not exist."""

    category: ClassVar[Category] = Category.MISSING_VARIABLE

    variable_name: str
    variable_type: str

    def parameters(self) -> Parameters:
        return (("classname", self.variable_type), ("varname", self.variable_name))


@dataclass(frozen=True, slots=True)
class UninitializedVariable(Hint):
    """Local variable read before it is assigned."""

    category: ClassVar[Category] = Category.UNINITIALIZED_VARIABLE

    variable_name: str
    variable_type: str

    def parameters(self) -> Parameters:
        return (("varname", self.variable_name), ("typename", self.variable_type))


# ============================================================================
# SYNTAX
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExtraneousClosingBrace(Hint):
    """Extra ``}`` after a block.

    Attributes:
        original: Snippet of the block followed by the extra brace
        fixed: The same snippet without the extra brace
    """

    category: ClassVar[Category] = Category.EXTRANEOUS_CLOSING_BRACE

    original: str
    fixed: str

    def parameters(self) -> Parameters:
        return (("original", self.original), ("fixed", self.fixed))


@dataclass(frozen=True, slots=True)
class UnexpectedToken(Hint):
    """Type name found where the parser expected something else."""

    category: ClassVar[Category] = Category.UNEXPECTED_TOKEN

    type_name: str

    def parameters(self) -> Parameters:
        return (("typename", self.type_name),)


@dataclass(frozen=True, slots=True)
class VariableDeclaratorsSyntaxError(Hint):
    """Statement the parser read as an incomplete variable declaration."""

    category: ClassVar[Category] = Category.VARIABLE_DECLARATORS_SYNTAX_ERROR

    expression_text: str
    type_name: str

    def parameters(self) -> Parameters:
        return (("methodonename", self.expression_text), ("typename", self.type_name))
