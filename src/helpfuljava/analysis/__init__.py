"""Problem classification.

Maps compiler diagnostics (with their syntax tree) and run-time sketch
error messages (with raw source text) to help-page hints.

Python 3.13+.
"""

from .classifier import classify, classify_node, unexpected_token
from .hints import (
    ArrayMissingDimension,
    ArrayTwoDimMismatch,
    ArrayTwoInitializers,
    Category,
    ExtraneousClosingBrace,
    Hint,
    IncorrectMethodDeclaration,
    IncorrectVariableDeclaration,
    MethodCallOnWrongType,
    MissingMethod,
    MissingReturn,
    MissingType,
    MissingVariable,
    NonStaticFromStatic,
    Parameters,
    ParamMismatch,
    TypeMismatch,
    UnexpectedToken,
    UninitializedVariable,
    VariableDeclaratorsSyntaxError,
)
from .inference import infer_type
from .sketch_errors import classify_sketch_error

__all__ = [
    "ArrayMissingDimension",
    "ArrayTwoDimMismatch",
    "ArrayTwoInitializers",
    "Category",
    "ExtraneousClosingBrace",
    "Hint",
    "IncorrectMethodDeclaration",
    "IncorrectVariableDeclaration",
    "MethodCallOnWrongType",
    "MissingMethod",
    "MissingReturn",
    "MissingType",
    "MissingVariable",
    "NonStaticFromStatic",
    "ParamMismatch",
    "Parameters",
    "TypeMismatch",
    "UnexpectedToken",
    "UninitializedVariable",
    "VariableDeclaratorsSyntaxError",
    "classify",
    "classify_node",
    "classify_sketch_error",
    "infer_type",
    "unexpected_token",
]
