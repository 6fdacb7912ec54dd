"""helpfuljava - contextual help pages for sketch compiler errors.

Classifies compiler problems against the sketch's syntax tree, recovers the
names and types the raw diagnostic leaves out, and builds the identifier of
the pre-authored help page for that exact situation.

Public API:
    classify - Compiler diagnostic + syntax tree -> hint (or None)
    classify_sketch_error - Run-time error message + source text -> hint
    HintResolver - Hint -> parameterized page identifier
    ResolverConfig - Base address, embed mode and font size
    HintSession - Last identifier with change notification
    identifier_for - Diagnostic batch -> identifier, with default fallback

Exceptions:
    HelpfulJavaError - Base exception class
    TreeBuildError - Inconsistent syntax tree input
    ParameterEncodingError - Page parameter cannot be encoded

Submodules:
    helpfuljava.syntax - Syntax tree model and builders
    helpfuljava.analysis - Hint variants, type inference, classifiers
    helpfuljava.diagnostics - Problem codes and exceptions
    helpfuljava.core - Type-name and brace utilities
"""

from .analysis import Category, Hint, classify, classify_sketch_error
from .diagnostics import (
    Diagnostic,
    HelpfulJavaError,
    ParameterEncodingError,
    ProblemCode,
    TreeBuildError,
)
from .runtime import HintResolver, HintSession, ResolverConfig, identifier_for
from .syntax import SyntaxTree

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("helpfuljava")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Category",
    "Diagnostic",
    "HelpfulJavaError",
    "Hint",
    "HintResolver",
    "HintSession",
    "ParameterEncodingError",
    "ProblemCode",
    "ResolverConfig",
    "SyntaxTree",
    "TreeBuildError",
    "__version__",
    "classify",
    "classify_sketch_error",
    "identifier_for",
]
