"""Diagnostic inputs and error types.

Provides the compiler-problem value consumed by the classifier and the
package exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ProblemCode
from .errors import HelpfulJavaError, ParameterEncodingError, TreeBuildError

__all__ = [
    "Diagnostic",
    "HelpfulJavaError",
    "ParameterEncodingError",
    "ProblemCode",
    "TreeBuildError",
]
