"""Hypothesis strategies for helpfuljava property-based testing.

Strategies are organized by domain:

- java: Identifiers, type names and brace text
- diagnostics: ProblemCode and Diagnostic values

Usage:
    from tests.strategies import type_names, diagnostics
    from tests.strategies.java import balanced_brace_text
"""

from .diagnostics import diagnostics, problem_codes, unmapped_codes
from .java import (
    IDENTIFIER_FIRST_CHARS,
    IDENTIFIER_REST_CHARS,
    NON_IDENTIFIER_CHARS,
    PRIMITIVE_TYPES,
    balanced_brace_text,
    java_identifiers,
    qualified_type_names,
    simple_type_names,
    type_names,
)

__all__ = [
    "IDENTIFIER_FIRST_CHARS",
    "IDENTIFIER_REST_CHARS",
    "NON_IDENTIFIER_CHARS",
    "PRIMITIVE_TYPES",
    "balanced_brace_text",
    "diagnostics",
    "java_identifiers",
    "problem_codes",
    "qualified_type_names",
    "simple_type_names",
    "type_names",
    "unmapped_codes",
]
