"""Core utilities shared across analysis and runtime layers.

This package provides foundational string utilities that both the analysis
layer (classification, type inference) and the runtime layer (identifier
assembly) depend on. By isolating these utilities here, we maintain a clean
dependency graph:

    core <- syntax <- analysis <- runtime

Exports:
    trim_type: Reduce a qualified type name to its simple name
    element_type: Strip one array dimension from a type's text
    could_be_type: Check whether a token is lexically an identifier
    find_matching_brace: Locate the partner of a brace in raw text
    split_declarators: Split a declaration statement into declarators

Python 3.13+.
"""

from .braces import find_matching_brace, split_declarators
from .type_names import could_be_type, element_type, is_identifier_part, trim_type

__all__ = [
    "could_be_type",
    "element_type",
    "find_matching_brace",
    "is_identifier_part",
    "split_declarators",
    "trim_type",
]
