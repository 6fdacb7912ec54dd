"""Shared constants for helpfuljava.

This module provides centralized constants used across the analysis and
runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Addressing: Where the help pages live and the global page parameters
- Fallback names: Values used when the syntax tree cannot tell us more
- Placeholders: Suggested names shown on pages that need a "correct" example

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Addressing
    "DEFAULT_BASE_ADDRESS",
    "DEFAULT_FONT_SIZE",
    "EMBED_PARAM",
    "FONT_SIZE_PARAM",
    "LIST_SEPARATOR",
    # Fallback names
    "FALLBACK_TYPE",
    "VOID_TYPE",
    "BOOLEAN_TYPE",
    "INT_TYPE",
    "CHAR_TYPE",
    "STRING_TYPE",
    # Placeholders
    "PLACEHOLDER_VARIABLE_NAME",
    "PLACEHOLDER_METHOD_NAME",
    "PLACEHOLDER_CLASS_NAME",
]

# ============================================================================
# ADDRESSING
# ============================================================================

# Base address of the help page server. Category paths are appended directly,
# so the address must end with a slash.
DEFAULT_BASE_ADDRESS: str = "http://139.147.9.247/"

# Base font size in points used by embedded pages when none is configured.
DEFAULT_FONT_SIZE: int = 12

# Global parameter keys appended to every identifier in embed mode.
EMBED_PARAM: str = "embed"
FONT_SIZE_PARAM: str = "fontsize"

# Separator for list-valued parameters (argument texts, parameter types).
LIST_SEPARATOR: str = ","

# ============================================================================
# FALLBACK NAMES
# ============================================================================

# Type reported whenever inference has nothing to go on.
FALLBACK_TYPE: str = "Object"

VOID_TYPE: str = "void"
BOOLEAN_TYPE: str = "boolean"
INT_TYPE: str = "int"
CHAR_TYPE: str = "char"
STRING_TYPE: str = "String"

# ============================================================================
# PLACEHOLDERS
# ============================================================================

PLACEHOLDER_VARIABLE_NAME: str = "example"
PLACEHOLDER_METHOD_NAME: str = "correctName"
PLACEHOLDER_CLASS_NAME: str = "CorrectName"
