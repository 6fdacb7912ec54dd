"""Type-name and identifier helpers shared by analysis and runtime layers.

Help pages show simple type names ("String", not "java.lang.String"), so every
name taken from a compiler diagnostic or a resolved binding passes through
``trim_type`` before it reaches a page parameter.

Identifier Characters:
    A token "could be a type" when every character may appear inside a Java
    identifier: letters, digits, currency symbols, connecting punctuation
    (such as ``_``), combining marks, letter numbers, and ignorable control
    characters.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import unicodedata

__all__ = [
    "could_be_type",
    "element_type",
    "is_identifier_part",
    "trim_type",
]

# Unicode general categories allowed anywhere inside a Java identifier.
_IDENTIFIER_PART_CATEGORIES: frozenset[str] = frozenset({
    "Lu", "Ll", "Lt", "Lm", "Lo",  # letters
    "Nd", "Nl",  # decimal digits, letter numbers
    "Sc",  # currency symbols ($)
    "Pc",  # connecting punctuation (_)
    "Mn", "Mc",  # combining marks
    "Cf",  # format controls (ignorable)
})


def _is_ignorable_control(ch: str) -> bool:
    code = ord(ch)
    return 0x00 <= code <= 0x08 or 0x0E <= code <= 0x1B or 0x7F <= code <= 0x9F


def is_identifier_part(ch: str) -> bool:
    """Check if a character may appear inside a Java identifier.

    Args:
        ch: Single character to check

    Returns:
        True if the character is a valid identifier part

    Example:
        >>> is_identifier_part("a")
        True
        >>> is_identifier_part("$")
        True
        >>> is_identifier_part("[")
        False
    """
    if len(ch) != 1:
        return False
    return unicodedata.category(ch) in _IDENTIFIER_PART_CATEGORIES or _is_ignorable_control(ch)


def could_be_type(token: str) -> bool:
    """Check if a token could name a type.

    Empty tokens never name a type.

    Example:
        >>> could_be_type("float")
        True
        >>> could_be_type(")")
        False
    """
    return bool(token) and all(is_identifier_part(ch) for ch in token)


def trim_type(type_name: str) -> str:
    """Reduce a possibly-qualified type name to its last segment.

    Idempotent: ``trim_type(trim_type(t)) == trim_type(t)``.

    Example:
        >>> trim_type("java.lang.String")
        'String'
        >>> trim_type("int")
        'int'
        >>> trim_type("")
        ''
    """
    if not type_name:
        return ""
    return type_name[type_name.rfind(".") + 1 :]


def element_type(array_type: str) -> str:
    """Strip the first ``[]`` occurrence from an array type's text.

    Non-array types are returned unchanged.

    Example:
        >>> element_type("float[]")
        'float'
        >>> element_type("int[][]")
        'int[]'
        >>> element_type("String")
        'String'
    """
    return array_type.replace("[]", "", 1)
