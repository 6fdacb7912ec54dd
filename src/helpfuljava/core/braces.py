"""Brace matching over raw source text.

Used by the free-text classification surface, which receives compiler
messages without a syntax tree and has to recover structure from the text
itself.

Braces and parentheses share one nesting counter: ``{`` and ``(`` open,
``}`` and ``)`` close. Well-formed sketch code never interleaves them, so a
single counter finds the same partner a bracket-aware stack would.

Python 3.13+.
"""

from __future__ import annotations

__all__ = ["CLOSING_BRACES", "OPENING_BRACES", "find_matching_brace", "split_declarators"]

OPENING_BRACES: frozenset[str] = frozenset("{(")
CLOSING_BRACES: frozenset[str] = frozenset("})")


def find_matching_brace(code: str, index: int) -> int | None:
    """Find the brace matching the one at ``index``.

    Scans left to right from an opening brace, or right to left from a
    closing brace, counting nesting depth.

    Args:
        code: Text to search in
        index: Offset of the brace to match

    Returns:
        Offset of the matching brace, or None if the depth never returns to
        zero before the scan leaves the text

    Raises:
        ValueError: If the character at ``index`` is not a brace or parenthesis

    Example:
        >>> find_matching_brace("a { b ( c ) }", 2)
        12
        >>> find_matching_brace("a { b ( c ) }", 12)
        2
        >>> find_matching_brace("{ {", 0) is None
        True
    """
    if not 0 <= index < len(code):
        msg = f"Index {index} is outside text of length {len(code)}"
        raise ValueError(msg)

    start_char = code[index]
    if start_char in OPENING_BRACES:
        step = 1
    elif start_char in CLOSING_BRACES:
        step = -1
    else:
        msg = f"Character at index {index} is not a brace or parenthesis"
        raise ValueError(msg)

    depth = 0
    position = index
    while 0 <= position < len(code):
        char = code[position]
        if char in OPENING_BRACES:
            depth += step
        elif char in CLOSING_BRACES:
            depth -= step
        if depth == 0:
            return position
        position += step

    return None


def split_declarators(statement: str) -> list[str]:
    """Split one declaration statement into its individual declarators.

    Splits on top-level commas, skipping commas nested inside brace-delimited
    array initializers. Each piece keeps its trailing comma (or, for the last
    piece, whatever terminator the statement text ends with).

    Args:
        statement: Text of a single declaration statement

    Returns:
        Declarator substrings in source order; an empty trailing remainder is
        not included

    Example:
        >>> split_declarators("a = new int[5], b = {1,2,3}, c = new int[1];")
        ['a = new int[5],', ' b = {1,2,3},', ' c = new int[1];']
    """
    declarators: list[str] = []
    piece_start = 0
    position = 0
    while position < len(statement):
        char = statement[position]
        if char == "{":
            match = find_matching_brace(statement, position)
            if match is None:
                # Unterminated initializer: the rest is one declarator
                break
            position = match + 1
        elif char == ",":
            declarators.append(statement[piece_start : position + 1])
            piece_start = position + 1
            position += 1
        else:
            position += 1

    remainder = statement[piece_start:]
    if remainder:
        declarators.append(remainder)

    return declarators
