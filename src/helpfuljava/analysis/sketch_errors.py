"""Classification of run-time sketch errors from raw source text.

Errors raised when a sketch is run arrive as a message and a position, with
no syntax tree. The hints here recover what they need from the text above
the error: the block before a stray brace, the declarators of a broken
array declaration, or the name of a method declared among statements.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from helpfuljava.core.braces import find_matching_brace, split_declarators
from helpfuljava.core.type_names import is_identifier_part, trim_type

from .classifier import unexpected_token
from .hints import (
    ExtraneousClosingBrace,
    Hint,
    IncorrectMethodDeclaration,
    IncorrectVariableDeclaration,
)

__all__ = [
    "MIXED_MODES_MESSAGE",
    "STRAY_BRACE_MESSAGE",
    "classify_sketch_error",
    "extraneous_closing_brace",
    "incorrect_method_declaration",
    "incorrect_variable_declaration",
]

logger = logging.getLogger(__name__)

STRAY_BRACE_MESSAGE = "expecting EOF, found '}'"
EXPECTING_DOT_PREFIX = "expecting DOT"
MIXED_MODES_MESSAGE = 'It looks like you\'re mixing "active" and "static" modes.'
UNEXPECTED_TOKEN_PREFIX = "unexpected token:"

# Body placed between the braces of the reconstructed block
_BODY_PLACEHOLDER = "\n  /* your code */\n"

# A well-formed array declarator: ``name = new T[n],`` or ``name = {...};``
_VALID_ARRAY_DECLARATOR: re.Pattern[str] = re.compile(
    r"\s*[\w$]+\s*=\s*(new\s*[\w$]+\s*\[\d+]|\{.*})\s*[,;]"
)
_NAME_DELIMITER: re.Pattern[str] = re.compile(r"[^\w$]")


def classify_sketch_error(message: str, source: str, error_offset: int) -> Hint | None:
    """Classify a run-time sketch error.

    Args:
        message: Error message reported for the sketch
        source: Full sketch source text
        error_offset: Offset of the error position in ``source``

    Returns:
        The hint for the error, or None if the message is not recognized
    """
    error_offset = max(0, min(error_offset, len(source)))
    text_above_error = source[:error_offset]

    if message == STRAY_BRACE_MESSAGE:
        hint: Hint | None = extraneous_closing_brace(text_above_error)
    elif message.startswith(EXPECTING_DOT_PREFIX):
        hint = incorrect_variable_declaration(source, error_offset)
    elif message == MIXED_MODES_MESSAGE:
        hint = incorrect_method_declaration(text_above_error)
    elif message.startswith(UNEXPECTED_TOKEN_PREFIX):
        token = message[message.index(":") + 1 :].strip()
        hint = unexpected_token(token)
    else:
        hint = None

    logger.debug("Sketch error %r classified as %s", message,
                 hint.category if hint is not None else None)
    return hint


def extraneous_closing_brace(text_above_error: str) -> ExtraneousClosingBrace | None:
    """Hint for a stray ``}``, showing the block just before it.

    Args:
        text_above_error: Source text up to and including the stray brace

    Returns:
        Snippet of the preceding block's header plus the stray brace, and the
        same snippet without it; None if no complete block precedes the brace
    """
    end = text_above_error.rfind("}")
    if end <= 0:
        return None
    right_brace = text_above_error.rfind("}", 0, end)
    if right_brace < 0:
        return None
    left_brace = find_matching_brace(text_above_error, right_brace)
    if left_brace is None:
        return None

    # Include the line holding the opening brace and the one above it
    start = text_above_error.rfind("\n", 0, left_brace + 1)
    if start > 0:
        start = text_above_error.rfind("\n", 0, start)

    original = (
        text_above_error[start + 1 : left_brace + 1]
        + _BODY_PLACEHOLDER
        + text_above_error[right_brace : end + 1]
    )
    return ExtraneousClosingBrace(original=original, fixed=original[:-1])


def incorrect_variable_declaration(source: str, error_offset: int) -> IncorrectVariableDeclaration | None:
    """Hint for a malformed array declaration statement.

    Finds the first declarator after ``error_offset`` that is neither
    ``name = new T[n]`` nor ``name = {...}``, and reads the declared type
    back from the text before the error.
    """
    statement = source[error_offset:]
    statement_end = statement.find(";")
    if statement_end >= 0:
        statement = statement[: statement_end + 1]

    invalid = next(
        (d for d in split_declarators(statement) if not _VALID_ARRAY_DECLARATOR.fullmatch(d)),
        None,
    )
    if invalid is None:
        return None

    found_name = _NAME_DELIMITER.split(invalid.strip(), maxsplit=1)[0]
    return IncorrectVariableDeclaration(
        type_name=trim_type(_type_before(source[:error_offset])),
        found_name=found_name,
    )


def _type_before(text: str) -> str:
    """Read back the last type-like word, skipping whitespace and brackets."""
    collected: list[str] = []
    for char in reversed(text):
        if not (char.isspace() or char in "[]"):
            collected.append(char)
        elif collected:
            break
    return "".join(reversed(collected))


def incorrect_method_declaration(text_above_error: str) -> IncorrectMethodDeclaration | None:
    """Hint for a method declared in a sketch without ``setup()``/``draw()``.

    The method name is the identifier right before the last ``(``.
    """
    open_paren = text_above_error.rfind("(")
    if open_paren < 0:
        return None

    name_start = open_paren
    while name_start > 0 and is_identifier_part(text_above_error[name_start - 1]):
        name_start -= 1

    return IncorrectMethodDeclaration(method_name=text_above_error[name_start:open_paren])
