"""Problem codes and the diagnostic value handed over by the compiler.

Defines the enumerated problem kinds the classifier understands and the
immutable ``Diagnostic`` record carrying one reported compiler problem.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "ProblemCode",
]


class ProblemCode(Enum):
    """Compiler problem kinds with unique identifiers.

    Organized by category:
        1000-1999: Type problems (unknown types, incompatible types)
        2000-2999: Field and variable problems
        3000-3999: Method problems
        4000-4999: Array problems
        5000-5999: Syntax problems (parser recovery suggestions)

    Compiler adapters translate their native problem IDs into these members.
    Problems without a counterpart are passed through as plain integers and
    are never classified.
    """

    # Type problems (1000-1999)
    UNDEFINED_TYPE = 1001
    TYPE_MISMATCH = 1002
    RETURN_TYPE_MISMATCH = 1003

    # Field and variable problems (2000-2999)
    UNRESOLVED_VARIABLE = 2001
    UNINITIALIZED_LOCAL_VARIABLE = 2002
    UNDEFINED_FIELD = 2003
    UNDEFINED_NAME = 2004

    # Method problems (3000-3999)
    UNDEFINED_METHOD = 3001
    PARAMETER_MISMATCH = 3002
    SHOULD_RETURN_VALUE = 3003
    STATIC_METHOD_REQUESTED = 3004
    NO_MESSAGE_SEND_ON_BASE_TYPE = 3005
    NO_MESSAGE_SEND_ON_ARRAY_TYPE = 3006

    # Array problems (4000-4999)
    MUST_DEFINE_EITHER_DIMENSION_EXPRESSIONS_OR_INITIALIZER = 4001
    ILLEGAL_DIMENSION = 4002
    CANNOT_DEFINE_DIMENSION_EXPRESSIONS_WITH_INIT = 4003

    # Syntax problems (5000-5999)
    PARSING_ERROR_INSERT_TO_COMPLETE = 5001
    PARSING_ERROR_DELETE_TOKEN = 5002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported compiler problem.

    The meaning of ``arguments`` depends on ``code``; for example a type
    mismatch carries the provided and required type names, in that order.

    Attributes:
        code: Problem kind (a ProblemCode, or a raw int for unmapped problems)
        arguments: Free-text problem arguments, in compiler order
        source_start: Starting offset of the problem in the compiled unit
        source_end: Ending offset of the problem in the compiled unit

    Example:
        >>> d = Diagnostic(ProblemCode.UNRESOLVED_VARIABLE, ("count",), 20, 25)
        >>> d.argument(0)
        'count'
        >>> d.argument(3)
        ''
    """

    code: ProblemCode | int
    arguments: tuple[str, ...] = ()
    source_start: int = 0
    source_end: int = 0

    def __post_init__(self) -> None:
        """Validate diagnostic invariants.

        Raises:
            ValueError: If source_start is negative or source_end precedes
                source_start.
        """
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))
        if self.source_start < 0:
            msg = f"Diagnostic.source_start must be >= 0, got {self.source_start}"
            raise ValueError(msg)
        if self.source_end < self.source_start:
            msg = (
                f"Diagnostic.source_end ({self.source_end}) must be >= "
                f"source_start ({self.source_start})"
            )
            raise ValueError(msg)

    def argument(self, index: int) -> str:
        """Return a problem argument, or an empty string if it is missing."""
        if 0 <= index < len(self.arguments):
            return self.arguments[index]
        return ""

    def has_argument(self, value: str) -> bool:
        """Check if any problem argument equals ``value``."""
        return value in self.arguments

    @classmethod
    def of(
        cls,
        code: ProblemCode | int,
        arguments: Sequence[str] = (),
        source_start: int = 0,
        source_end: int | None = None,
    ) -> Diagnostic:
        """Build a diagnostic from any argument sequence.

        ``source_end`` defaults to ``source_start``.
        """
        end = source_start if source_end is None else source_end
        return cls(code, tuple(arguments), source_start, end)
