"""helpfuljava exception hierarchy.

Classification itself never raises: structural mismatches and unresolved
bindings degrade to ``None`` or fallback names. Exceptions are reserved for
invalid construction input and for values that cannot be encoded.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["HelpfulJavaError", "ParameterEncodingError", "TreeBuildError"]


class HelpfulJavaError(Exception):
    """Base exception for all helpfuljava errors."""


class TreeBuildError(HelpfulJavaError):
    """Syntax tree construction input is inconsistent.

    Raised by the tree builders when a child's text cannot be located inside
    its parent's span, or when serialized tree data is malformed.
    """


class ParameterEncodingError(HelpfulJavaError):
    """A page parameter value cannot be percent-encoded.

    The resolver catches this and falls back to the default identifier, so
    callers never see a partially-encoded identifier.

    Attributes:
        key: Parameter key whose value failed to encode
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        """Initialize ParameterEncodingError.

        Args:
            message: Error message
            key: Parameter key whose value failed to encode
        """
        super().__init__(message)
        self.key = key
