"""Identifier building and per-editor state.

Turns classification results into help-page identifiers and keeps track
of the identifier currently shown. Depends on the analysis package for
classification.

Python 3.13+.
"""

from .config import ResolverConfig
from .pipeline import identifier_for, select_hint
from .resolver import HintResolver, encode_value
from .session import HintSession, IdentifierListener

__all__ = [
    "HintResolver",
    "HintSession",
    "IdentifierListener",
    "ResolverConfig",
    "encode_value",
    "identifier_for",
    "select_hint",
]
