"""Batch selection: from a compiled unit's diagnostics to one identifier.

Diagnostics positioned before the unit's relevant start offset are
dropped; the rest are classified in source order and the first one that
classifies wins. Batches are expected in source order already; an
unordered batch is sorted (stably) and logged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from helpfuljava.analysis.classifier import classify
from helpfuljava.analysis.hints import Hint
from helpfuljava.diagnostics.codes import Diagnostic
from helpfuljava.syntax.tree import SyntaxTree

from .resolver import HintResolver

__all__ = ["identifier_for", "select_hint"]

logger = logging.getLogger(__name__)


def _relevant(diagnostics: Iterable[Diagnostic], start_offset: int) -> list[Diagnostic]:
    relevant = [d for d in diagnostics if d.source_start >= start_offset]
    starts = [d.source_start for d in relevant]
    if starts != sorted(starts):
        logger.warning("Diagnostics not in source order; sorting %d entries", len(relevant))
        relevant.sort(key=lambda d: d.source_start)
    return relevant


def select_hint(
    diagnostics: Iterable[Diagnostic],
    tree: SyntaxTree,
    *,
    start_offset: int = 0,
) -> Hint | None:
    """Classify the first classifiable diagnostic of a batch.

    Args:
        diagnostics: Problems reported for the unit
        tree: Syntax tree of the unit
        start_offset: Diagnostics starting before this offset are ignored

    Returns:
        The first hint in source order, or None if nothing classifies
    """
    for diagnostic in _relevant(diagnostics, start_offset):
        hint = classify(diagnostic, tree)
        if hint is not None:
            return hint
    return None


def identifier_for(
    diagnostics: Iterable[Diagnostic],
    tree: SyntaxTree,
    resolver: HintResolver,
    *,
    start_offset: int = 0,
) -> str:
    """Identifier of the help page for a batch, or the default identifier."""
    hint = select_hint(diagnostics, tree, start_offset=start_offset)
    if hint is None:
        logger.debug("No classifiable diagnostic; using default page")
        return resolver.default_identifier
    return resolver.resolve(hint)
