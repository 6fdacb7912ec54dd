"""Per-editor hint session: the last identifier and its change listeners.

The editor recompiles often and usually lands on the same problem again.
The session remembers the last identifier it produced and only notifies
listeners (the help button, the embedded page view) when it changes.

Thread Safety:
    Compilation results arrive on a background thread while the UI reads
    ``last_identifier``. A lock guards the stored identifier; listeners are
    called after the lock is released, on the updating thread.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import TypeAlias

from helpfuljava.diagnostics.codes import Diagnostic
from helpfuljava.syntax.tree import SyntaxTree

from .pipeline import identifier_for
from .resolver import HintResolver

__all__ = ["HintSession", "IdentifierListener"]

logger = logging.getLogger(__name__)

IdentifierListener: TypeAlias = Callable[[str], None]


class HintSession:
    """Tracks the current help-page identifier for one editor.

    Example:
        >>> from helpfuljava.runtime.config import ResolverConfig
        >>> session = HintSession(HintResolver(ResolverConfig("http://help/")))
        >>> seen = []
        >>> session.add_listener(seen.append)
        >>> session.update("http://help/typemismatch?varname=x")
        True
        >>> session.update("http://help/typemismatch?varname=x")
        False
        >>> seen
        ['http://help/typemismatch?varname=x']
    """

    __slots__ = ("_last_identifier", "_listeners", "_lock", "_resolver")

    def __init__(self, resolver: HintResolver) -> None:
        self._resolver = resolver
        self._lock = threading.Lock()
        self._listeners: list[IdentifierListener] = []
        self._last_identifier = resolver.default_identifier

    @property
    def resolver(self) -> HintResolver:
        return self._resolver

    @property
    def last_identifier(self) -> str:
        """Most recently stored identifier (initially the default)."""
        with self._lock:
            return self._last_identifier

    @property
    def has_page(self) -> bool:
        """Whether the last identifier addresses a specific help page.

        False for the default identifier and for any identifier that is the
        base address with nothing but global parameters.
        """
        identifier = self.last_identifier
        base = self._resolver.base_address
        if not identifier.startswith(base):
            return True
        path = identifier[len(base) :]
        return bool(path) and not path.startswith("?")

    def add_listener(self, listener: IdentifierListener) -> None:
        """Register a callable invoked with each new identifier."""
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: IdentifierListener) -> None:
        """Unregister a listener; unknown listeners are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def update(self, identifier: str) -> bool:
        """Store ``identifier`` and notify listeners if it changed.

        Returns:
            True if the identifier changed
        """
        with self._lock:
            if identifier == self._last_identifier:
                return False
            self._last_identifier = identifier
            listeners = tuple(self._listeners)

        logger.debug("Help page changed: %s", identifier)
        for listener in listeners:
            listener(identifier)
        return True

    def update_from(
        self,
        diagnostics: Iterable[Diagnostic],
        tree: SyntaxTree,
        *,
        start_offset: int = 0,
    ) -> str:
        """Resolve a diagnostic batch and store the result.

        Returns:
            The identifier for the batch (also the new ``last_identifier``)
        """
        identifier = identifier_for(diagnostics, tree, self._resolver, start_offset=start_offset)
        self.update(identifier)
        return identifier

    def reset(self) -> bool:
        """Return to the default identifier, notifying on change."""
        return self.update(self._resolver.default_identifier)
