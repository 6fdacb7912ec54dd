"""Hint resolver: classification result -> help-page identifier.

Identifier format::

    <base_address><category>?<k1>=<v1>&<k2>=<v2>...[&embed=true&fontsize=<n>]

Values are form-encoded as complete query values (UTF-8, spaces as ``+``,
no characters left unescaped). Keys and category paths are fixed constants
and are emitted verbatim.

Thread Safety:
    Resolution reads the configuration and builds a new string; it keeps
    no state of its own. Concurrent calls are safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
from urllib.parse import quote_plus

from helpfuljava.analysis.hints import Hint
from helpfuljava.diagnostics.errors import ParameterEncodingError

from .config import ResolverConfig

__all__ = ["HintResolver", "encode_value"]

logger = logging.getLogger(__name__)


def encode_value(key: str, value: str) -> str:
    """Percent-encode a parameter value.

    Args:
        key: Parameter key, reported if encoding fails
        value: Free-text value

    Returns:
        Encoded value

    Raises:
        ParameterEncodingError: If the value is not encodable as UTF-8
            (for example, it contains a lone surrogate)

    Example:
        >>> encode_value("providedparams", "x + 1,y")
        'x+%2B+1%2Cy'
    """
    try:
        return quote_plus(value, safe="")
    except UnicodeEncodeError as e:
        msg = f"Cannot encode value of parameter '{key}': {e.reason}"
        raise ParameterEncodingError(msg, key=key) from e


def _join_query(pairs: tuple[tuple[str, str], ...]) -> str:
    return "&".join(f"{key}={value}" for key, value in pairs)


class HintResolver:
    """Builds help-page identifiers from classification results.

    Example:
        >>> from helpfuljava.analysis.hints import MissingVariable
        >>> resolver = HintResolver(ResolverConfig("http://help/", font_size=12))
        >>> resolver.resolve(MissingVariable(variable_name="count", variable_type="int"))
        'http://help/variablenotfound?classname=int&varname=count&embed=true&fontsize=12'
        >>> resolver.default_identifier
        'http://help/?embed=true&fontsize=12'
    """

    __slots__ = ("_config",)

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config if config is not None else ResolverConfig()

    @property
    def config(self) -> ResolverConfig:
        """Configuration read on every resolution (read-only)."""
        return self._config

    @property
    def base_address(self) -> str:
        """Address category paths are appended to."""
        return self._config.base_address

    @property
    def default_identifier(self) -> str:
        """Identifier used when nothing is classified or encoding fails.

        The base address plus the global parameters, reflecting the current
        font size.
        """
        global_query = _join_query(self._config.global_parameters())
        if not global_query:
            return self._config.base_address
        return f"{self._config.base_address}?{global_query}"

    def resolve(self, hint: Hint) -> str:
        """Build the identifier for ``hint``.

        Args:
            hint: Classification result

        Returns:
            Full identifier, or ``default_identifier`` if any parameter value
            cannot be encoded
        """
        try:
            encoded = tuple(
                (key, encode_value(key, value)) for key, value in hint.parameters()
            )
        except ParameterEncodingError as e:
            logger.warning("Falling back to default page for %s: %s", hint.category, e)
            return self.default_identifier

        query = _join_query(encoded + self._config.global_parameters())
        return f"{self._config.base_address}{hint.category}?{query}"
