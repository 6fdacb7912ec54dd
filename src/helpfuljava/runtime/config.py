"""Resolver configuration.

Holds the help-page base address, the embed-mode flag and the base font
size. The editor sets the font size again whenever the user changes their
preference, so it is the only value that can change after construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from helpfuljava.constants import (
    DEFAULT_BASE_ADDRESS,
    DEFAULT_FONT_SIZE,
    EMBED_PARAM,
    FONT_SIZE_PARAM,
)

__all__ = ["ResolverConfig"]


class ResolverConfig:
    """Configuration for building help-page identifiers.

    Attributes:
        base_address: Address every category path is appended to (read-only)
        embed_mode: Whether identifiers carry the global page parameters
            (read-only)
        font_size: Base font size in points for embedded pages; positive

    Example:
        >>> config = ResolverConfig(font_size=14)
        >>> config.global_parameters()
        (('embed', 'true'), ('fontsize', '14'))
        >>> ResolverConfig(embed_mode=False).global_parameters()
        ()
    """

    __slots__ = ("_base_address", "_embed_mode", "_font_size")

    def __init__(
        self,
        base_address: str = DEFAULT_BASE_ADDRESS,
        *,
        embed_mode: bool = True,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        if not base_address:
            msg = "base_address cannot be empty"
            raise ValueError(msg)

        self._base_address = base_address
        self._embed_mode = embed_mode
        self._font_size = DEFAULT_FONT_SIZE
        self.font_size = font_size

    @property
    def base_address(self) -> str:
        """Address every category path is appended to (read-only)."""
        return self._base_address

    @property
    def embed_mode(self) -> bool:
        """Whether identifiers carry ``embed`` and ``fontsize`` (read-only)."""
        return self._embed_mode

    @property
    def font_size(self) -> int:
        """Base font size in points."""
        return self._font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        # bool is an int subclass but never a font size
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"font_size must be an int, got {type(value).__name__}"
            raise TypeError(msg)
        if value <= 0:
            msg = f"font_size must be positive, got {value}"
            raise ValueError(msg)
        self._font_size = value

    def global_parameters(self) -> tuple[tuple[str, str], ...]:
        """Parameters appended to every identifier, in order.

        Returns:
            ``embed`` then ``fontsize`` in embed mode; empty otherwise
        """
        if not self._embed_mode:
            return ()
        return ((EMBED_PARAM, "true"), (FONT_SIZE_PARAM, str(self._font_size)))

    def __repr__(self) -> str:
        return (
            f"ResolverConfig({self._base_address!r}, embed_mode={self._embed_mode}, "
            f"font_size={self._font_size})"
        )
