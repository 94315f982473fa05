"""Fixed-size set of small non-negative integers stored as bits."""

from __future__ import annotations

_WORD_BITS = 32


class Bitmap:
    """A set of integers below ``capacity`` backed by 32-bit words.

    The capacity is ``max_num`` rounded down to a whole number of words;
    values beyond it are silently ignored.
    """

    def __init__(self, max_num: int) -> None:
        if max_num <= 0:
            raise ValueError("max_num must be positive")
        self.capacity = (max_num // _WORD_BITS) * _WORD_BITS
        self._bits = 0

    def clear(self) -> None:
        """Remove every value."""
        self._bits = 0

    def _mask(self, value: int) -> int:
        if value < 0:
            raise ValueError("bitmap values must be non-negative")
        return 1 << value if value < self.capacity else 0

    def add(self, value: int) -> None:
        """Store ``value``."""
        self._bits |= self._mask(value)

    def discard(self, value: int) -> None:
        """Remove ``value`` if present."""
        self._bits &= ~self._mask(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or value < 0:
            return False
        mask = self._mask(value)
        return mask != 0 and self._bits & mask == mask

    def find_first_free(self) -> int | None:
        """Return the smallest value not stored, or None when full."""
        free = ~self._bits & ((1 << self.capacity) - 1)
        if not free:
            return None
        return (free & -free).bit_length() - 1