"""Small closed enumeration stepped by directional keys."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


class EnumCycle(Generic[E]):
    """One selected variant out of an ordered, fixed set.

    Two transition functions drive the same value. ``step_clamped`` stops at
    both ends and is bound to single-character keys (``h``/``l``, arrows).
    ``step_wrapping`` wraps past both ends and is bound to the dedicated
    next/previous field keys. Callers choose which one a key uses; both must
    stay available.

    ``on_change(old, new)`` runs synchronously inside every transition that
    changes the value, so dependent state (focusing a text field when a
    variant is entered) is updated before the step returns.
    """

    def __init__(
        self,
        variants: Sequence[E],
        value: E | None = None,
        on_change: Callable[[E, E], None] | None = None,
    ) -> None:
        if not variants:
            raise ValueError("EnumCycle needs at least one variant")
        self._variants: tuple[E, ...] = tuple(variants)
        self._index = self._variants.index(value) if value is not None else 0
        self._on_change = on_change

    @property
    def variants(self) -> tuple[E, ...]:
        return self._variants

    @property
    def value(self) -> E:
        return self._variants[self._index]

    @property
    def index(self) -> int:
        return self._index

    def _set_index(self, index: int) -> bool:
        if index == self._index:
            return False
        old = self._variants[self._index]
        self._index = index
        new = self._variants[index]
        logger.debug("Cycle %s -> %s", old, new)
        if self._on_change is not None:
            self._on_change(old, new)
        return True

    def step_clamped(self, direction: int) -> bool:
        """Step one variant in ``direction``; no-op past either end."""
        index = self._index + (1 if direction > 0 else -1)
        if not 0 <= index < len(self._variants):
            return False
        return self._set_index(index)

    def step_wrapping(self, direction: int) -> bool:
        """Step one variant in ``direction``, wrapping ``N-1 -> 0`` and ``0 -> N-1``."""
        index = (self._index + (1 if direction > 0 else -1)) % len(self._variants)
        return self._set_index(index)

    def select(self, value: E) -> bool:
        return self._set_index(self._variants.index(value))
