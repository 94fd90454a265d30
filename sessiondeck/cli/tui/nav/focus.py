"""Focus ring over conditionally enabled targets."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Hashable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _always_enabled(_target: object) -> bool:
    return True


class FocusRing(Generic[T]):
    """Ordered focus targets with skip logic for disabled ones.

    The enabled set is never cached: ``is_enabled`` is evaluated for every
    target on every step, so a flag flip (or a change in another target's
    value) takes effect on the very next navigation. Disabling the focused
    target does not move focus; the next step starts from its slot and skips
    forward (or backward) to an enabled neighbour.

    Targets that do not exist in a given context should be left out of
    ``targets`` entirely; the ring then numbers around them.
    """

    def __init__(
        self,
        targets: Sequence[T],
        is_enabled: Callable[[T], bool] | None = None,
        *,
        current: T | None = None,
        wrap: bool = True,
    ) -> None:
        self._targets: tuple[T, ...] = tuple(targets)
        self._is_enabled = is_enabled or _always_enabled
        self.wrap = wrap
        if current is not None and current in self._targets:
            self._index = self._targets.index(current)
        else:
            enabled = self._enabled_indices()
            self._index = enabled[0] if enabled else 0

    @property
    def targets(self) -> tuple[T, ...]:
        return self._targets

    @property
    def current(self) -> T | None:
        if not self._targets:
            return None
        return self._targets[self._index]

    def is_focused(self, target: T) -> bool:
        return bool(self._targets) and self._targets[self._index] == target

    def _enabled_indices(self) -> list[int]:
        return [i for i, target in enumerate(self._targets) if self._is_enabled(target)]

    def enabled_targets(self) -> list[T]:
        """Targets currently reachable, in ring order."""
        return [self._targets[i] for i in self._enabled_indices()]

    def _step(self, direction: int, wrap: bool | None) -> T | None:
        if not self._targets:
            return None
        wrap = self.wrap if wrap is None else wrap
        enabled = set(self._enabled_indices())
        size = len(self._targets)
        index = self._index
        for _ in range(size - 1):
            index += direction
            if not 0 <= index < size:
                if not wrap:
                    break
                index %= size
            if index in enabled:
                previous = self._targets[self._index]
                self._index = index
                logger.debug("Focus %s -> %s", previous, self._targets[index])
                return self._targets[index]
        return self.current

    def next(self, *, wrap: bool | None = None) -> T | None:
        """Advance to the next enabled target and return the focused target."""
        return self._step(1, wrap)

    def prev(self, *, wrap: bool | None = None) -> T | None:
        """Step back to the previous enabled target and return the focused target."""
        return self._step(-1, wrap)

    def focus(self, target: T) -> bool:
        """Focus ``target`` directly. Disabled or unknown targets are refused."""
        if target not in self._targets or not self._is_enabled(target):
            return False
        self._index = self._targets.index(target)
        return True
