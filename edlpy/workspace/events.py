"""In-process event emitters and releasable subscriptions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")

Listener: TypeAlias = Callable[[T], None]


@dataclass(slots=True)
class Subscription:
    """Handle returned by a registration call; `dispose()` releases it once."""

    _release: Callable[[], None] | None = field(default=None, repr=False)

    @property
    def disposed(self) -> bool:
        return self._release is None

    def dispose(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()


class EventEmitter(Generic[T]):
    """Ordered listener list for one kind of event."""

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._remove(listener))

    def fire(self, event: T) -> None:
        # Snapshot so listeners may unsubscribe while handling the event.
        for listener in tuple(self._listeners):
            listener(event)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def dispose(self) -> None:
        self._listeners.clear()

    def _remove(self, listener: Listener[T]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
