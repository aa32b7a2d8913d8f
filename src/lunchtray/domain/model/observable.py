"""Observable values that push changes to UI callbacks.

An Observable holds a current value and a list of subscribers. Owners
update values through ``publish()``, which assigns every value of a
batch (including derived values) before notifying anyone, so a
subscriber never sees a half-applied update.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Observer = Callable[[T], None]


class Observable(Generic[T]):
    """A current value plus synchronous change notifications.

    Subscribers are only called when the value actually changes
    (compared with ``==``). Subscribing does not replay the current
    value; read ``value`` for that.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._last_notified = initial
        self._observers: list[Observer[T]] = []
        self._derived: list[tuple[Observable[Any], Callable[[T], Any]]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, observer: Observer[T]) -> Callable[[], None]:
        """Register *observer* and return a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def map(self, transform: Callable[[T], U]) -> Observable[U]:
        """Return a read-only observable that tracks ``transform(value)``."""
        derived: Observable[U] = Observable(transform(self._value))
        self._derived.append((derived, transform))
        return derived

    # --- Owner-side helpers ---------------------------------------------------

    def _assign(self, value: T) -> list[Observable[Any]]:
        """Store *value* without notifying; return every observable that changed."""
        if value == self._value:
            return []
        self._value = value
        changed: list[Observable[Any]] = [self]
        for derived, transform in self._derived:
            changed.extend(derived._assign(transform(value)))
        return changed

    def _notify(self) -> None:
        # A nested publish from inside an observer may already have pushed
        # the current value.
        if self._value == self._last_notified:
            return
        self._last_notified = self._value
        # Copy so observers may unsubscribe while being notified.
        for observer in list(self._observers):
            observer(self._value)


def publish(updates: Iterable[tuple[Observable[Any], Any]]) -> None:
    """Apply a batch of assignments atomically, then notify observers."""
    changed: list[Observable[Any]] = []
    for observable, value in updates:
        changed.extend(observable._assign(value))
    for observable in dict.fromkeys(changed):
        observable._notify()
