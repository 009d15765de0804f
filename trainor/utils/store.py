import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscriber = Callable[[], None]

_SCALARS = (type(None), bool, int, float, str, bytes)


def _changed(old, new) -> bool:
    """
    Scalars notify only when the value changes; anything else always notifies,
    since it may have been mutated in place.
    """
    if isinstance(old, _SCALARS) and isinstance(new, _SCALARS):
        return old != new or type(old) is not type(new)
    return True


class Writable(Generic[T]):
    """
    Observable value cell.

    - subscribe() calls the subscriber straight away with the current value
      and returns a function that removes it again
    - set()/update() notify every subscriber, in subscription order
    """

    def __init__(self, value: T):
        self._value = value
        self._subscribers: list[Subscriber] = []
        self._lock = threading.RLock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            if not _changed(self._value, value):
                return
            self._value = value
            subscribers = list(self._subscribers)

        for subscriber in subscribers:
            subscriber(value)

    def update(self, fn: Callable[[T], T]) -> None:
        with self._lock:
            self.set(fn(self._value))

    def subscribe(self, subscriber: Subscriber) -> Unsubscriber:
        with self._lock:
            self._subscribers.append(subscriber)
            value = self._value

        subscriber(value)

        def unsubscribe() -> None:
            with self._lock:
                if subscriber in self._subscribers:
                    self._subscribers.remove(subscriber)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)
