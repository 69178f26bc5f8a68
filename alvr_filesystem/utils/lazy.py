import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Compute a value on first access, at most once, even across threads."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._initialized = False
        self._value: T

    def get(self) -> T:
        if self._initialized:
            return self._value

        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True

        return self._value

    @property
    def initialized(self) -> bool:
        return self._initialized
