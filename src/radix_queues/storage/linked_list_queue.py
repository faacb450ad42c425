from collections import deque
from typing import Deque, Iterable, Iterator, Optional

from ..core.exceptions import EmptyContainerError
from .base import BaseQueue, T


class LinkedListQueue(BaseQueue[T]):
    """
    Fila sobre collections.deque.
    API: enqueue no fim, dequeue/examine no início.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: Deque[T] = deque(items or [])

    def examine(self) -> T:
        if not self._items:
            raise EmptyContainerError("examine from empty queue")
        return self._items[0]

    def dequeue(self) -> T:
        if not self._items:
            raise EmptyContainerError("dequeue from empty queue")
        return self._items.popleft()

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def size(self) -> int:
        return len(self._items)

    def clone(self) -> "LinkedListQueue[T]":
        return LinkedListQueue(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
