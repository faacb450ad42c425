from typing import Iterable, Iterator, List, Optional

from ..core.exceptions import EmptyContainerError
from .base import BaseQueue, T

DEFAULT_CAPACITY = 10


class ArrayQueue(BaseQueue[T]):
    """
    Fila sobre um buffer circular de tamanho fixo.
    O início da fila é data[front] e o fim é data[rear]; o buffer cresce
    para 2 * capacidade + 1 quando enche.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, capacity: int = DEFAULT_CAPACITY) -> None:
        if items is not None:
            # buffer com o tamanho exato da entrada
            self._data: List[Optional[T]] = list(items)
            self._count = len(self._data)
            self._front = 0
            self._rear = self._count - 1
            return
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._data = [None] * capacity
        self._count = 0
        self._front = self._rear = -1

    def examine(self) -> T:
        if self._count == 0:
            raise EmptyContainerError("examine from empty queue")
        return self._data[self._front]  # type: ignore[return-value]

    def dequeue(self) -> T:
        if self._count == 0:
            raise EmptyContainerError("dequeue from empty queue")
        item = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % len(self._data)
        self._count -= 1
        return item  # type: ignore[return-value]

    def enqueue(self, item: T) -> None:
        if self._count == len(self._data):
            self.ensure_capacity(self._count * 2 + 1)
        if self._front == -1:
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % len(self._data)
        self._data[self._rear] = item
        self._count += 1

    def size(self) -> int:
        return self._count

    def clone(self) -> "ArrayQueue[T]":
        other: ArrayQueue[T] = ArrayQueue.__new__(ArrayQueue)
        other._data = list(self._data)
        other._count = self._count
        other._front = self._front
        other._rear = self._rear
        return other

    def __iter__(self) -> Iterator[T]:
        idx = self._front
        for _ in range(self._count):
            yield self._data[idx]  # type: ignore[misc]
            idx = (idx + 1) % len(self._data)

    @property
    def capacity(self) -> int:
        return len(self._data)

    def ensure_capacity(self, capacity: int) -> None:
        """Expande o buffer para `capacity` posições se for maior que o atual."""
        if capacity > len(self._data):
            self._relocate(capacity)

    def trim_to_size(self) -> None:
        """Reduz o buffer ao número de itens vivos."""
        self._relocate(self._count)

    def _relocate(self, capacity: int) -> None:
        # Copia em ordem FIFO a partir do índice 0
        new_data: List[Optional[T]] = [None] * capacity
        for i, item in enumerate(self):
            new_data[i] = item
        self._data = new_data
        if self._count:
            self._front, self._rear = 0, self._count - 1
        else:
            self._front = self._rear = -1
