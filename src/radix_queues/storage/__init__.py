"""Implementações de fila (FIFO) com a mesma API externa.

- ArrayQueue: buffer circular.
- LinkedListQueue: collections.deque.
- ManualLinkedListQueue: cadeia de nós própria.
"""

from .array_queue import DEFAULT_CAPACITY, ArrayQueue
from .base import BaseQueue
from .linked_list_queue import LinkedListQueue
from .manual_linked_list_queue import ManualLinkedListQueue

__all__ = [
    "DEFAULT_CAPACITY",
    "ArrayQueue",
    "BaseQueue",
    "LinkedListQueue",
    "ManualLinkedListQueue",
]
