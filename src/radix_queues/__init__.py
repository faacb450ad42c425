"""Filas (array, deque e nós próprios) e radix sort sobre elas."""

from .algorithms import alphabetical_radix_sort, int_radix_sort
from .core.exceptions import EmptyContainerError
from .storage import ArrayQueue, LinkedListQueue, ManualLinkedListQueue

__all__ = [
    "ArrayQueue",
    "EmptyContainerError",
    "LinkedListQueue",
    "ManualLinkedListQueue",
    "alphabetical_radix_sort",
    "int_radix_sort",
]

__version__ = "0.1.0"
