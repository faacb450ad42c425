from typing import Generic, Iterable, Iterator, Optional

from ..core.exceptions import EmptyContainerError
from .base import BaseQueue, T


class _Node(Generic[T]):
    """Célula de uma cadeia simplesmente encadeada."""

    __slots__ = ("data", "link")

    def __init__(self, data: T, link: "Optional[_Node[T]]" = None) -> None:
        self.data = data
        self.link = link

    def copy_list(self) -> "_Node[T]":
        """
        Copia este nó e toda a cadeia ligada a ele.
        Nenhum nó da cópia é compartilhado com a cadeia original.
        """
        head = _Node(self.data)
        copy_tail = head
        node = self.link
        while node is not None:
            copy_tail.link = _Node(node.data)
            copy_tail = copy_tail.link
            node = node.link
        return head


class ManualLinkedListQueue(BaseQueue[T]):
    """
    Fila sobre uma cadeia de nós própria.

    `front` aponta para o próximo item a sair e `back` para o último que
    entrou (o link de `back` é sempre None), o que deixa o enqueue O(1).
    A contagem é mantida à parte para que size() seja O(1).
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._front: Optional[_Node[T]] = None
        self._back: Optional[_Node[T]] = None
        self._count = 0
        for item in items or []:
            self.enqueue(item)

    def examine(self) -> T:
        if self._front is None:
            raise EmptyContainerError("examine from empty queue")
        return self._front.data

    def dequeue(self) -> T:
        if self._front is None:
            raise EmptyContainerError("dequeue from empty queue")
        item = self._front.data
        self._front = self._front.link
        if self._front is None:
            self._back = None
        self._count -= 1
        return item

    def enqueue(self, item: T) -> None:
        node = _Node(item)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.link = node
            self._back = node
        self._count += 1

    def is_empty(self) -> bool:
        return self._front is None

    def size(self) -> int:
        return self._count

    def clone(self) -> "ManualLinkedListQueue[T]":
        other: ManualLinkedListQueue[T] = ManualLinkedListQueue()
        if self._front is None:
            return other
        other._front = self._front.copy_list()
        back = other._front
        while back.link is not None:
            back = back.link
        other._back = back
        other._count = self._count
        return other

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.link
