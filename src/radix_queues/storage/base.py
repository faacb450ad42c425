from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class BaseQueue(Generic[T]):
    """
    Protocolo comum das filas.
    As subclasses implementam enqueue/dequeue/examine/size/clone/__iter__;
    aqui ficam só os métodos derivados deles.
    """

    def enqueue(self, item: T) -> None:
        raise NotImplementedError

    def dequeue(self) -> T:
        raise NotImplementedError

    def examine(self) -> T:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError

    def clone(self) -> "BaseQueue[T]":
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __copy__(self) -> "BaseQueue[T]":
        return self.clone()

    def __str__(self) -> str:
        # do fim para o início: <D, C, B, A> para uma fila A, B, C, D
        items = [str(item) for item in self]
        items.reverse()
        return "<" + ", ".join(items) + ">"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
