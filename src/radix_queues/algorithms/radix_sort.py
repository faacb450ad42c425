"""
Radix sort (LSD) usando filas como baldes.

- int_radix_sort: inteiros, base 10, com passe final para negativos.
- alphabetical_radix_sort: strings de letras ASCII, sem diferenciar
  maiúsculas/minúsculas, com preenchimento à direita até o maior tamanho.

As duas funções ordenam a lista recebida no lugar e retornam None.
"""

import logging
import string
from typing import Callable, List, MutableSequence, Sequence

from ..storage import ArrayQueue, BaseQueue, ManualLinkedListQueue

logger = logging.getLogger(__name__)

# Base 10
NUM_DIGITS = 10

# Letras (sem caixa) + o caractere de preenchimento
NUM_CHARS = 27

# Vem logo antes de 'a' na tabela ASCII, então cai no balde 0
PAD_CHAR = "`"

_VALID_CHARS = frozenset(string.ascii_letters)

QueueFactory = Callable[[], BaseQueue]


def int_radix_sort(data: MutableSequence[int], queue_cls: QueueFactory = ManualLinkedListQueue) -> None:
    """
    Ordena uma lista de inteiros com radix sort.

    Os dígitos são extraídos do valor absoluto; ao final os negativos
    (ordenados por magnitude crescente) são gravados primeiro em ordem
    inversa, seguidos dos não negativos.
    """
    for value in data:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"int_radix_sort expects integers, got {type(value).__name__}: {value!r}")

    result = queue_cls()
    for value in data:
        result.enqueue(value)
    buckets = [queue_cls() for _ in range(NUM_DIGITS)]

    most_digits = _most_digits(data)
    logger.debug(f"int_radix_sort: {len(data)} itens, {most_digits} passe(s)")

    place = 1
    for _ in range(most_digits):
        while not result.is_empty():
            item = result.dequeue()
            digit = abs(item) // place % NUM_DIGITS
            buckets[digit].enqueue(item)
        _drain_buckets(buckets, result)
        place *= NUM_DIGITS

    negatives: List[int] = []
    non_negatives: List[int] = []
    while not result.is_empty():
        item = result.dequeue()
        (negatives if item < 0 else non_negatives).append(item)
    negatives.reverse()

    for i, item in enumerate(negatives + non_negatives):
        data[i] = item


def alphabetical_radix_sort(data: MutableSequence[str], queue_cls: QueueFactory = ArrayQueue) -> None:
    """
    Ordena uma lista de strings alfabeticamente com radix sort.

    Só letras ASCII são aceitas; qualquer outro caractere (inclusive o de
    preenchimento) gera ValueError antes de a lista ser alterada.
    """
    _validate_words(data)

    most_chars = _most_characters(data)
    logger.debug(f"alphabetical_radix_sort: {len(data)} itens, {most_chars} passe(s)")

    result = queue_cls()
    for word in data:
        result.enqueue(_pad(word, most_chars))
    buckets = [queue_cls() for _ in range(NUM_CHARS)]

    for i in range(most_chars):
        while not result.is_empty():
            word = result.dequeue()
            buckets[_char_bucket(word[len(word) - 1 - i])].enqueue(word)
        _drain_buckets(buckets, result)

    for i in range(len(data)):
        data[i] = _unpad(result.dequeue())


def _drain_buckets(buckets: Sequence[BaseQueue], result: BaseQueue) -> None:
    # em ordem 0..n, esvaziando todos (mantém a estabilidade)
    for bucket in buckets:
        while not bucket.is_empty():
            result.enqueue(bucket.dequeue())


def _most_digits(nums: Sequence[int]) -> int:
    longest = 0
    for n in nums:
        longest = max(longest, len(str(abs(n))))
    return longest


def _most_characters(words: Sequence[str]) -> int:
    longest = 0
    for w in words:
        longest = max(longest, len(w))
    return longest


def _validate_words(words: Sequence[str]) -> None:
    for w in words:
        if not isinstance(w, str):
            raise TypeError(f"alphabetical_radix_sort expects strings, got {type(w).__name__}: {w!r}")
        invalid = set(w) - _VALID_CHARS
        if invalid:
            raise ValueError(f"only ASCII letters can be sorted, {w!r} contains {sorted(invalid)!r}")


def _char_bucket(ch: str) -> int:
    return ord(ch.lower()) - ord("a") + 1


def _pad(word: str, length: int) -> str:
    return word + PAD_CHAR * (length - len(word))


def _unpad(word: str) -> str:
    return word.rstrip(PAD_CHAR)
