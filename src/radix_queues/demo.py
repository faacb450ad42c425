"""Geração de dados aleatórios e impressão das demos de fila/radix sort."""

import random
import string
from typing import List, Optional, TextIO

from .algorithms.radix_sort import alphabetical_radix_sort, int_radix_sort
from .storage import ArrayQueue


def random_int_list(length: int, max_num: int, rng: Optional[random.Random] = None) -> List[int]:
    """Lista com `length` inteiros aleatórios entre 1 e max_num."""
    rng = rng or random.Random()
    return [rng.randint(1, max_num) for _ in range(length)]


def random_string_list(length: int, max_size: int, rng: Optional[random.Random] = None) -> List[str]:
    """Lista com `length` strings de 1..max_size letras maiúsculas/minúsculas."""
    rng = rng or random.Random()
    words = []
    for _ in range(length):
        size = rng.randint(1, max_size)
        words.append("".join(rng.choice(string.ascii_letters) for _ in range(size)))
    return words


def _print_items(title: str, items, out: Optional[TextIO]) -> None:
    print(title, file=out)
    for item in items:
        print(item, file=out)


def demo_queue(out: Optional[TextIO] = None) -> ArrayQueue:
    queue = ArrayQueue(["A", "B", "C", "D"])
    print(queue, file=out)
    return queue


def demo_int_radix_sort(length: int = 10, max_num: int = 200, rng: Optional[random.Random] = None,
                        out: Optional[TextIO] = None) -> List[int]:
    nums = random_int_list(length, max_num, rng)
    _print_items("Before Sorted", nums, out)
    int_radix_sort(nums)
    _print_items("Sorted", nums, out)
    return nums


def demo_alphabetical_radix_sort(length: int = 10, max_size: int = 10, rng: Optional[random.Random] = None,
                                 out: Optional[TextIO] = None) -> List[str]:
    words = random_string_list(length, max_size, rng)
    _print_items("Before Sorted", words, out)
    alphabetical_radix_sort(words)
    _print_items("Sorted", words, out)
    return words
