import random

import pytest

from radix_queues import ArrayQueue, LinkedListQueue, ManualLinkedListQueue
from radix_queues.algorithms import alphabetical_radix_sort, int_radix_sort

QUEUE_TYPES = [ArrayQueue, LinkedListQueue, ManualLinkedListQueue]


def test_int_radix_sort_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert int_radix_sort(data) is None
    assert data == [2, 24, 45, 66, 75, 90, 170, 802]


@pytest.mark.parametrize("queue_cls", QUEUE_TYPES)
def test_int_radix_sort_with_each_queue(queue_cls):
    rng = random.Random(1234)
    data = [rng.randint(0, 10_000) for _ in range(150)]
    expected = sorted(data)
    int_radix_sort(data, queue_cls=queue_cls)
    assert data == expected


def test_int_radix_sort_edge_cases():
    empty = []
    int_radix_sort(empty)
    assert empty == []

    single = [7]
    int_radix_sort(single)
    assert single == [7]

    zeros = [0, 0, 10, 0]
    int_radix_sort(zeros)
    assert zeros == [0, 0, 0, 10]


def test_int_radix_sort_is_idempotent():
    data = [3, 1, 2, 100, 55, 3]
    int_radix_sort(data)
    once = list(data)
    int_radix_sort(data)
    assert data == once == [1, 2, 3, 3, 55, 100]


def test_int_radix_sort_handles_negatives():
    data = [5, -3, 0, -120, 42, -3, -7, 8]
    int_radix_sort(data)
    assert data == [-120, -7, -3, -3, 0, 5, 8, 42]


def test_int_radix_sort_rejects_non_integers():
    data = [1, 2.5, 3]
    with pytest.raises(TypeError):
        int_radix_sort(data)
    assert data == [1, 2.5, 3]


def test_alphabetical_radix_sort_example():
    data = ["banana", "Apple", "cherry"]
    assert alphabetical_radix_sort(data) is None
    assert data == ["Apple", "banana", "cherry"]


def test_alphabetical_radix_sort_differing_lengths():
    data = ["abc", "ab", "b", "a", "abcd", "ba"]
    alphabetical_radix_sort(data)
    assert data == ["a", "ab", "abc", "abcd", "b", "ba"]


def test_alphabetical_radix_sort_is_case_insensitive_and_stable():
    data = ["bob", "Bob", "alice", "BOB", "Alice"]
    alphabetical_radix_sort(data)
    assert data == ["alice", "Alice", "bob", "Bob", "BOB"]


@pytest.mark.parametrize("queue_cls", QUEUE_TYPES)
def test_alphabetical_radix_sort_with_each_queue(queue_cls):
    rng = random.Random(99)
    letters = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    data = ["".join(rng.choice(letters) for _ in range(rng.randint(1, 8))) for _ in range(80)]
    expected = sorted(data, key=str.lower)
    alphabetical_radix_sort(data, queue_cls=queue_cls)
    assert data == expected


def test_alphabetical_radix_sort_empty_strings_first():
    data = ["b", "", "a", ""]
    alphabetical_radix_sort(data)
    assert data == ["", "", "a", "b"]


def test_alphabetical_radix_sort_empty_list():
    data = []
    alphabetical_radix_sort(data)
    assert data == []


def test_alphabetical_radix_sort_is_idempotent():
    data = ["Apple", "banana", "cherry"]
    alphabetical_radix_sort(data)
    assert data == ["Apple", "banana", "cherry"]


@pytest.mark.parametrize("bad", ["a`b", "hello world", "naïve", "abc1"])
def test_alphabetical_radix_sort_rejects_invalid_characters(bad):
    data = ["ok", bad]
    with pytest.raises(ValueError):
        alphabetical_radix_sort(data)
    assert data == ["ok", bad]
