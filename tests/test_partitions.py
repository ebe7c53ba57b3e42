"""Tests covering tuple partitions and adjacency assignments."""

from __future__ import annotations

import pytest

from shengji.partitions import adjacency_assignments, partitions_of

PARTITION_COUNTS = [1, 2, 3, 5, 7, 11, 15, 22, 30, 42]
BELL_NUMBERS = [1, 2, 5, 15, 52, 203, 877]


def test_partitions_small_values() -> None:
    assert partitions_of(1) == [[1]]
    assert partitions_of(2) == [[2], [1, 1]]
    assert partitions_of(3) == [[3], [2, 1], [1, 1, 1]]
    assert partitions_of(4) == [[4], [3, 1], [2, 2], [2, 1, 1], [1, 1, 1, 1]]


def test_partitions_of_five_and_six() -> None:
    assert partitions_of(5) == [
        [5],
        [4, 1],
        [3, 2],
        [3, 1, 1],
        [2, 2, 1],
        [2, 1, 1, 1],
        [1, 1, 1, 1, 1],
    ]
    assert partitions_of(6) == [
        [6],
        [5, 1],
        [4, 2],
        [4, 1, 1],
        [3, 3],
        [3, 2, 1],
        [3, 1, 1, 1],
        [2, 2, 2],
        [2, 2, 1, 1],
        [2, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1],
    ]


@pytest.mark.parametrize(("num", "expected"), list(enumerate(PARTITION_COUNTS, start=1)))
def test_partitions_are_complete_and_well_formed(num: int, expected: int) -> None:
    partitions = partitions_of(num)

    assert len(partitions) == expected
    assert len({tuple(p) for p in partitions}) == expected
    for partition in partitions:
        assert sum(partition) == num
        assert all(part >= 1 for part in partition)
        assert partition == sorted(partition, reverse=True)
    assert partitions == sorted(partitions, reverse=True)


def test_partitions_results_are_independent_copies() -> None:
    first = partitions_of(4)
    first[0].append(99)
    first.pop()

    assert partitions_of(4) == [[4], [3, 1], [2, 2], [2, 1, 1], [1, 1, 1, 1]]


@pytest.mark.parametrize("num", [0, -3])
def test_partitions_reject_non_positive(num: int) -> None:
    with pytest.raises(ValueError):
        partitions_of(num)


def test_adjacency_assignments_small_values() -> None:
    assert adjacency_assignments(1) == [[[0]]]
    assert adjacency_assignments(2) == [[[0, 1]], [[0], [1]]]
    assert adjacency_assignments(3) == [
        [[0, 1, 2]],
        [[0, 1], [2]],
        [[0, 2], [1]],
        [[0], [1, 2]],
        [[0], [1], [2]],
    ]


def test_adjacency_assignments_of_four() -> None:
    assert adjacency_assignments(4) == [
        [[0, 1, 2, 3]],
        [[0, 1, 2], [3]],
        [[0, 1, 3], [2]],
        [[0, 2, 3], [1]],
        [[0], [1, 2, 3]],
        [[0, 1], [2, 3]],
        [[0, 2], [1, 3]],
        [[0, 3], [1, 2]],
        [[0, 1], [2], [3]],
        [[0, 2], [1], [3]],
        [[0], [1, 2], [3]],
        [[0, 3], [1], [2]],
        [[0], [1, 3], [2]],
        [[0], [1], [2, 3]],
        [[0], [1], [2], [3]],
    ]


@pytest.mark.parametrize(("length", "expected"), list(enumerate(BELL_NUMBERS, start=1)))
def test_adjacency_assignments_follow_bell_numbers(length: int, expected: int) -> None:
    assignments = adjacency_assignments(length)

    assert len(assignments) == expected
    for assignment in assignments:
        labels = sorted(label for cluster in assignment for label in cluster)
        assert labels == list(range(length))
        assert all(cluster for cluster in assignment)

    keys = [(-max(len(c) for c in a), len(a)) for a in assignments]
    assert keys == sorted(keys)


def test_adjacency_assignments_reject_zero() -> None:
    with pytest.raises(ValueError):
        adjacency_assignments(0)
