"""Integer partitions and position clusterings used to build play shapes."""

from __future__ import annotations

from ._memo import MemoTable

__all__ = ["AdjacentTupleSizes", "AdjacencyAssignment", "adjacency_assignments", "partitions_of"]

AdjacentTupleSizes = list[int]
AdjacencyAssignment = list[list[int]]

_PARTITIONS: MemoTable[tuple[tuple[int, ...], ...]] = MemoTable("partitions")
_ASSIGNMENTS: MemoTable[tuple[tuple[tuple[int, ...], ...], ...]] = MemoTable("adjacency_assignments")


def partitions_of(num: int) -> list[AdjacentTupleSizes]:
    """Return every way to split ``num`` cards into tuples, most complex first.

    Each partition is sorted descending; the list is sorted descending
    lexicographically, e.g. ``partitions_of(4)`` is
    ``[[4], [3, 1], [2, 2], [2, 1, 1], [1, 1, 1, 1]]``.
    """

    if num < 1:
        raise ValueError("num must be positive")

    cached = _PARTITIONS.get(num)
    if cached is None:
        cached = _PARTITIONS.record(num, _build_partitions(num))
    return [list(partition) for partition in cached]


def _build_partitions(num: int) -> tuple[tuple[int, ...], ...]:
    groupings: list[list[int]] = []
    if num == 1:
        groupings.append([1])
    else:
        for smaller in partitions_of(num - 1):
            # Bump the first occurrence of each distinct tuple size once.
            incremented: set[int] = set()
            for position, value in enumerate(smaller):
                if value in incremented:
                    continue
                incremented.add(value)
                bumped = list(smaller)
                bumped[position] += 1
                groupings.append(bumped)
            groupings.append(smaller + [1])

    groupings.sort(reverse=True)
    deduped: list[tuple[int, ...]] = []
    for grouping in groupings:
        candidate = tuple(grouping)
        if not deduped or deduped[-1] != candidate:
            deduped.append(candidate)
    return tuple(deduped)


def adjacency_assignments(length: int) -> list[AdjacencyAssignment]:
    """Return every clustering of positions ``0..length-1`` into non-empty groups.

    Clusterings are ordered by descending largest-cluster size, then by
    ascending cluster count; remaining ties keep construction order.
    """

    if length < 1:
        raise ValueError("length must be positive")
    if length == 1:
        return [[[0]]]

    cached = _ASSIGNMENTS.get(length)
    if cached is None:
        cached = _ASSIGNMENTS.record(length, _build_assignments(length))
    return [[list(cluster) for cluster in assignment] for assignment in cached]


def _build_assignments(length: int) -> tuple[tuple[tuple[int, ...], ...], ...]:
    elem = length - 1
    assignments: list[list[list[int]]] = []
    for part in adjacency_assignments(length - 1):
        for idx in range(len(part)):
            grown = [list(cluster) for cluster in part]
            grown[idx].append(elem)
            assignments.append(grown)
        assignments.append([list(cluster) for cluster in part] + [[elem]])

    assignments.sort(key=lambda a: (-max(len(cluster) for cluster in a), len(a)))

    deduped: list[tuple[tuple[int, ...], ...]] = []
    for assignment in assignments:
        candidate = tuple(tuple(cluster) for cluster in assignment)
        if not deduped or deduped[-1] != candidate:
            deduped.append(candidate)
    return tuple(deduped)
