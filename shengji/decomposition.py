"""Ordering of play shapes: full decompositions and what may follow a lead.

A play shape ("decomposition") is a list of adjacent runs. Each run lists the
tuple size played at consecutive ranks, e.g. ``[[2, 2], [1]]`` is a two-pair
tractor plus a single.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Sequence

from ._memo import MemoTable
from .partitions import AdjacentTupleSizes, adjacency_assignments, partitions_of

__all__ = [
    "PlayRequirements",
    "canonicalize",
    "card_count",
    "full_decompositions",
    "sequential_runs",
    "subsequent_decompositions",
]

logger = logging.getLogger(__name__)

PlayRequirements = list[AdjacentTupleSizes]

_FrozenRequirements = tuple[tuple[int, ...], ...]

_FULL_DECOMPOSITIONS: MemoTable[tuple[_FrozenRequirements, ...]] = MemoTable("full_decompositions")


def canonicalize(requirements: Iterable[Sequence[int]]) -> PlayRequirements:
    """Return the runs sorted in descending lexicographic order."""

    return sorted((list(run) for run in requirements), reverse=True)


def card_count(requirements: Iterable[Sequence[int]]) -> int:
    return sum(sum(run) for run in requirements)


def _shape_key(requirements: Iterable[Sequence[int]]) -> _FrozenRequirements:
    return tuple(tuple(run) for run in canonicalize(requirements))


def _unique_shapes(candidates: Iterable[PlayRequirements]) -> list[PlayRequirements]:
    """Drop shapes that reorder the runs of an earlier one, keeping first-seen order."""

    seen: set[_FrozenRequirements] = set()
    unique: list[PlayRequirements] = []
    for candidate in candidates:
        key = _shape_key(candidate)
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique


def _unique_permutations(values: Sequence[int]) -> list[tuple[int, ...]]:
    return list(dict.fromkeys(itertools.permutations(values)))


def _runs_for_assignment(values: Sequence[int], assignment: Sequence[Sequence[int]]) -> list[PlayRequirements]:
    groups = [[values[idx] for idx in cluster] for cluster in assignment]
    if all(all(value == group[0] for value in group) for group in groups):
        return [groups]
    orderings = [_unique_permutations(group) for group in groups]
    return [[list(run) for run in combo] for combo in itertools.product(*orderings)]


def sequential_runs(values: Sequence[int]) -> list[PlayRequirements]:
    """Arrange tuple sizes (all above one) into every set of ordered adjacent runs.

    ``sequential_runs([3, 2, 2])`` includes ``[[3, 2, 2]]``, ``[[2, 3, 2]]``,
    ``[[2, 2, 3]]``, ``[[3, 2], [2]]``, ``[[2, 3], [2]]`` and
    ``[[3], [2], [2]]``. Order within a run matters; order of runs does not.
    """

    if not values:
        raise ValueError("values must not be empty")
    if any(value <= 1 for value in values):
        raise ValueError("sequential runs only take tuple sizes above one")

    candidates = itertools.chain.from_iterable(
        _runs_for_assignment(values, assignment)
        for assignment in adjacency_assignments(len(values))
    )
    return _unique_shapes(candidates)


def full_decompositions(num_cards: int) -> list[PlayRequirements]:
    """Return every shape ``num_cards`` cards can take, most demanding first.

    Single cards are never required to be adjacent, so size-one tuples always
    appear as their own run. The first entry is always ``[[num_cards]]``.
    """

    if num_cards < 1:
        raise ValueError("num_cards must be positive")

    cached = _FULL_DECOMPOSITIONS.get(num_cards)
    if cached is None:
        cached = _FULL_DECOMPOSITIONS.record(num_cards, _build_full_decompositions(num_cards))
    return [[list(run) for run in shape] for shape in cached]


def _build_full_decompositions(num_cards: int) -> tuple[_FrozenRequirements, ...]:
    ordered: list[PlayRequirements] = []
    for group in partitions_of(num_cards):
        one_idx = group.index(1) if 1 in group else len(group)
        gt_1, eq_1 = group[:one_idx], group[one_idx:]
        singles = [[value] for value in eq_1]

        if not gt_1:
            ordered.append(singles)
            continue
        for decomposition in sequential_runs(gt_1):
            ordered.append(canonicalize(decomposition + singles))

    unique = _unique_shapes(ordered)
    logger.debug("built %d decompositions for %d cards", len(unique), num_cards)
    return tuple(tuple(tuple(run) for run in shape) for shape in unique)


def _refinement_queue(run: list[int]) -> list[PlayRequirements]:
    """Decompositions strictly simpler than ``run``, nearest popped first."""

    queue = full_decompositions(sum(run))
    queue.reverse()
    while queue:
        if queue.pop() == [run]:
            break
    return queue


def subsequent_decompositions(
    requirements: Sequence[Sequence[int]],
    allow_new_adjacency: bool,
) -> list[PlayRequirements]:
    """Return the shapes a follower may fall back to, one refinement at a time.

    Each step refines the run with the most remaining refinements (ties keep
    the order from the previous step). When ``allow_new_adjacency`` is false,
    a run that started out as a single tuple may not turn into a multi-rank
    run; such steps are skipped, though the refinement still happens. Repeated
    shapes are kept.
    """

    if any(len(run) == 0 for run in requirements):
        return []
    if any(value < 1 for run in requirements for value in run):
        raise ValueError("tuple sizes must be positive")

    runs = [sorted(run, reverse=True) for run in requirements]
    queues = [_refinement_queue(run) for run in runs]
    current: dict[int, PlayRequirements] = {idx: [run] for idx, run in enumerate(runs)}
    may_add_adjacency = [allow_new_adjacency or len(run) > 1 for run in runs]

    order = list(range(len(runs)))
    subsequent: list[PlayRequirements] = []
    while order:
        # Refine whichever run has the most refinements left.
        order.sort(key=lambda idx: -len(queues[idx]))
        head = order[0]
        if not queues[head]:
            break
        current[head] = queues[head].pop()

        admissible = all(
            len(run) == 1 or may_add_adjacency[idx] for idx in order for run in current[idx]
        )
        if admissible:
            merged = [list(run) for idx in order for run in current[idx]]
            subsequent.append(canonicalize(merged))
    return subsequent
