"""Dynamic programming: 0/1 knapsack, longest common subsequence and subset sum."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose total weight fits ``capacity``.

    Each item may be taken at most once.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs_length(s: Sequence, t: Sequence) -> int:
    """Return the length of the longest common subsequence of ``s`` and ``t``."""
    previous = [0] * (len(t) + 1)
    for a in s:
        current = [0]
        for j, b in enumerate(t):
            current.append(previous[j] + 1 if a == b else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """Return True if some subset of ``values`` sums to exactly ``target``."""
    if target < 0:
        raise ValueError("target must be non-negative")
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")
    reachable = {0}
    for value in values:
        reachable |= {total + value for total in reachable if total + value <= target}
    return target in reachable