"""Reachability analysis over the directed graph implied by relationships."""

from collections import defaultdict, deque
from typing import Iterable, Sequence

from framework_validation.validators.models import Relationship


def build_adjacency(relationships: Sequence[Relationship]) -> dict[str, list[str]]:
    """Map each source element id to its targets, in relationship order."""
    adjacency: dict[str, list[str]] = defaultdict(list)
    for rel in relationships:
        adjacency[rel.source_element_id].append(rel.target_element_id)
    return adjacency


def reachable_from(seeds: Iterable[str], relationships: Sequence[Relationship]) -> frozenset[str]:
    """Breadth-first search from the seed ids.

    Returns every element id reachable through zero or more directed edges,
    seeds included. Each node is expanded at most once, so cycles terminate.
    Targets that reference nonexistent elements are still collected but never
    match an element id, so callers filtering by element see no effect.
    """
    adjacency = build_adjacency(relationships)

    visited: set[str] = set()
    queue: deque[str] = deque()
    for seed in seeds:
        if seed not in visited:
            visited.add(seed)
            queue.append(seed)

    while queue:
        current = queue.popleft()
        for target in adjacency.get(current, ()):
            if target not in visited:
                visited.add(target)
                queue.append(target)

    return frozenset(visited)
