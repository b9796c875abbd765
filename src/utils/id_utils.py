from typing import Iterable, List


def dedupe(ids: Iterable[int]) -> List[int]:
    """Drop repeated ids, keeping the first occurrence of each."""
    seen = set()
    unique: List[int] = []
    for rider_id in ids:
        if rider_id in seen:
            continue
        seen.add(rider_id)
        unique.append(rider_id)
    return unique


def move_to_front(ids: Iterable[int], rider_id: int) -> List[int]:
    """Return a new list with `rider_id` first and the rest in original order.

    The id is prepended when it is missing.
    """
    return dedupe([rider_id, *ids])


def concat_unique(groups: Iterable[Iterable[int]]) -> List[int]:
    return dedupe(rider_id for group in groups for rider_id in group)
