from typing import Iterable, List, Sequence, TypeVar


T = TypeVar("T")


def array_difference(base: Sequence[T], other: Iterable[T]) -> List[T]:
    """Items of ``other`` that are not in ``base``, in ``other``'s order."""
    return [item for item in other if item not in base]


def array_merge(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """Concatenate both sequences, keeping only the first occurrence of each item."""
    seen = set()
    result: List[T] = []
    for items in (first, second):
        for item in items:
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                # Unhashable items fall back to an equality scan
                if item in result:
                    continue
            result.append(item)
    return result
