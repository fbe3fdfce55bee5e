from typing import Any, Callable, List, Sequence, TypeVar

T = TypeVar("T")


def stable_sort_by_order(items: Sequence[T], order_field: str = "order") -> List[T]:
    """
    Sort by the order field ascending.

    Ties keep their original position (sorted() is stable); id or type
    never take part in the comparison.
    """
    return sorted(items, key=lambda item: getattr(item, order_field))


def compact_order(
    items: Sequence[T],
    *,
    copy: Callable[[T, int], T],
) -> List[T]:
    """
    Re-assign sequential order values (0..N-1) following list position.

    `copy(item, index)` must return a new item carrying the new order,
    so the input sequence is left untouched.
    """
    return [copy(item, index) for index, item in enumerate(items)]


def move_item(
    items: Sequence[T],
    *,
    from_index: int,
    to_index: int,
    after: bool = False,
) -> List[T]:
    """
    Remove the item at `from_index` and reinsert it next to the item
    currently at `to_index` (before it, or after it when `after`).
    """
    result: List[Any] = list(items)
    if from_index == to_index:
        return result

    moved = result.pop(from_index)
    target = to_index - 1 if from_index < to_index else to_index
    if after:
        target += 1

    result.insert(target, moved)
    return result
