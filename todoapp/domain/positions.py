"""
Ordered List Positions

Sparse integer ordering keys for a user's todo list. New keys are placed
between two neighbors without touching any other row; only when two
neighbors are adjacent integers is the list renumbered.

Python ints never overflow, but keys are persisted in a BIGINT column, so
renumbering keeps them close to `POSITION_STEP * len(list)`.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

POSITION_STEP = 1024
INITIAL_POSITION = POSITION_STEP


class PositionSpaceExhausted(Exception):
    """No integer key fits strictly between the two neighbors"""

    def __init__(self, prev_key: int, next_key: int):
        self.prev_key = prev_key
        self.next_key = next_key
        super().__init__(f"No room between positions {prev_key} and {next_key}")


@dataclass(frozen=True)
class Slot:
    """
    Target slot in an ordered sibling list.

    Indexes point into the list of sibling positions the slot was resolved
    against; None means start of list (prev) or end of list (next).
    """

    prev_index: Optional[int]
    next_index: Optional[int]

    def neighbors(self, positions: Sequence[int]):
        prev_key = positions[self.prev_index] if self.prev_index is not None else None
        next_key = positions[self.next_index] if self.next_index is not None else None
        return prev_key, next_key


def position_after(last: Optional[int]) -> int:
    """Key for an item appended after `last` (None for an empty list)"""
    if last is None:
        return INITIAL_POSITION
    return last + POSITION_STEP


def position_between(prev_key: Optional[int], next_key: Optional[int]) -> int:
    """
    Key strictly between `prev_key` and `next_key`.

    Args:
        prev_key: Key of the item before the slot, None for start of list
        next_key: Key of the item after the slot, None for end of list

    Returns:
        New key k with prev_key < k < next_key

    Raises:
        ValueError: prev_key >= next_key
        PositionSpaceExhausted: prev_key and next_key are adjacent integers
    """
    if prev_key is None and next_key is None:
        return INITIAL_POSITION
    if prev_key is None:
        return next_key - POSITION_STEP
    if next_key is None:
        return prev_key + POSITION_STEP
    if prev_key >= next_key:
        raise ValueError(f"prev_key ({prev_key}) must be lower than next_key ({next_key})")
    if next_key - prev_key < 2:
        raise PositionSpaceExhausted(prev_key, next_key)
    return prev_key + (next_key - prev_key) // 2


def resolve_slot(
    positions: Sequence[int],
    prev_pos: Optional[int] = None,
    next_pos: Optional[int] = None,
) -> Slot:
    """
    Find the slot a client asked for in the currently stored order.

    Client-supplied keys may be stale, so the neighbors are re-derived from
    `positions` (ascending, excluding the item being moved):

    - with `prev_pos`, the slot is right after the last stored key <= prev_pos
      and before whatever is stored after it
    - with only `next_pos`, the slot is right before the first stored key
      >= next_pos
    - with neither, the slot is the end of the list

    Raises:
        ValueError: both hints given and prev_pos >= next_pos
    """
    if prev_pos is not None and next_pos is not None and prev_pos >= next_pos:
        raise ValueError(f"prev_pos ({prev_pos}) must be lower than next_pos ({next_pos})")

    count = len(positions)

    if prev_pos is not None:
        prev_index = None
        for index, position in enumerate(positions):
            if position > prev_pos:
                break
            prev_index = index
        next_index = 0 if prev_index is None else prev_index + 1
        return Slot(prev_index, next_index if next_index < count else None)

    if next_pos is not None:
        next_index = None
        for index, position in enumerate(positions):
            if position >= next_pos:
                next_index = index
                break
        if next_index is None:
            return Slot(count - 1 if count else None, None)
        return Slot(next_index - 1 if next_index > 0 else None, next_index)

    return Slot(count - 1 if count else None, None)


def rebalanced_positions(count: int) -> List[int]:
    """Evenly spaced keys for `count` items, in order"""
    return [POSITION_STEP * (index + 1) for index in range(count)]
