"""Small string, stack and linked-list problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "ListNode",
    "find_pattern",
    "remove_adjacent_duplicates",
    "asteroid_collision",
    "reverse_list",
]


def find_pattern(text: str, pattern: str) -> list[int]:
    """Return every index where pattern occurs in text, overlaps included.

    Uses the brute-force comparison at each possible alignment.
    """
    width = len(pattern)
    return [
        i
        for i in range(len(text) - width + 1)
        if all(text[i + j] == ch for j, ch in enumerate(pattern))
    ]


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in text:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative ones move left; when two meet the
    smaller one explodes, and equal sizes destroy each other.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        while stack and stack[-1] > 0 and asteroid < 0:
            if stack[-1] < -asteroid:
                stack.pop()
                continue
            if stack[-1] == -asteroid:
                stack.pop()
            asteroid = 0
            break
        if asteroid != 0:
            stack.append(asteroid)
    return stack


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> Optional["ListNode"]:
        """Build a linked list from values; return its head, or None if empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[Any]:
        """Return the values from this node to the end of the list."""
        return list(self)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous