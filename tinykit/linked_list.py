"""Singly linked list nodes where any node acts as the head of its chain."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class ListNode:
    """A node carrying ``value`` and a link to the ``next`` node."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def foreach(self, callback: Callable[[ListNode], Any]) -> Any:
        """Call ``callback`` on each node; stop and return its first non-zero result."""
        for node in self:
            result = callback(node)
            if result:
                return result
        return 0

    def last(self) -> ListNode:
        """Return the final node of the chain."""
        tail = self
        for tail in self:
            pass
        return tail

    def at(self, index: int) -> ListNode:
        """Return the node ``index`` steps from this one."""
        if index >= 0:
            for position, node in enumerate(self):
                if position == index:
                    return node
        raise IndexError(f"list index {index} out of range")

    def append(self, chain: ListNode) -> None:
        """Link ``chain`` after the last node."""
        self.last().next = chain

    def insert(self, chain: ListNode) -> None:
        """Splice ``chain`` in directly after this node."""
        following = self.next
        self.next = chain
        chain.last().next = following

    def remove(self, node: ListNode) -> None:
        """Unlink ``node`` from the chain following this node."""
        for prev in self:
            if prev.next is node:
                prev.next = node.next
                return
        raise ValueError("node is not in the list")