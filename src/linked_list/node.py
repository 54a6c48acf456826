# This module defines the node record owned by a linked list.
# Each node owns only its immediate successor; the list owns the head and therefore the whole chain.

from __future__ import annotations


class Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next: Node | None = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"
