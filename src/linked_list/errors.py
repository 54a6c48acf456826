"""Raised failures for linked list index handling."""

from __future__ import annotations


class OutOfRangeError(IndexError):
    """Index outside the range an operation accepts.

    Empty lists and lists that are merely too short report the same condition.
    `limit` is the exclusive upper bound that was in force for the operation.
    """

    def __init__(self, index: int, limit: int, *, operation: str) -> None:
        self.index = index
        self.limit = limit
        self.operation = operation
        super().__init__(f"Index out of range: {operation} got index {index}, expected 0 <= index < {limit}")
