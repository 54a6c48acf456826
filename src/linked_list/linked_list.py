# This module implements the singly linked list container.
# The list exclusively owns its chain: nodes are created by inserts and released by deletes or teardown.
# Index errors on insert are raised as OutOfRangeError; deletes return a DeleteResult and log a diagnostic.
# Teardown walks the chain iteratively so very long lists never depend on call-stack depth.

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO, Any, NoReturn

from src.linked_list import diagnostics
from src.linked_list.diagnostics import APPLIED, DeleteResult, report_not_applied
from src.linked_list.errors import OutOfRangeError
from src.linked_list.list_config import ListConfig, get_list_config
from src.linked_list.node import Node


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"LinkedList stores int values, got {type(value).__name__}")
    return value


class LinkedList:
    """Singly linked list of integers with no tail reference.

    Indices are the only stable public handle; nodes never leave the list.
    Copying is disabled, use `clone()` for an independent chain.
    """

    def __init__(self, *, config: ListConfig | None = None) -> None:
        self._head: Node | None = None
        self._count = 0
        self._config = config or get_list_config()
        self._logger = logging.getLogger(self._config.logger_name)

    def __del__(self) -> None:
        if getattr(self, "_head", None) is not None:
            self.clear()

    def size(self) -> int:
        return self._count

    def empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def values(self) -> list[int]:
        return list(self)

    def _node_at(self, index: int) -> Node:
        if index < 0 or index >= self._count:
            raise OutOfRangeError(index, self._count, operation="node lookup")
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def push_front(self, value: int) -> None:
        self._head = Node(_require_int(value), self._head)
        self._count += 1
        self._logger.debug("push_front value=%s size=%s", value, self._count)

    def push_back(self, value: int) -> None:
        node = Node(_require_int(value))
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._count += 1
        self._logger.debug("push_back value=%s size=%s", value, self._count)

    def insert_at(self, index: int, value: int) -> None:
        """Insert `value` so it ends up at `index`; valid indices are 0..size() inclusive."""

        if index < 0 or index > self._count:
            raise OutOfRangeError(index, self._count + 1, operation="insert_at")
        _require_int(value)
        if index == 0:
            self.push_front(value)
            return
        if index == self._count:
            self.push_back(value)
            return

        prev = self._node_at(index - 1)
        prev.next = Node(value, prev.next)
        self._count += 1
        self._logger.debug("insert_at index=%s value=%s size=%s", index, value, self._count)

    def delete_at(self, index: int) -> DeleteResult:
        """Remove the node at `index`; never raises for a bad index."""

        if self._count == 0:
            return report_not_applied(
                self._config, diagnostics.EMPTY_LIST, operation="delete_at", detail=f"index={index}"
            )
        if index < 0 or index >= self._count:
            return report_not_applied(
                self._config,
                diagnostics.INDEX_OUT_OF_RANGE,
                operation="delete_at",
                detail=f"index={index} size={self._count}",
            )

        if index == 0:
            target = self._head
            self._head = target.next  # type: ignore[union-attr]
        else:
            prev = self._node_at(index - 1)
            target = prev.next
            prev.next = target.next  # type: ignore[union-attr]
        target.next = None  # type: ignore[union-attr]
        self._count -= 1
        self._logger.debug("delete_at index=%s size=%s", index, self._count)
        return APPLIED

    def delete_value(self, value: int) -> DeleteResult:
        """Remove the first node holding `value`."""

        if self._head is None:
            return report_not_applied(
                self._config, diagnostics.EMPTY_LIST, operation="delete_value", detail=f"value={value}"
            )

        prev: Node | None = None
        node: Node | None = self._head
        while node is not None:
            if node.value == value:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._count -= 1
                self._logger.debug("delete_value value=%s size=%s", value, self._count)
                return APPLIED
            prev, node = node, node.next

        return report_not_applied(
            self._config, diagnostics.VALUE_NOT_FOUND, operation="delete_value", detail=f"value={value}"
        )

    def render(self) -> str:
        body = " -> ".join(str(value) for value in self)
        return f"[{body}] (size={self._count})"

    def display(self, stream: IO[str] | None = None) -> None:
        print(self.render(), file=stream)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LinkedList({self.values()!r})"

    def clear(self) -> int:
        """Release every node front to back and return how many were released."""

        node = self._head
        self._head = None
        released = 0
        while node is not None:
            successor = node.next
            node.next = None
            node = successor
            released += 1
        self._count = 0
        return released

    def clone(self) -> LinkedList:
        """Return an independent list holding a freshly allocated copy of the chain."""

        duplicate = LinkedList(config=self._config)
        tail: Node | None = None
        for value in self:
            node = Node(value)
            if tail is None:
                duplicate._head = node
            else:
                tail.next = node
            tail = node
        duplicate._count = self._count
        return duplicate

    def __copy__(self) -> NoReturn:
        raise TypeError("LinkedList cannot be copied; use clone() for an independent chain")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError("LinkedList cannot be copied; use clone() for an independent chain")
