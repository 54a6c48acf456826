# This module replays a sequence of list operations given on the command line.
# Each operation is `name[:arg[:arg]]`; the final rendering is always printed to stdout.
# Diagnostics from failed deletes go to the logging channel and do not change the exit status.

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from src.common.logging import configure_logging
from src.linked_list.errors import OutOfRangeError
from src.linked_list.linked_list import LinkedList

OPERATION_ARITY = {
    "push_front": 1,
    "push_back": 1,
    "insert_at": 2,
    "delete_at": 1,
    "delete_value": 1,
    "render": 0,
}


@dataclass(frozen=True)
class Operation:
    name: str
    args: tuple[int, ...]


def parse_operation(token: str) -> Operation:
    name, *raw_args = token.split(":")
    if name not in OPERATION_ARITY:
        raise argparse.ArgumentTypeError(
            f"unknown operation {name!r}; expected one of: {', '.join(OPERATION_ARITY)}"
        )
    expected = OPERATION_ARITY[name]
    if len(raw_args) != expected:
        raise argparse.ArgumentTypeError(f"{name} takes {expected} argument(s), got {len(raw_args)} in {token!r}")
    try:
        args = tuple(int(item) for item in raw_args)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{token!r} arguments must be integers") from exc
    return Operation(name=name, args=args)


def apply_operation(target: LinkedList, operation: Operation) -> None:
    if operation.name == "render":
        target.display()
        return
    getattr(target, operation.name)(*operation.args)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply linked list operations in order and print the result")
    parser.add_argument(
        "operations",
        nargs="+",
        type=parse_operation,
        metavar="OP",
        help="push_front:V, push_back:V, insert_at:I:V, delete_at:I, delete_value:V or render",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    target = LinkedList()
    try:
        for operation in args.operations:
            apply_operation(target, operation)
    except OutOfRangeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        target.display()
        return 1

    target.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
