# This module defines the status-return side of the linked list error taxonomy.
# Deletes that do not apply return a falsy DeleteResult carrying a machine-readable reason code.
# The matching human-readable diagnostic goes to the logging channel, never to normal output.

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.linked_list.list_config import ListConfig

EMPTY_LIST = "EMPTY_LIST"
INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
VALUE_NOT_FOUND = "VALUE_NOT_FOUND"

REASON_CODES = frozenset({EMPTY_LIST, INDEX_OUT_OF_RANGE, VALUE_NOT_FOUND})


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a status-returning delete; truthy only when a node was removed."""

    applied: bool
    reason_code: str | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.applied


APPLIED = DeleteResult(applied=True)


def report_not_applied(config: ListConfig, reason_code: str, *, operation: str, detail: str) -> DeleteResult:
    spec = config.diagnostic(reason_code)
    message = f"{operation}: {spec.message} ({detail})"
    logging.getLogger(config.logger_name).log(spec.level, message, extra={"reason_code": reason_code})
    return DeleteResult(applied=False, reason_code=reason_code, message=message)
