"""
Singly linked list container with indexed access and status-returning deletes.
It groups the node record, error taxonomy, diagnostics, and configuration under one import path.
Most functionality lives in the sibling modules; this file only re-exports the public surface.
"""

from src.linked_list.diagnostics import DeleteResult
from src.linked_list.errors import OutOfRangeError
from src.linked_list.linked_list import LinkedList

__all__ = ["DeleteResult", "LinkedList", "OutOfRangeError"]
