"""Reconciliation of local board moves with the backend."""

from .drag import MOVE_FAILED_MESSAGE, DragReconciler

__all__ = [
    "MOVE_FAILED_MESSAGE",
    "DragReconciler",
]
