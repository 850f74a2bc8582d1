"""Lifecycle - retention policy, legal hold, export and deletion."""

from .service import DataLifecycleManager

__all__ = [
    "DataLifecycleManager",
]
