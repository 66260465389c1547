"""Persistent stores used by the joborg pipeline."""

from .record_store import RecordStore, StoreError

__all__ = ["RecordStore", "StoreError"]
