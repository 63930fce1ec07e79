# src/claro_list/folders/errors.py

from __future__ import annotations


class StoreError(Exception):
    """Base class for problems reading the persisted document."""


class StoreMissingError(StoreError):
    """Nothing has been persisted yet at the store location."""


class CorruptStoreError(StoreError):
    """The persisted blob exists but does not decode into a Document."""


class ValidationError(ValueError):
    """User input rejected before any state change (shown to the user as an alert)."""
