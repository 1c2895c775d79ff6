"""Editing module: every mutating domain operation.

- Validates input before touching storage
- Runs each operation inside one transaction scope
- Raises ValidationError / NotFoundError / StorageError, never HTTP errors
"""
