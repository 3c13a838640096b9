"""Store-level error kinds. The service layer translates these for callers."""


class StoreError(Exception):
    """Any failure inside the record store."""


class RecordNotFoundError(StoreError):
    pass


class NoUpdatableFieldsError(StoreError):
    pass


class RecordConflictError(StoreError):
    """Insert collided with a uniqueness constraint."""
