"""Database-related exceptions."""


class StorageOperationError(Exception):
    """Raised when a storage read or write fails.

    Covers driver errors (constraint violations, lost connections, lock
    timeouts), which are chained as ``__cause__``, and updates that matched
    no row. The enclosing transaction must be rolled back.
    """

    pass
