"""Base service exceptions.

These exceptions are raised by the service layer and should be caught by
the calling layer and converted to appropriate user-facing responses.
Storage failures are raised as ``storefront.db.StorageOperationError``.
"""


class ServiceError(Exception):
    """Base service exception."""

    pass


class NotFoundError(ServiceError):
    """Resource not found."""

    pass


class ValidationError(ServiceError):
    """Validation error."""

    pass


class MissingSequenceError(ServiceError):
    """No sequence row exists for the requested counter name.

    A configuration fault: the counter has to be provisioned before use
    (``storefront init-db`` or ``storefront create-sequence``).
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No sequence row for {name!r} (could not get next {name} sequence)")


class SequenceConflictError(ServiceError):
    """Sequence row changed between read and write; the claim must be retried."""

    def __init__(self, name: str, seen: int):
        self.name = name
        self.seen = seen
        super().__init__(f"Sequence {name!r} moved past {seen} during update")
