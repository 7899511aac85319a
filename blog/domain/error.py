"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Caller-supplied data violates a required invariant.

    Always raised before any storage mutation takes place.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageError(DomainError):
    """The storage layer failed (connectivity, constraint violation, timeout).

    Never retried by the domain; callers decide the retry policy.
    """

    pass
