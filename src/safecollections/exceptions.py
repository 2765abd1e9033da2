from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or of an unusable kind."""


class UnsupportedOperationError(TypeError):
    """Raised when an operation is not supported by a view or adapter."""


class MutationRejectedError(UnsupportedOperationError):
    """Raised when a structural mutation is attempted on a read-only view."""


class NoSuchElementError(LookupError):
    pass
