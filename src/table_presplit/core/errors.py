"""Exception hierarchy for table pre-splitting.

Validation failures are raised locally before the admin client is touched.
Admin-side failures derive from ExternalServiceError.
"""

from __future__ import annotations


class PresplitError(Exception):
    """Base exception for all table-presplit errors."""
    pass


class InvalidArgumentError(PresplitError, ValueError):
    """Raised when a caller-supplied argument is out of range or malformed."""
    pass


class ExternalServiceError(PresplitError):
    """Raised by an admin client when a table operation fails."""
    pass


class TableExistsError(ExternalServiceError):
    """Raised when creating a table that already exists."""
    pass


class TableNotFoundError(ExternalServiceError):
    """Raised when the named table does not exist."""
    pass


class TableNotEnabledError(ExternalServiceError):
    """Raised when disabling a table that is already disabled."""
    pass


class TableNotDisabledError(ExternalServiceError):
    """Raised when deleting a table that is still enabled."""
    pass
