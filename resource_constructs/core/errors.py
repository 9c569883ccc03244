"""Error taxonomy for resource configuration failures."""

from __future__ import annotations

from typing import Iterable


class ResourceConfigError(Exception):
    """Base class for configuration errors raised while resolving resources."""


class InvalidArgument(ResourceConfigError, ValueError):
    """A constructor received an out-of-range or malformed value."""


class ValidationError(ResourceConfigError, ValueError):
    """Properties disagree with each other or violate a service limit."""

    def __init__(self, message: str, errors: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors) or [message]


class InternalError(ResourceConfigError, RuntimeError):
    """A branch that should be unreachable was taken."""
