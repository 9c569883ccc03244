"""Shared building blocks: errors, late-bound values and deployment context."""

from .context import DeploymentContext, parse_arn
from .errors import InternalError, InvalidArgument, ResourceConfigError, ValidationError
from .tokens import LateBound, LiteralValue, Unresolved, as_late_bound

__all__ = [
    "DeploymentContext",
    "parse_arn",
    "ResourceConfigError",
    "InvalidArgument",
    "ValidationError",
    "InternalError",
    "LateBound",
    "LiteralValue",
    "Unresolved",
    "as_late_bound",
]
