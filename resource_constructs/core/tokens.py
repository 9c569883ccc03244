"""Late-bound values.

A property such as a queue name may not be known until the template is
deployed (a CDK token, a parameter reference, ...). Resolvers must not run
value-dependent checks against such placeholders, so they are carried as an
explicit ``LiteralValue | Unresolved`` pair instead of a bare string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from aws_cdk import Token


@dataclass(frozen=True)
class LiteralValue:
    """A value that is concrete at synthesis time."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Unresolved:
    """A placeholder that only the provisioning engine can resolve."""

    token: Any = None
    description: str = ""

    def __str__(self) -> str:
        if self.token is not None:
            return str(self.token)
        return f"<unresolved {self.description}>".strip()


LateBound = Union[LiteralValue, Unresolved]


def as_late_bound(value: Union[str, LateBound, None]) -> Optional[LateBound]:
    """Normalize a raw value into ``LiteralValue``/``Unresolved`` (``None`` stays ``None``)."""
    if value is None or isinstance(value, (LiteralValue, Unresolved)):
        return value
    if Token.is_unresolved(value):
        return Unresolved(token=value)
    return LiteralValue(str(value))


def is_literal(value: Optional[LateBound]) -> bool:
    return isinstance(value, LiteralValue)


def render(value: Optional[LateBound]) -> Any:
    """Return the value to place into a fragment (the raw token for unresolved values)."""
    if value is None:
        return None
    if isinstance(value, LiteralValue):
        return value.value
    return value.token if value.token is not None else value
