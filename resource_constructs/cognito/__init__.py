"""Cognito user-pool attribute modeling."""

from .attributes import (
    BooleanAttribute,
    CustomAttribute,
    CustomAttributeConfig,
    NumericAttribute,
    StandardAttribute,
    TextAttribute,
    TimestampAttribute,
)
from .schema import custom_attribute_from_config, schema_attribute

__all__ = [
    "StandardAttribute",
    "CustomAttribute",
    "CustomAttributeConfig",
    "TextAttribute",
    "NumericAttribute",
    "BooleanAttribute",
    "TimestampAttribute",
    "schema_attribute",
    "custom_attribute_from_config",
]
