"""Render attributes into ``AWS::Cognito::UserPool`` schema entries."""

from __future__ import annotations

from typing import Mapping, Union

from aws_cdk import aws_cognito as cognito

from resource_constructs.core.errors import InvalidArgument

from .attributes import (
    BooleanAttribute,
    CustomAttribute,
    NumericAttribute,
    StandardAttribute,
    TextAttribute,
    TimestampAttribute,
)

CUSTOM_ATTRIBUTE_NAME_MAX_LENGTH = 20

_NUMBER_STANDARD_ATTRIBUTES = {StandardAttribute.UPDATED_AT}


def schema_attribute(
    name: str,
    attribute: Union[StandardAttribute, CustomAttribute],
    *,
    mutable: bool = True,
    required: bool = False,
) -> cognito.CfnUserPool.SchemaAttributeProperty:
    """Build a schema entry for a standard or custom attribute.

    For standard attributes ``name`` is ignored and the attribute's fixed
    identifier is used.
    """
    if isinstance(attribute, StandardAttribute):
        data_type = "Number" if attribute in _NUMBER_STANDARD_ATTRIBUTES else "String"
        return cognito.CfnUserPool.SchemaAttributeProperty(
            name=attribute.resolve(),
            attribute_data_type=data_type,
            mutable=mutable,
            required=required,
        )

    if not name or len(name) > CUSTOM_ATTRIBUTE_NAME_MAX_LENGTH:
        raise InvalidArgument(
            f"Custom attribute name must be 1-{CUSTOM_ATTRIBUTE_NAME_MAX_LENGTH} characters (value: '{name}')."
        )

    config = attribute.resolve()
    constraints = config.get("constraints", {})
    string_constraints = constraints.get("stringAttributeConstraints")
    number_constraints = constraints.get("numberAttributeConstraints")

    return cognito.CfnUserPool.SchemaAttributeProperty(
        name=name,
        attribute_data_type=config["attrDataType"],
        mutable=mutable,
        required=required,
        string_attribute_constraints=(
            cognito.CfnUserPool.StringAttributeConstraintsProperty(
                min_length=string_constraints.get("minLength"),
                max_length=string_constraints.get("maxLength"),
            )
            if string_constraints
            else None
        ),
        number_attribute_constraints=(
            cognito.CfnUserPool.NumberAttributeConstraintsProperty(
                min_value=number_constraints.get("minValue"),
                max_value=number_constraints.get("maxValue"),
            )
            if number_constraints
            else None
        ),
    )


def custom_attribute_from_config(entry: Mapping) -> CustomAttribute:
    """Build a custom attribute from an environment config entry."""
    kind = str(entry.get("type", "")).strip().lower()
    if kind == "string":
        return TextAttribute(min_len=entry.get("min_len"), max_len=entry.get("max_len"))
    if kind == "number":
        return NumericAttribute(min=entry.get("min"), max=entry.get("max"))
    if kind == "boolean":
        return BooleanAttribute()
    if kind == "datetime":
        return TimestampAttribute()
    raise InvalidArgument(f"Unknown custom attribute type: '{entry.get('type')}'")
