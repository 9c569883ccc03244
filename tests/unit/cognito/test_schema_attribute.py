import pytest

from resource_constructs.cognito.attributes import (
    BooleanAttribute,
    NumericAttribute,
    StandardAttribute,
    TextAttribute,
)
from resource_constructs.cognito.schema import custom_attribute_from_config, schema_attribute
from resource_constructs.core.errors import InvalidArgument


pytestmark = [pytest.mark.unit]


def test_schema_attribute_for_text_carries_string_constraints() -> None:
    prop = schema_attribute("tenant_id", TextAttribute(min_len=1, max_len=64), mutable=False)

    assert prop.name == "tenant_id"
    assert prop.attribute_data_type == "String"
    assert prop.mutable is False
    assert prop.string_attribute_constraints.min_length == "1"
    assert prop.string_attribute_constraints.max_length == "64"
    assert prop.number_attribute_constraints is None


def test_schema_attribute_for_number_carries_number_constraints() -> None:
    prop = schema_attribute("plan_tier", NumericAttribute(max=3))

    assert prop.attribute_data_type == "Number"
    assert prop.number_attribute_constraints.max_value == "3"
    assert prop.number_attribute_constraints.min_value is None


def test_schema_attribute_for_standard_attribute_uses_fixed_name() -> None:
    prop = schema_attribute("ignored", StandardAttribute.TIMEZONE, required=True)

    assert prop.name == "zoneinfo"
    assert prop.attribute_data_type == "String"
    assert prop.required is True


def test_schema_attribute_updated_at_is_numeric() -> None:
    prop = schema_attribute("", StandardAttribute.UPDATED_AT)

    assert prop.attribute_data_type == "Number"


@pytest.mark.parametrize("name", ["", "x" * 21])
def test_schema_attribute_rejects_bad_custom_names(name: str) -> None:
    with pytest.raises(InvalidArgument):
        schema_attribute(name, BooleanAttribute())


def test_custom_attribute_from_config() -> None:
    assert custom_attribute_from_config({"type": "string", "max_len": 10}) == TextAttribute(max_len=10)
    assert custom_attribute_from_config({"type": "Number", "min": 1}) == NumericAttribute(min=1)
    assert custom_attribute_from_config({"type": "boolean"}) == BooleanAttribute()


def test_custom_attribute_from_config_propagates_text_validation() -> None:
    with pytest.raises(InvalidArgument):
        custom_attribute_from_config({"type": "string", "max_len": 4096})


def test_custom_attribute_from_config_rejects_unknown_type() -> None:
    with pytest.raises(InvalidArgument, match="Unknown custom attribute type"):
        custom_attribute_from_config({"type": "blob"})
