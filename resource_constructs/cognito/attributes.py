"""Standard and custom attribute types for a Cognito user pool.

See https://docs.aws.amazon.com/cognito/latest/developerguide/user-pool-settings-attributes.html
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, NotRequired, Optional, Required, TypedDict, Union

from resource_constructs.core.errors import InvalidArgument

STRING_MAX_LENGTH = 2048


class StandardAttribute(str, Enum):
    """OpenID Connect standard claims supported by Cognito user pools."""

    ADDRESS = "address"
    BIRTHDATE = "birthdate"
    EMAIL = "email"
    FAMILY_NAME = "family_name"
    GENDER = "gender"
    GIVEN_NAME = "given_name"
    LOCALE = "locale"
    MIDDLE_NAME = "middle_name"
    NAME = "name"
    NICKNAME = "nickname"
    PHONE_NUMBER = "phone_number"
    PICTURE = "picture"
    PREFERRED_USERNAME = "preferred_username"
    PROFILE = "profile"
    # The OIDC claim for the user's time zone is "zoneinfo".
    TIMEZONE = "zoneinfo"
    UPDATED_AT = "updated_at"
    WEBSITE = "website"

    def resolve(self) -> str:
        return self.value


class CustomAttributeConfig(TypedDict, total=False):
    """Fragment of ``CfnUserPool.SchemaAttributeProperty`` for one custom attribute."""

    attrDataType: Required[str]
    constraints: NotRequired[Dict[str, Dict[str, str]]]


def _bounds(**bounds: Optional[float]) -> Dict[str, str]:
    return {key: str(value) for key, value in bounds.items() if value is not None}


@dataclass(frozen=True)
class TextAttribute:
    """The String custom attribute type."""

    min_len: Optional[int] = None
    max_len: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_len is not None and self.min_len < 0:
            raise InvalidArgument(f"min_len cannot be less than 0 (value: {self.min_len}).")
        if self.max_len is not None and self.max_len > STRING_MAX_LENGTH:
            raise InvalidArgument(
                f"max_len cannot be greater than {STRING_MAX_LENGTH} (value: {self.max_len})."
            )

    def resolve(self) -> CustomAttributeConfig:
        config: CustomAttributeConfig = {"attrDataType": "String"}
        constraints = _bounds(minLength=self.min_len, maxLength=self.max_len)
        if constraints:
            config["constraints"] = {"stringAttributeConstraints": constraints}
        return config


@dataclass(frozen=True)
class NumericAttribute:
    """The Number custom attribute type. Bounds are passed through unchecked."""

    min: Optional[float] = None
    max: Optional[float] = None

    def resolve(self) -> CustomAttributeConfig:
        config: CustomAttributeConfig = {"attrDataType": "Number"}
        constraints = _bounds(minValue=self.min, maxValue=self.max)
        if constraints:
            config["constraints"] = {"numberAttributeConstraints": constraints}
        return config


@dataclass(frozen=True)
class BooleanAttribute:
    def resolve(self) -> CustomAttributeConfig:
        return {"attrDataType": "Boolean"}


@dataclass(frozen=True)
class TimestampAttribute:
    def resolve(self) -> CustomAttributeConfig:
        return {"attrDataType": "DateTime"}


CustomAttribute = Union[TextAttribute, NumericAttribute, BooleanAttribute, TimestampAttribute]
