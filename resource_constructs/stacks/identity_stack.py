"""Identity stack: a Cognito user pool whose schema comes from configuration."""

from __future__ import annotations

from typing import List

from aws_cdk import CfnOutput, Stack, aws_cognito as cognito
from constructs import Construct

from resource_constructs.cognito.schema import custom_attribute_from_config, schema_attribute
from resource_constructs.config.builders import parse_standard_attribute
from resource_constructs.config.types import EnvironmentConfig


class IdentityStack(Stack):
    """Provision the user pool and its attribute schema."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        config: EnvironmentConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = environment
        self.config = config

        self.user_pool = cognito.CfnUserPool(
            self,
            "UserPool",
            user_pool_name=str(config.get("user_pool_name", f"user-pool-{environment}")),
            schema=self._schema(),
        )

        CfnOutput(
            self,
            "UserPoolId",
            value=self.user_pool.ref,
            description="Cognito user pool id",
        )

    def _schema(self) -> List[cognito.CfnUserPool.SchemaAttributeProperty]:
        required = {parse_standard_attribute(name) for name in self.config.get("required_attributes", [])}

        schema: List[cognito.CfnUserPool.SchemaAttributeProperty] = []
        for name in self.config.get("standard_attributes", []):
            attribute = parse_standard_attribute(name)
            schema.append(schema_attribute(attribute.value, attribute, required=attribute in required))

        for entry in self.config.get("custom_attributes", []):
            schema.append(
                schema_attribute(
                    str(entry.get("name", "")).strip(),
                    custom_attribute_from_config(entry),
                    mutable=bool(entry.get("mutable", True)),
                )
            )
        return schema
