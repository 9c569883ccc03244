"""Deployment context (partition/region/account) used to derive identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from aws_cdk import Stack

from .errors import InvalidArgument

DEFAULT_PARTITION = "aws"
DEFAULT_URL_SUFFIX = "amazonaws.com"

_URL_SUFFIXES = {
    "aws": "amazonaws.com",
    "aws-cn": "amazonaws.com.cn",
    "aws-us-gov": "amazonaws.com",
}


class ArnComponents(NamedTuple):
    partition: str
    service: str
    region: str
    account: str
    resource: str


def parse_arn(arn: str) -> ArnComponents:
    """Split ``arn:<partition>:<service>:<region>:<account>:<resource>``."""
    parts = str(arn or "").split(":", 5)
    if len(parts) != 6 or parts[0] != "arn":
        raise InvalidArgument(f"Malformed ARN: '{arn}'")
    _, partition, service, region, account, resource = parts
    if not partition or not service or not resource:
        raise InvalidArgument(f"Malformed ARN: '{arn}'")
    return ArnComponents(partition, service, region, account, resource)


@dataclass(frozen=True)
class DeploymentContext:
    """Where a resource is deployed. Values may be CDK tokens when read from a stack."""

    region: str
    account: str
    partition: str = DEFAULT_PARTITION
    url_suffix: str = DEFAULT_URL_SUFFIX

    @classmethod
    def from_stack(cls, stack: Stack) -> "DeploymentContext":
        return cls(
            region=stack.region,
            account=stack.account,
            partition=stack.partition,
            url_suffix=stack.url_suffix,
        )

    @classmethod
    def from_arn(cls, arn: str) -> "DeploymentContext":
        components = parse_arn(arn)
        return cls(
            region=components.region,
            account=components.account,
            partition=components.partition,
            url_suffix=_URL_SUFFIXES.get(components.partition, DEFAULT_URL_SUFFIX),
        )

    def arn(self, service: str, resource: str) -> str:
        return f"arn:{self.partition}:{service}:{self.region}:{self.account}:{resource}"

    def queue_arn(self, queue_name: str) -> str:
        return self.arn("sqs", queue_name)

    def queue_url(self, queue_name: str) -> str:
        return f"https://sqs.{self.region}.{self.url_suffix}/{self.account}/{queue_name}"
