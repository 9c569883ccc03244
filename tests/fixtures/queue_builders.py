"""Builders for queue resolver tests."""

from __future__ import annotations

from dataclasses import dataclass

from resource_constructs.core.context import DeploymentContext

ACCOUNT = "123456789012"
REGION = "us-east-1"


def build_context(*, region: str = REGION, account: str = ACCOUNT) -> DeploymentContext:
    return DeploymentContext(region=region, account=account)


@dataclass(frozen=True)
class FakeQueue:
    """Anything with a ``queue_arn`` can be a dead-letter target."""

    queue_arn: str


def build_queue_arn(name: str, *, region: str = REGION, account: str = ACCOUNT) -> str:
    return f"arn:aws:sqs:{region}:{account}:{name}"


def build_key_arn(key_id: str = "1234abcd-12ab-34cd-56ef-1234567890ab") -> str:
    return f"arn:aws:kms:{REGION}:{ACCOUNT}:key/{key_id}"
