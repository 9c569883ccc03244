"""Construct wrapping ``AWS::SQS::Queue`` with validated, derived properties."""

from __future__ import annotations

from typing import Optional

from aws_cdk import Arn, ArnFormat, Stack, Token, aws_kms as kms, aws_sqs as sqs
from constructs import Construct

from resource_constructs.core.context import DeploymentContext
from resource_constructs.core.errors import InvalidArgument
from resource_constructs.core.tokens import Unresolved, as_late_bound
from resource_constructs.sqs.resolver import import_queue, resolve_queue
from resource_constructs.sqs.spec import ImportedQueue, KeyLike, QueueResolution, QueueSpec, ReferencedKey
from resource_constructs.utils.logger import get_logger

_CFN_PROPERTY_NAMES = {
    "queueName": "queue_name",
    "fifoQueue": "fifo_queue",
    "contentBasedDeduplication": "content_based_deduplication",
    "kmsMasterKeyId": "kms_master_key_id",
    "kmsDataKeyReusePeriodSeconds": "kms_data_key_reuse_period_seconds",
    "redrivePolicy": "redrive_policy",
    "delaySeconds": "delay_seconds",
    "maximumMessageSize": "maximum_message_size",
    "messageRetentionPeriod": "message_retention_period",
    "receiveMessageWaitTimeSeconds": "receive_message_wait_time_seconds",
    "visibilityTimeout": "visibility_timeout",
}


class ManagedQueue(Construct):
    """A new SQS queue, with a KMS key created alongside it when required."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        spec: Optional[QueueSpec] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        self.spec = spec or QueueSpec()
        name = as_late_bound(self.spec.queue_name)
        if isinstance(name, Unresolved) and name.token is None:
            raise InvalidArgument(f"Queue name {name} needs a CDK token to synthesize")
        self.context = DeploymentContext.from_stack(Stack.of(self))

        resolution = resolve_queue(self.spec, context=self.context, owner_path=self.node.path)
        self.encryption_master_key: Optional[KeyLike] = None
        self.key_owned = False

        blueprint = resolution.owned_key
        if blueprint is not None:
            key = kms.Key(self, blueprint.construct_id, description=blueprint.description)
            resolution = resolution.bind_key(key.key_arn)
            self.encryption_master_key = key
            self.key_owned = True
        elif isinstance(resolution.key, ReferencedKey):
            self.encryption_master_key = resolution.key.key

        self.resolution: QueueResolution = resolution
        self.fifo = resolution.fifo
        self.encryption = resolution.encryption

        self.resource = sqs.CfnQueue(self, "Resource", **self._cfn_properties(resolution))
        self.queue_arn = self.resource.attr_arn
        self.queue_name = self.resource.attr_queue_name
        self.queue_url = self.resource.ref

        get_logger(__name__, construct_path=self.node.path).info(
            "Queue resolved",
            extra={
                "fifo": self.fifo,
                "encryption": self.encryption.name,
                "key_owned": self.key_owned,
            },
        )

    @staticmethod
    def _cfn_properties(resolution: QueueResolution) -> dict:
        return {_CFN_PROPERTY_NAMES[key]: value for key, value in resolution.fragment.items()}

    @classmethod
    def from_queue_arn(cls, scope: Construct, queue_arn: str) -> ImportedQueue:
        return cls.from_queue_attributes(scope, queue_arn=queue_arn)

    @classmethod
    def from_queue_attributes(
        cls,
        scope: Construct,
        *,
        queue_arn: str,
        queue_name: Optional[str] = None,
        queue_url: Optional[str] = None,
        key_arn: Optional[str] = None,
    ) -> ImportedQueue:
        """Reference an existing queue, deriving name and URL in the scope's stack."""
        if queue_name is None and Token.is_unresolved(queue_arn):
            queue_name = Arn.split(queue_arn, ArnFormat.NO_RESOURCE_NAME).resource
        return import_queue(
            queue_arn,
            queue_name=queue_name,
            queue_url=queue_url,
            key_arn=key_arn,
            context=DeploymentContext.from_stack(Stack.of(scope)),
        )
