"""Typed inputs and outputs of the queue resolver."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Protocol, TypedDict, Union

from aws_cdk import Duration

from resource_constructs.core.tokens import LateBound, Unresolved


class QueueEncryption(str, Enum):
    """What kind of encryption to apply to a queue."""

    UNENCRYPTED = "NONE"
    # Server-side encryption with the SQS-owned KMS key (alias/aws/sqs).
    MANAGED_KEY = "MANAGED"
    # Server-side encryption with a customer-managed KMS key.
    CUSTOMER_KEY = "KMS"


class QueueLike(Protocol):
    queue_arn: str


class KeyLike(Protocol):
    key_arn: str


@dataclass(frozen=True)
class ExternalKey:
    """Reference to a KMS key that exists outside of this deployment."""

    key_arn: str


@dataclass(frozen=True)
class DeadLetterQueue:
    queue: QueueLike
    max_receive_count: int


@dataclass(frozen=True)
class QueueSpec:
    """Desired configuration of one queue. Every field is optional."""

    queue_name: Union[str, LateBound, None] = None
    retention_period: Optional[Duration] = None
    delivery_delay: Optional[Duration] = None
    max_message_size_bytes: Optional[int] = None
    receive_message_wait_time: Optional[Duration] = None
    visibility_timeout: Optional[Duration] = None
    dead_letter_queue: Optional[DeadLetterQueue] = None
    encryption: Optional[QueueEncryption] = None
    encryption_master_key: Optional[KeyLike] = None
    data_key_reuse: Optional[Duration] = None
    fifo: Optional[bool] = None
    content_based_deduplication: Optional[bool] = None


@dataclass(frozen=True, eq=False)
class KeyBlueprint:
    """A KMS key the caller must create on behalf of the queue.

    Compared by identity: every resolution mints its own blueprint.
    """

    description: str
    construct_id: str = "Key"
    arn_placeholder: Unresolved = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arn_placeholder", Unresolved(description=f"arn of key '{self.description}'"))


@dataclass(frozen=True)
class OwnedKey:
    """A key created for, and lifecycle-managed by, the resolved queue."""

    blueprint: KeyBlueprint


@dataclass(frozen=True)
class ReferencedKey:
    """A caller-supplied key the queue only points at."""

    key: KeyLike


KeyHandle = Union[OwnedKey, ReferencedKey]


class RedrivePolicy(TypedDict):
    deadLetterTargetArn: str
    maxReceiveCount: int


class QueueFragment(TypedDict, total=False):
    """Resolved ``AWS::SQS::Queue`` properties keyed by their template field names."""

    queueName: Any
    fifoQueue: bool
    contentBasedDeduplication: bool
    kmsMasterKeyId: Any
    kmsDataKeyReusePeriodSeconds: Any
    redrivePolicy: RedrivePolicy
    delaySeconds: Any
    maximumMessageSize: Any
    messageRetentionPeriod: Any
    receiveMessageWaitTimeSeconds: Any
    visibilityTimeout: Any


@dataclass(frozen=True)
class QueueIdentifiers:
    queue_name: str
    queue_arn: str
    queue_url: str


@dataclass(frozen=True)
class QueueResolution:
    """Outcome of resolving a ``QueueSpec``."""

    fragment: QueueFragment
    fifo: bool
    encryption: QueueEncryption
    key: Optional[KeyHandle] = None
    identifiers: Optional[QueueIdentifiers] = None

    @property
    def owned_key(self) -> Optional[KeyBlueprint]:
        return self.key.blueprint if isinstance(self.key, OwnedKey) else None

    @property
    def is_bound(self) -> bool:
        return not isinstance(self.fragment.get("kmsMasterKeyId"), Unresolved)

    def bind_key(self, key_arn: str) -> "QueueResolution":
        """Return a copy whose fragment points at the instantiated owned key."""
        blueprint = self.owned_key
        if blueprint is None or self.fragment.get("kmsMasterKeyId") is not blueprint.arn_placeholder:
            return self
        fragment: QueueFragment = {**self.fragment}
        fragment["kmsMasterKeyId"] = key_arn
        return replace(self, fragment=fragment)


@dataclass(frozen=True)
class ImportedQueue:
    """An existing queue referenced by ARN."""

    queue_arn: str
    queue_name: str
    queue_url: str
    fifo: bool
    encryption_master_key: Optional[KeyLike] = None
