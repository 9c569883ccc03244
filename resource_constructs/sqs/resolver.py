"""Turn a ``QueueSpec`` into a validated ``AWS::SQS::Queue`` fragment.

Resolution is a pure function of the ``QueueSpec`` and the deployment context. When a
customer-managed key has to be created, the resolver only describes it
(``KeyBlueprint``); instantiating the key is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from aws_cdk import Duration

from resource_constructs.core.context import DeploymentContext, parse_arn
from resource_constructs.core.errors import InternalError, ValidationError
from resource_constructs.core.tokens import LiteralValue, as_late_bound, render
from resource_constructs.utils.logger import get_logger

from .spec import (
    ExternalKey,
    ImportedQueue,
    KeyBlueprint,
    KeyHandle,
    OwnedKey,
    QueueEncryption,
    QueueFragment,
    QueueIdentifiers,
    QueueResolution,
    QueueSpec,
    ReferencedKey,
)
from .validation import validate_queue_spec

FIFO_SUFFIX = ".fifo"
SQS_MANAGED_KEY_ALIAS = "alias/aws/sqs"


@dataclass(frozen=True)
class FifoResolution:
    fifo: bool
    fragment: QueueFragment


@dataclass(frozen=True)
class EncryptionResolution:
    mode: QueueEncryption
    fragment: QueueFragment
    key: Optional[KeyHandle] = None


def _seconds(value: Optional[Duration]):
    return value.to_seconds() if value is not None else None


def _compact(**values) -> QueueFragment:
    return {key: value for key, value in values.items() if value is not None}  # type: ignore[return-value]


def resolve_fifo(spec: QueueSpec, owner_path: str = "") -> FifoResolution:
    """Reconcile the ``fifo`` flag with the queue name and deduplication setting."""
    name = as_late_bound(spec.queue_name)
    literal_name = name.value if isinstance(name, LiteralValue) else None

    fifo = spec.fifo
    if fifo is None and literal_name is not None and literal_name.endswith(FIFO_SUFFIX):
        fifo = True
        get_logger(__name__, construct_path=owner_path).debug("Inferred FIFO queue from name '%s'", literal_name)
    if fifo is None and spec.content_based_deduplication:
        fifo = True
        get_logger(__name__, construct_path=owner_path).debug("Inferred FIFO queue from content-based deduplication")

    if literal_name is not None:
        if fifo and not literal_name.endswith(FIFO_SUFFIX):
            raise ValidationError(f"FIFO queue names must end in '{FIFO_SUFFIX}' (name: '{literal_name}')")
        if not fifo and literal_name.endswith(FIFO_SUFFIX):
            raise ValidationError(f"Non-FIFO queue name may not end in '{FIFO_SUFFIX}' (name: '{literal_name}')")

    if spec.content_based_deduplication and not fifo:
        raise ValidationError("Content-based deduplication can only be defined for FIFO queues")

    return FifoResolution(
        fifo=bool(fifo),
        fragment=_compact(fifoQueue=fifo, contentBasedDeduplication=spec.content_based_deduplication),
    )


def resolve_encryption(spec: QueueSpec, owner_path: str = "") -> EncryptionResolution:
    """Pick the encryption mode and, for customer-managed keys, the key to use."""
    mode = spec.encryption or QueueEncryption.UNENCRYPTED

    if mode != QueueEncryption.CUSTOMER_KEY and spec.encryption_master_key is not None:
        get_logger(__name__, construct_path=owner_path).info(
            "Encryption key supplied; using customer-managed encryption instead of %s",
            getattr(mode, "name", mode),
        )
        mode = QueueEncryption.CUSTOMER_KEY

    reuse_seconds = _seconds(spec.data_key_reuse)

    if mode == QueueEncryption.UNENCRYPTED:
        return EncryptionResolution(mode=mode, fragment={})

    if mode == QueueEncryption.MANAGED_KEY:
        return EncryptionResolution(
            mode=mode,
            fragment=_compact(kmsMasterKeyId=SQS_MANAGED_KEY_ALIAS, kmsDataKeyReusePeriodSeconds=reuse_seconds),
        )

    if mode == QueueEncryption.CUSTOMER_KEY:
        if spec.encryption_master_key is not None:
            key: KeyHandle = ReferencedKey(spec.encryption_master_key)
            key_arn = spec.encryption_master_key.key_arn
        else:
            blueprint = KeyBlueprint(description=f"Created by {owner_path}" if owner_path else "Created for queue")
            get_logger(__name__, construct_path=owner_path).info("Queue requires a new customer-managed key")
            key = OwnedKey(blueprint)
            key_arn = blueprint.arn_placeholder
        return EncryptionResolution(
            mode=mode,
            fragment=_compact(kmsMasterKeyId=key_arn, kmsDataKeyReusePeriodSeconds=reuse_seconds),
            key=key,
        )

    raise InternalError(f"Unexpected encryption type: {mode!r}")


def resolve_queue(
    spec: QueueSpec,
    *,
    context: Optional[DeploymentContext] = None,
    owner_path: str = "",
) -> QueueResolution:
    """Validate ``spec`` and build its template fragment and identifiers."""
    validate_queue_spec(spec)

    name = as_late_bound(spec.queue_name)
    fifo = resolve_fifo(spec, owner_path)
    encryption = resolve_encryption(spec, owner_path)

    redrive = None
    if spec.dead_letter_queue is not None:
        redrive = {
            "deadLetterTargetArn": spec.dead_letter_queue.queue.queue_arn,
            "maxReceiveCount": spec.dead_letter_queue.max_receive_count,
        }

    fragment: QueueFragment = _compact(queueName=render(name))
    fragment.update(fifo.fragment)
    fragment.update(encryption.fragment)
    fragment.update(
        _compact(
            redrivePolicy=redrive,
            delaySeconds=_seconds(spec.delivery_delay),
            maximumMessageSize=spec.max_message_size_bytes,
            messageRetentionPeriod=_seconds(spec.retention_period),
            receiveMessageWaitTimeSeconds=_seconds(spec.receive_message_wait_time),
            visibilityTimeout=_seconds(spec.visibility_timeout),
        )
    )

    identifiers = None
    if context is not None and isinstance(name, LiteralValue):
        identifiers = QueueIdentifiers(
            queue_name=name.value,
            queue_arn=context.queue_arn(name.value),
            queue_url=context.queue_url(name.value),
        )

    return QueueResolution(
        fragment=fragment,
        fifo=fifo.fifo,
        encryption=encryption.mode,
        key=encryption.key,
        identifiers=identifiers,
    )


def _name_from_arn(queue_arn: str) -> Tuple[str, DeploymentContext]:
    return parse_arn(queue_arn).resource, DeploymentContext.from_arn(queue_arn)


def import_queue(
    queue_arn: str,
    *,
    queue_name: Optional[str] = None,
    queue_url: Optional[str] = None,
    key_arn: Optional[str] = None,
    context: Optional[DeploymentContext] = None,
) -> ImportedQueue:
    """Reference an existing queue by ARN, deriving whatever was not given."""
    if queue_name is None or context is None:
        arn_name, arn_context = _name_from_arn(queue_arn)
        queue_name = queue_name if queue_name is not None else arn_name
        context = context or arn_context

    return ImportedQueue(
        queue_arn=queue_arn,
        queue_name=queue_name,
        queue_url=queue_url or context.queue_url(queue_name),
        fifo=queue_name.endswith(FIFO_SUFFIX),
        encryption_master_key=ExternalKey(key_arn) if key_arn else None,
    )
