"""Convert environment config entries into resolver inputs."""

from __future__ import annotations

from typing import Optional

from aws_cdk import Duration

from resource_constructs.cognito.attributes import StandardAttribute
from resource_constructs.core.errors import InvalidArgument
from resource_constructs.sqs.resolver import FIFO_SUFFIX
from resource_constructs.sqs.spec import DeadLetterQueue, ExternalKey, QueueEncryption, QueueSpec

from .types import QueueConfig

_ENCRYPTION_ALIASES = {
    "none": QueueEncryption.UNENCRYPTED,
    "unencrypted": QueueEncryption.UNENCRYPTED,
    "managed": QueueEncryption.MANAGED_KEY,
    "kms_managed": QueueEncryption.MANAGED_KEY,
    "kms": QueueEncryption.CUSTOMER_KEY,
    "customer": QueueEncryption.CUSTOMER_KEY,
}


def parse_encryption(value: Optional[str]) -> Optional[QueueEncryption]:
    if value is None:
        return None
    key = str(value).strip().lower()
    if key not in _ENCRYPTION_ALIASES:
        raise InvalidArgument(f"Unknown queue encryption: '{value}'")
    return _ENCRYPTION_ALIASES[key]


def parse_standard_attribute(value: str) -> StandardAttribute:
    """Accept either the claim name ("zoneinfo") or the member name ("timezone")."""
    text = str(value or "").strip()
    try:
        return StandardAttribute(text)
    except ValueError:
        pass
    try:
        return StandardAttribute[text.upper()]
    except KeyError:
        raise InvalidArgument(f"Unknown standard attribute: '{value}'") from None


def dead_letter_queue_name(queue_name: str) -> str:
    """``orders`` -> ``orders-dlq``; ``orders.fifo`` -> ``orders-dlq.fifo``."""
    if queue_name.endswith(FIFO_SUFFIX):
        return f"{queue_name[: -len(FIFO_SUFFIX)]}-dlq{FIFO_SUFFIX}"
    return f"{queue_name}-dlq"


def _duration(seconds: Optional[int]) -> Optional[Duration]:
    return Duration.seconds(int(seconds)) if seconds is not None else None


def _days(days: Optional[int]) -> Optional[Duration]:
    return Duration.days(int(days)) if days is not None else None


def queue_spec_from_config(
    entry: QueueConfig,
    *,
    env_name: Optional[str] = None,
    dead_letter_queue: Optional[DeadLetterQueue] = None,
) -> QueueSpec:
    """Build a ``QueueSpec``; ``env_name`` is inserted before the ``.fifo`` suffix."""
    name = str(entry.get("name", "")).strip()
    if not name:
        raise InvalidArgument("Each queue config must include 'name'")
    if env_name:
        if name.endswith(FIFO_SUFFIX):
            name = f"{name[: -len(FIFO_SUFFIX)]}-{env_name}{FIFO_SUFFIX}"
        else:
            name = f"{name}-{env_name}"

    key_arn = entry.get("key_arn")
    return QueueSpec(
        queue_name=name,
        fifo=entry.get("fifo"),
        content_based_deduplication=entry.get("content_based_deduplication"),
        encryption=parse_encryption(entry.get("encryption")),
        encryption_master_key=ExternalKey(key_arn) if key_arn else None,
        data_key_reuse=_duration(entry.get("data_key_reuse_seconds")),
        retention_period=_days(entry.get("retention_days")),
        delivery_delay=_duration(entry.get("delivery_delay_seconds")),
        max_message_size_bytes=entry.get("max_message_size_bytes"),
        receive_message_wait_time=_duration(entry.get("receive_wait_seconds")),
        visibility_timeout=_duration(entry.get("visibility_timeout_seconds")),
        dead_letter_queue=dead_letter_queue,
    )


def dead_letter_spec_from_config(entry: QueueConfig, *, env_name: Optional[str] = None) -> Optional[QueueSpec]:
    """Spec for the queue's dead-letter target, or ``None`` when not configured.

    The target mirrors the source queue's FIFO-ness and encryption settings.
    """
    dead_letter = entry.get("dead_letter")
    if dead_letter is None:
        return None
    base = queue_spec_from_config(entry, env_name=env_name)
    key_arn = entry.get("key_arn")
    return QueueSpec(
        queue_name=dead_letter_queue_name(str(base.queue_name)),
        fifo=True if base.queue_name and str(base.queue_name).endswith(FIFO_SUFFIX) else None,
        encryption=base.encryption,
        encryption_master_key=ExternalKey(key_arn) if key_arn else None,
        data_key_reuse=base.data_key_reuse,
        retention_period=_days(dead_letter.get("retention_days", 14)),
    )
