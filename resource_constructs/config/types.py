"""Typed configuration contracts for environment-specific settings."""

from __future__ import annotations

from typing import Dict, List, NotRequired, Required, TypedDict


class DeadLetterConfig(TypedDict, total=False):
    """Dead-letter routing for a queue entry."""

    retention_days: NotRequired[int]
    max_receive_count: NotRequired[int]


class QueueConfig(TypedDict, total=False):
    """One managed queue declared by an environment."""

    name: Required[str]
    fifo: NotRequired[bool]
    content_based_deduplication: NotRequired[bool]
    encryption: NotRequired[str]
    key_arn: NotRequired[str]
    data_key_reuse_seconds: NotRequired[int]
    retention_days: NotRequired[int]
    delivery_delay_seconds: NotRequired[int]
    max_message_size_bytes: NotRequired[int]
    receive_wait_seconds: NotRequired[int]
    visibility_timeout_seconds: NotRequired[int]
    dead_letter: NotRequired[DeadLetterConfig]


class CustomAttributeConfig(TypedDict, total=False):
    """A custom user-pool attribute declared by an environment."""

    name: Required[str]
    type: Required[str]
    min_len: NotRequired[int]
    max_len: NotRequired[int]
    min: NotRequired[float]
    max: NotRequired[float]
    mutable: NotRequired[bool]


class EnvironmentConfig(TypedDict, total=False):
    """Strongly-typed environment configuration contract."""

    region: Required[str]
    account_id: NotRequired[str | None]

    user_pool_name: NotRequired[str]
    standard_attributes: NotRequired[List[str]]
    required_attributes: NotRequired[List[str]]
    custom_attributes: NotRequired[List[CustomAttributeConfig]]

    queues: NotRequired[List[QueueConfig]]

    log_level: NotRequired[str]
    tags: NotRequired[Dict[str, str]]
