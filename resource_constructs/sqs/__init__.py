"""Managed SQS queue resolution."""

from .attributes import to_queue_attributes
from .resolver import (
    FIFO_SUFFIX,
    SQS_MANAGED_KEY_ALIAS,
    import_queue,
    resolve_encryption,
    resolve_fifo,
    resolve_queue,
)
from .spec import (
    DeadLetterQueue,
    ExternalKey,
    ImportedQueue,
    KeyBlueprint,
    OwnedKey,
    QueueEncryption,
    QueueFragment,
    QueueIdentifiers,
    QueueResolution,
    QueueSpec,
    ReferencedKey,
)
from .validation import validate_queue_spec

__all__ = [
    "FIFO_SUFFIX",
    "SQS_MANAGED_KEY_ALIAS",
    "DeadLetterQueue",
    "ExternalKey",
    "ImportedQueue",
    "KeyBlueprint",
    "OwnedKey",
    "QueueEncryption",
    "QueueFragment",
    "QueueIdentifiers",
    "QueueResolution",
    "QueueSpec",
    "ReferencedKey",
    "import_queue",
    "resolve_encryption",
    "resolve_fifo",
    "resolve_queue",
    "to_queue_attributes",
    "validate_queue_spec",
]
