"""Map a queue fragment onto SQS ``CreateQueue`` attribute names."""

from __future__ import annotations

import json
from typing import Dict

from resource_constructs.core.errors import InvalidArgument
from resource_constructs.core.tokens import Unresolved

from .spec import QueueFragment

_ATTRIBUTE_NAMES = {
    "fifoQueue": "FifoQueue",
    "contentBasedDeduplication": "ContentBasedDeduplication",
    "kmsMasterKeyId": "KmsMasterKeyId",
    "kmsDataKeyReusePeriodSeconds": "KmsDataKeyReusePeriodSeconds",
    "redrivePolicy": "RedrivePolicy",
    "delaySeconds": "DelaySeconds",
    "maximumMessageSize": "MaximumMessageSize",
    "messageRetentionPeriod": "MessageRetentionPeriod",
    "receiveMessageWaitTimeSeconds": "ReceiveMessageWaitTimeSeconds",
    "visibilityTimeout": "VisibilityTimeout",
}


def _render(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_queue_attributes(fragment: QueueFragment) -> Dict[str, str]:
    """Return the ``Attributes`` map for ``sqs.create_queue``.

    The queue name is passed separately to ``CreateQueue`` and is not included.
    """
    attributes: Dict[str, str] = {}
    for key, value in fragment.items():
        if key == "queueName" or value is None:
            continue
        if isinstance(value, Unresolved):
            raise InvalidArgument(f"'{key}' is not resolved yet; bind the owned key before creating the queue")
        attributes[_ATTRIBUTE_NAMES[key]] = _render(value)
    return attributes
