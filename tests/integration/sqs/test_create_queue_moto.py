from __future__ import annotations

import json
from typing import Dict, cast

import boto3
import pytest
from aws_cdk import Duration
from moto import mock_aws

from resource_constructs.sqs.attributes import to_queue_attributes
from resource_constructs.sqs.resolver import import_queue, resolve_queue
from resource_constructs.sqs.spec import DeadLetterQueue, QueueEncryption, QueueSpec


pytestmark = [pytest.mark.integration]


def _attributes(sqs, url: str) -> Dict[str, str]:
    response = sqs.get_queue_attributes(QueueUrl=url, AttributeNames=["All"])
    return cast(Dict[str, str], response.get("Attributes", {}))


@mock_aws
def test_resolved_fifo_queue_is_accepted_by_sqs() -> None:
    sqs = boto3.client("sqs", region_name="us-east-1")

    dlq_resolution = resolve_queue(QueueSpec(queue_name="orders-dlq.fifo", retention_period=Duration.days(14)))
    dlq_url = sqs.create_queue(
        QueueName=dlq_resolution.fragment["queueName"],
        Attributes=to_queue_attributes(dlq_resolution.fragment),
    )["QueueUrl"]
    dlq = import_queue(_attributes(sqs, dlq_url)["QueueArn"])

    # Given: a FIFO queue redriving into the imported dead-letter queue
    resolution = resolve_queue(
        QueueSpec(
            queue_name="orders.fifo",
            content_based_deduplication=True,
            visibility_timeout=Duration.minutes(30),
            encryption=QueueEncryption.MANAGED_KEY,
            dead_letter_queue=DeadLetterQueue(queue=dlq, max_receive_count=3),
        )
    )
    # When: the queue is created from the resolved attributes
    url = sqs.create_queue(
        QueueName=resolution.fragment["queueName"],
        Attributes=to_queue_attributes(resolution.fragment),
    )["QueueUrl"]

    # Then: SQS reports the same configuration back
    attributes = _attributes(sqs, url)
    assert attributes["FifoQueue"] == "true"
    assert attributes["ContentBasedDeduplication"] == "true"
    assert int(attributes["VisibilityTimeout"]) == 1800
    assert attributes["KmsMasterKeyId"] == "alias/aws/sqs"
    redrive = json.loads(attributes["RedrivePolicy"])
    assert redrive["deadLetterTargetArn"] == dlq.queue_arn
    assert int(redrive["maxReceiveCount"]) == 3
    assert dlq.fifo is True
    assert dlq.queue_name == "orders-dlq.fifo"
