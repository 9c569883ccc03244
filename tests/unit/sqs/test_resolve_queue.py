import pytest
from aws_cdk import Duration

from resource_constructs.core.errors import ValidationError
from resource_constructs.sqs.resolver import resolve_queue
from resource_constructs.sqs.spec import DeadLetterQueue, QueueEncryption, QueueIdentifiers, QueueSpec
from tests.fixtures.queue_builders import FakeQueue, build_context, build_queue_arn


pytestmark = [pytest.mark.unit]


def test_empty_spec_resolves_to_empty_fragment() -> None:
    resolution = resolve_queue(QueueSpec())

    assert resolution.fragment == {}
    assert resolution.fifo is False
    assert resolution.encryption is QueueEncryption.UNENCRYPTED
    assert resolution.identifiers is None


def test_durations_are_converted_to_seconds() -> None:
    resolution = resolve_queue(
        QueueSpec(
            delivery_delay=Duration.minutes(1),
            max_message_size_bytes=2048,
            retention_period=Duration.days(4),
            receive_message_wait_time=Duration.seconds(20),
            visibility_timeout=Duration.minutes(15),
        )
    )

    assert resolution.fragment == {
        "delaySeconds": 60,
        "maximumMessageSize": 2048,
        "messageRetentionPeriod": 345600,
        "receiveMessageWaitTimeSeconds": 20,
        "visibilityTimeout": 900,
    }


def test_redrive_policy_from_dead_letter_queue() -> None:
    dlq = FakeQueue(queue_arn=build_queue_arn("orders-dlq"))

    resolution = resolve_queue(
        QueueSpec(queue_name="orders", dead_letter_queue=DeadLetterQueue(queue=dlq, max_receive_count=3))
    )

    assert resolution.fragment["redrivePolicy"] == {
        "deadLetterTargetArn": dlq.queue_arn,
        "maxReceiveCount": 3,
    }


def test_dead_letter_queue_can_be_shared() -> None:
    dlq = DeadLetterQueue(queue=FakeQueue(queue_arn=build_queue_arn("shared-dlq")), max_receive_count=5)

    first = resolve_queue(QueueSpec(queue_name="a", dead_letter_queue=dlq))
    second = resolve_queue(QueueSpec(queue_name="b", dead_letter_queue=dlq))

    assert first.fragment["redrivePolicy"] == second.fragment["redrivePolicy"]


def test_identifiers_derived_from_literal_name() -> None:
    resolution = resolve_queue(QueueSpec(queue_name="orders"), context=build_context())

    assert resolution.identifiers == QueueIdentifiers(
        queue_name="orders",
        queue_arn="arn:aws:sqs:us-east-1:123456789012:orders",
        queue_url="https://sqs.us-east-1.amazonaws.com/123456789012/orders",
    )


def test_identifiers_need_a_name() -> None:
    resolution = resolve_queue(QueueSpec(), context=build_context())

    assert resolution.identifiers is None


def test_failed_resolution_returns_nothing() -> None:
    """Validation errors surface before any fragment is produced."""
    with pytest.raises(ValidationError):
        resolve_queue(
            QueueSpec(
                queue_name="orders.fifo",
                fifo=False,
                encryption=QueueEncryption.CUSTOMER_KEY,
            )
        )
