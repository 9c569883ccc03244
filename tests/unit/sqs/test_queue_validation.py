import pytest
from aws_cdk import Duration, Token

from resource_constructs.core.errors import ValidationError
from resource_constructs.sqs.spec import DeadLetterQueue, QueueSpec
from resource_constructs.sqs.validation import validate_queue_spec
from tests.fixtures.queue_builders import FakeQueue, build_queue_arn


pytestmark = [pytest.mark.unit]


@pytest.mark.parametrize(
    "spec",
    [
        QueueSpec(delivery_delay=Duration.minutes(16)),
        QueueSpec(max_message_size_bytes=1023),
        QueueSpec(max_message_size_bytes=262145),
        QueueSpec(retention_period=Duration.seconds(59)),
        QueueSpec(retention_period=Duration.days(15)),
        QueueSpec(receive_message_wait_time=Duration.seconds(21)),
        QueueSpec(visibility_timeout=Duration.hours(13)),
        QueueSpec(data_key_reuse=Duration.seconds(30)),
        QueueSpec(data_key_reuse=Duration.hours(25)),
        QueueSpec(dead_letter_queue=DeadLetterQueue(queue=FakeQueue(build_queue_arn("dlq")), max_receive_count=0)),
    ],
)
def test_out_of_range_properties_are_rejected(spec: QueueSpec) -> None:
    with pytest.raises(ValidationError, match="Queue initialization failed"):
        validate_queue_spec(spec)


def test_all_violations_are_reported_together() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_queue_spec(QueueSpec(max_message_size_bytes=10, visibility_timeout=Duration.days(1)))

    assert len(exc_info.value.errors) == 2
    assert "maximum message size" in str(exc_info.value)
    assert "visibility timeout" in str(exc_info.value)


def test_limit_edges_are_accepted() -> None:
    validate_queue_spec(
        QueueSpec(
            delivery_delay=Duration.seconds(900),
            max_message_size_bytes=262144,
            retention_period=Duration.days(14),
            receive_message_wait_time=Duration.seconds(0),
            visibility_timeout=Duration.hours(12),
            data_key_reuse=Duration.hours(24),
        )
    )


def test_token_values_are_not_range_checked() -> None:
    validate_queue_spec(
        QueueSpec(
            delivery_delay=Duration.seconds(Token.as_number({"Ref": "DelayParameter"})),
            max_message_size_bytes=Token.as_number({"Ref": "SizeParameter"}),
        )
    )
