"""Service-limit checks for queue properties."""

from __future__ import annotations

from typing import List, Optional, Union

from aws_cdk import Duration, Token

from resource_constructs.core.errors import ValidationError

from .spec import QueueSpec


def _seconds(value: Optional[Duration]) -> Optional[float]:
    if value is None or value.is_unresolved():
        return None
    return value.to_seconds()


def _number(value: Optional[Union[int, float]]) -> Optional[float]:
    if value is None or Token.is_unresolved(value):
        return None
    return value


def _check_range(
    errors: List[str],
    label: str,
    value: Optional[float],
    minimum: float,
    maximum: Optional[float] = None,
) -> None:
    if value is None:
        return
    if value < minimum or (maximum is not None and value > maximum):
        bound = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        errors.append(f"{label} must be {bound}, got {value}")


def validate_queue_spec(spec: QueueSpec) -> None:
    """Raise ``ValidationError`` listing every property outside its allowed range."""
    errors: List[str] = []
    _check_range(errors, "delivery delay (seconds)", _seconds(spec.delivery_delay), 0, 900)
    _check_range(errors, "maximum message size (bytes)", _number(spec.max_message_size_bytes), 1024, 262144)
    _check_range(errors, "retention period (seconds)", _seconds(spec.retention_period), 60, 1209600)
    _check_range(errors, "receive wait time (seconds)", _seconds(spec.receive_message_wait_time), 0, 20)
    _check_range(errors, "visibility timeout (seconds)", _seconds(spec.visibility_timeout), 0, 43200)
    _check_range(errors, "data key reuse period (seconds)", _seconds(spec.data_key_reuse), 60, 86400)
    if spec.dead_letter_queue is not None:
        _check_range(
            errors,
            "dead letter queue max receive count",
            _number(spec.dead_letter_queue.max_receive_count),
            1,
        )

    if errors:
        details = "\n".join(f"- {error}" for error in errors)
        raise ValidationError(
            f"Queue initialization failed due to the following validation error(s):\n{details}",
            errors,
        )
