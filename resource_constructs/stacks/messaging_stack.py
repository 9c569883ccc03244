"""Messaging stack: managed SQS queues and their dead-letter targets."""

from __future__ import annotations

from typing import Dict, List

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from resource_constructs.config.builders import dead_letter_spec_from_config, queue_spec_from_config
from resource_constructs.config.types import EnvironmentConfig, QueueConfig
from resource_constructs.constructs.managed_queue import ManagedQueue
from resource_constructs.sqs.spec import DeadLetterQueue


def _construct_id(name: str) -> str:
    base = name.replace(".fifo", "")
    return "".join(part.capitalize() for part in base.replace("_", "-").split("-") if part)


class MessagingStack(Stack):
    """Provision the queues declared by the environment configuration."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        config: EnvironmentConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = environment
        self.config = config

        queue_configs: List[QueueConfig] = list(self.config.get("queues", []))
        if not queue_configs:
            raise ValueError("queues must be defined in environment configuration")

        self.queues: Dict[str, ManagedQueue] = {}
        self.dlqs: Dict[str, ManagedQueue] = {}

        for queue_cfg in queue_configs:
            self._create_queue(queue_cfg)

        self._create_outputs()

    def _create_queue(self, queue_cfg: QueueConfig) -> None:
        name = str(queue_cfg.get("name", "")).strip()
        construct_id = _construct_id(name)

        dead_letter = None
        dlq_spec = dead_letter_spec_from_config(queue_cfg, env_name=self.env_name)
        if dlq_spec is not None:
            dlq = ManagedQueue(self, f"{construct_id}Dlq", spec=dlq_spec)
            self.dlqs[name] = dlq
            dead_letter = DeadLetterQueue(
                queue=dlq,
                max_receive_count=int(queue_cfg.get("dead_letter", {}).get("max_receive_count", 3)),
            )

        self.queues[name] = ManagedQueue(
            self,
            f"{construct_id}Queue",
            spec=queue_spec_from_config(queue_cfg, env_name=self.env_name, dead_letter_queue=dead_letter),
        )

    def _create_outputs(self) -> None:
        for name, queue in self.queues.items():
            CfnOutput(
                self,
                f"{_construct_id(name)}QueueUrl",
                value=queue.queue_url,
                description=f"SQS queue URL for {name}",
            )
        for name, dlq in self.dlqs.items():
            CfnOutput(
                self,
                f"{_construct_id(name)}DlqUrl",
                value=dlq.queue_url,
                description=f"DLQ URL for {name}",
            )
