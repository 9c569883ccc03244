"""Development environment configuration."""

import os

from resource_constructs.config.types import EnvironmentConfig

dev_config: EnvironmentConfig = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "log_level": "DEBUG",
    # User pool schema
    "user_pool_name": "members-dev",
    "standard_attributes": ["email", "given_name", "family_name", "zoneinfo"],
    "required_attributes": ["email"],
    "custom_attributes": [
        {"name": "tenant_id", "type": "string", "min_len": 1, "max_len": 64, "mutable": False},
        {"name": "plan_tier", "type": "number", "min": 0, "max": 3},
        {"name": "beta_opt_in", "type": "boolean"},
        {"name": "last_seen_at", "type": "datetime"},
    ],
    # Queues (dead-letter queue is created as "<name>-dlq")
    "queues": [
        {
            "name": "orders.fifo",
            "content_based_deduplication": True,
            "visibility_timeout_seconds": 60,
            "dead_letter": {"retention_days": 14, "max_receive_count": 5},
        },
        {
            "name": "notifications",
            "encryption": "managed",
            "data_key_reuse_seconds": 600,
            "retention_days": 4,
        },
    ],
    "tags": {
        "Environment": "dev",
        "Project": "ResourceConstructs",
        "Owner": "PlatformTeam",
    },
}
