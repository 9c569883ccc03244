"""Production environment configuration."""

import os

from resource_constructs.config.types import EnvironmentConfig

prod_config: EnvironmentConfig = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "log_level": "WARNING",
    "user_pool_name": "members",
    "standard_attributes": ["email", "given_name", "family_name", "zoneinfo", "phone_number"],
    "required_attributes": ["email"],
    "custom_attributes": [
        {"name": "tenant_id", "type": "string", "min_len": 1, "max_len": 64, "mutable": False},
        {"name": "plan_tier", "type": "number", "min": 0, "max": 3},
    ],
    # Customer-managed keys everywhere in production; one key is created per queue.
    "queues": [
        {
            "name": "orders.fifo",
            "content_based_deduplication": True,
            "encryption": "kms",
            "data_key_reuse_seconds": 3600,
            "visibility_timeout_seconds": 120,
            "retention_days": 14,
            "dead_letter": {"retention_days": 14, "max_receive_count": 3},
        },
        {
            "name": "notifications",
            "encryption": "kms",
            "retention_days": 7,
            "dead_letter": {"retention_days": 14, "max_receive_count": 5},
        },
    ],
    "tags": {
        "Environment": "prod",
        "Project": "ResourceConstructs",
        "Owner": "PlatformTeam",
    },
}
