#!/usr/bin/env python3
"""
Resource Constructs CDK App
Cognito user-pool schema and managed SQS queues, configured per environment.
"""

import os

import aws_cdk as cdk

from resource_constructs.config.environments import get_environment_config
from resource_constructs.stacks.identity_stack import IdentityStack
from resource_constructs.stacks.messaging_stack import MessagingStack

app = cdk.App()

# Get environment configuration
environment = app.node.try_get_context("environment") or "dev"
config = get_environment_config(environment)

os.environ.setdefault("ENVIRONMENT", environment)
os.environ.setdefault("LOG_LEVEL", config.get("log_level", "INFO"))

# CDK environment (account/region)
cdk_env = cdk.Environment(account=config.get("account_id"), region=config.get("region", "ap-northeast-2"))

stack_prefix = f"ResourceConstructs-{environment}"

identity_stack = IdentityStack(
    app,
    f"{stack_prefix}-Identity",
    environment=environment,
    config=config,
    env=cdk_env,
)

messaging_stack = MessagingStack(
    app,
    f"{stack_prefix}-Messaging",
    environment=environment,
    config=config,
    env=cdk_env,
)

for key, value in config.get("tags", {}).items():
    cdk.Tags.of(app).add(key, value)
cdk.Tags.of(app).add("ManagedBy", "CDK")

app.synth()
