"""Declarative resource constructs: Cognito attribute modeling and managed SQS queues."""
