from os import getenv

import aws_cdk as cdk


def create_resource_name(
    resource_name: str, scope: cdk.Stack = None, environment: str = None
) -> str:
    if environment is None and scope is not None:
        environment = scope.tags.tag_values()["Environment"]
    if scope is None:
        region = getenv("CDK_DEFAULT_REGION", "ca-central-1")
    else:
        region = scope.region
    return f"Notifier-{resource_name}-{environment.lower()}-{region}"
