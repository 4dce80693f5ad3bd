#!/usr/bin/env python3
from datetime import date
from os import getenv
from pathlib import Path
from sys import path

import aws_cdk as cdk
from yaml import safe_load

root_dir = Path(__file__).resolve().parents[2]
path.append(str(root_dir))

from docs import VERSION
from sns_notifier.cdk.config import NotifierConfig
from sns_notifier.cdk.helpers import create_resource_name
from sns_notifier.cdk.stack import NotifierStack

app = cdk.App()

account = getenv("CDK_DEFAULT_ACCOUNT")
region = getenv("CDK_DEFAULT_REGION", "ca-central-1")

if environment := app.node.try_get_context("config"):
    config_path = Path(__file__).parent / "config" / f"{environment}.yaml"
    if not config_path.is_file():
        raise SystemExit(f"Error: Unrecognized environment '{environment}'")

    with open(config_path, "r") as f:
        config = NotifierConfig(**safe_load(f))

    stack_name = create_resource_name(
        resource_name="SlackNotifier", environment=config.Environment
    )
    NotifierStack(
        scope=app,
        construct_id=stack_name,
        stack_name=stack_name,
        env=cdk.Environment(account=account, region=region),
        config=config,
        tags={
            "LastUpdated": str(date.today()),
            "Version": VERSION,
            "Environment": config.Environment.capitalize(),
        },
        termination_protection=config.Environment == "prod",
    )
else:
    raise SystemExit(
        "Error: You must pass the 'config' context parameter. Please refer to the README"
    )

app.synth()
