from functools import partial
from pathlib import Path
from typing import Callable

from aws_cdk import App, Environment
from aws_cdk.assertions import Template
from pytest import fixture
from yaml import safe_load

from sns_notifier.cdk.config import NotifierConfig
from sns_notifier.cdk.helpers import create_resource_name
from sns_notifier.cdk.stack import NotifierStack

env = Environment(account="111111111111", region="ca-central-1")

with open(Path(__file__).parents[1] / "config" / "test.yaml", "r") as f:
    config = NotifierConfig(**safe_load(f))

tags = {"Environment": config.Environment.capitalize()}


@fixture(scope="session")
def notifier_stack_template() -> Template:
    stack = NotifierStack(
        scope=App(),
        construct_id="NotifierStackTesting",
        stack_name="NotifierStackTesting",
        env=env,
        config=config,
        tags=tags,
    )
    return Template.from_stack(stack)


@fixture(scope="session")
def imported_topic_stack_template() -> Template:
    imported_config = config.model_copy(
        update={
            "AlarmTopicArn": "arn:aws:sns:ca-central-1:111111111111:ExistingAlarms",
            "SlackWebhookUrl": "https://hooks.slack.com/services/T000/B000/XXXX",
            "SlackWebhookParameter": None,
        }
    )
    stack = NotifierStack(
        scope=App(),
        construct_id="ImportedTopicStackTesting",
        stack_name="ImportedTopicStackTesting",
        env=env,
        config=imported_config,
        tags=tags,
    )
    return Template.from_stack(stack)


@fixture(scope="session")
def _create_resource_name() -> Callable:
    return partial(create_resource_name, environment=config.Environment)


@fixture(scope="session")
def notifier_config() -> NotifierConfig:
    return config
