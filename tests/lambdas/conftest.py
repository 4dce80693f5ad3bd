from os import environ
from sys import path

from pytest import fixture

from sns_notifier.lambdas import PATH

# For Lambda source code sibling imports
path.append(f"{PATH}/slack_notifier")


@fixture(autouse=True)
def lambda_environment_variables():
    environ["AWS_LAMBDA_FUNCTION_NAME"] = "test"
    environ["SLACK_MONITOR_CHANNEL"] = "#monitor"
    environ["SLACK_WEBHOOK"] = "https://hooks.slack.com/services/T000/B000/XXXX"
    environ["POWERTOOLS_DEV"] = "true"  # Pretty print logs
    environ.pop("SLACK_WEBHOOK_PARAMETER", None)
