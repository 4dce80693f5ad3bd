from functools import cache

from alarm_notifier import AlarmNotifier, metrics
from aws_lambda_powertools.utilities.data_classes import SNSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from settings import NotifierSettings
from slack_client import SlackClient


@cache
def get_notifier() -> AlarmNotifier:
    settings = NotifierSettings.from_environment()
    return AlarmNotifier(settings, SlackClient(settings.webhook_url))


@metrics.log_metrics
@event_source(data_class=SNSEvent)
def lambda_handler(event: SNSEvent, _: LambdaContext) -> None:
    """Slack Notifier Lambda Handler for SNS events."""
    get_notifier().handle(event.records)
