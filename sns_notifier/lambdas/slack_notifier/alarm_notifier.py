from typing import Iterable

import constants
from alarm_event import AlarmEvent
from attachments import Attachment, build_attachment, chunked
from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes.sns_event import SNSEventRecord
from exceptions import SlackError
from settings import NotifierSettings
from slack_client import Payload, SlackSender

metrics = Metrics(namespace=constants.METRICS_NAMESPACE)


class AlarmNotifier:
    def __init__(
        self,
        settings: NotifierSettings,
        slack_client: SlackSender,
        logger: Logger | None = None,
    ) -> None:
        self.settings = settings
        self.slack_client = slack_client
        self.logger = logger or Logger(
            service=settings.function_name or __name__,
            datefmt="%Y-%m-%dT%H:%M:%S.%f",
            use_datetime_directive=True,
            utc=True,
        )

    def handle(self, records: Iterable[SNSEventRecord]) -> None:
        """Forward every CloudWatch alarm in the batch to Slack."""
        attachments = [self.build_attachment(record) for record in records]

        if not attachments:
            self.logger.warning("No Slack message sent")
            return

        metrics.add_metric(
            name="AlarmsReceived", unit=MetricUnit.Count, value=len(attachments)
        )
        self.submit(attachments)

    def build_attachment(self, record: SNSEventRecord) -> Attachment:
        alarm = AlarmEvent.from_message(record.sns.get("Message"))
        return build_attachment(
            alarm,
            subject=record.sns.get("Subject") or "",
            footer=self.settings.function_name,
        )

    def submit(self, attachments: list[Attachment]) -> None:
        """Post attachments in chunks; a failed chunk does not stop the rest."""
        for index, chunk in enumerate(chunked(attachments, self.settings.chunk_size)):
            payload = Payload(
                channel=self.settings.monitor_channel, attachments=tuple(chunk)
            )
            try:
                response = self.slack_client.send(payload)
            except SlackError as e:
                metrics.add_metric(
                    name="SlackSubmissionFailed", unit=MetricUnit.Count, value=1
                )
                self.logger.error(
                    "Failed to send Slack message %d (%d attachments): %s",
                    index + 1,
                    len(chunk),
                    e,
                )
            else:
                metrics.add_metric(
                    name="SlackMessagesSent", unit=MetricUnit.Count, value=1
                )
                self.logger.info("Slack response: %s", response)
