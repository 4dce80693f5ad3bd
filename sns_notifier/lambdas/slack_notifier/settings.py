from dataclasses import dataclass
from os import getenv

import constants
from boto3 import client
from botocore.client import BaseClient
from exceptions import ConfigurationError


def read_webhook_parameter(name: str, ssm_client: BaseClient | None = None) -> str:
    """Read the Slack webhook URL from an SSM SecureString parameter."""
    ssm_client = ssm_client or client("ssm")
    return ssm_client.get_parameter(Name=name, WithDecryption=True)["Parameter"][
        "Value"
    ]


@dataclass(frozen=True)
class NotifierSettings:
    webhook_url: str
    monitor_channel: str = ""
    function_name: str = ""
    chunk_size: int = constants.SLACK_ATTACHMENTS_CHUNK_SIZE

    @classmethod
    def from_environment(
        cls, ssm_client: BaseClient | None = None
    ) -> "NotifierSettings":
        if not (webhook_url := getenv(constants.SLACK_WEBHOOK)):
            if parameter_name := getenv(constants.SLACK_WEBHOOK_PARAMETER):
                webhook_url = read_webhook_parameter(parameter_name, ssm_client)

        if not webhook_url:
            raise ConfigurationError(
                f"Either {constants.SLACK_WEBHOOK} or "
                f"{constants.SLACK_WEBHOOK_PARAMETER} must be set"
            )

        return cls(
            webhook_url=webhook_url,
            monitor_channel=getenv(constants.SLACK_MONITOR_CHANNEL, ""),
            function_name=getenv(constants.FUNCTION_NAME, ""),
        )
