from re import match

from pydantic import BaseModel, field_validator, model_validator

ENVIRONMENTS = ("dev", "test", "stage", "prod")


class NotifierConfig(BaseModel):
    # Environment
    Environment: str

    # Slack
    SlackMonitorChannel: str = ""
    SlackWebhookUrl: str | None = None
    SlackWebhookParameter: str | None = None

    # Variables
    AlarmTopicArn: str | None = None  # Existing topic, otherwise one is created

    @field_validator("Environment")
    @classmethod
    def check_environment(cls, v: str) -> str:
        assert v in ENVIRONMENTS, f"Environment must be one of {', '.join(ENVIRONMENTS)}"
        return v

    @field_validator("SlackWebhookUrl")
    @classmethod
    def check_webhook_url(cls, v: str | None) -> str | None:
        if v is not None:
            assert v.startswith("https://"), "Slack webhook URL must use https"
        return v

    @field_validator("AlarmTopicArn")
    @classmethod
    def check_topic_arn(cls, v: str | None) -> str | None:
        if v is not None:
            assert match(
                r"^arn:aws[a-z-]*:sns:[a-z]{2}(-[a-z]+)+-\d:\d{12}:[\w.-]+$", v
            ), "Invalid SNS topic ARN"
        return v

    @model_validator(mode="after")
    def check_webhook_source(self) -> "NotifierConfig":
        assert (self.SlackWebhookUrl is None) != (
            self.SlackWebhookParameter is None
        ), "Exactly one of SlackWebhookUrl or SlackWebhookParameter must be set"
        return self
