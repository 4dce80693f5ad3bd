from dataclasses import dataclass, field
from json import dumps
from typing import Protocol

import constants
from attachments import Attachment
from exceptions import SlackError
from urllib3 import PoolManager, Timeout
from urllib3.exceptions import HTTPError


@dataclass(frozen=True)
class Payload:
    channel: str
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        payload = {"attachments": [a.to_dict() for a in self.attachments]}
        # Without a channel the webhook posts to its default channel
        if self.channel:
            payload["channel"] = self.channel
        return payload


@dataclass(frozen=True)
class SlackResponse:
    status: int
    body: str

    def __str__(self) -> str:
        return f"{self.status} {self.body}"


class SlackSender(Protocol):
    def send(self, payload: Payload) -> SlackResponse: ...


class SlackClient:
    """Posts payloads to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        timeout: float = constants.SLACK_TIMEOUT_SECONDS,
        http: PoolManager | None = None,
    ) -> None:
        self.webhook_url = webhook_url
        self.http = http or PoolManager(timeout=Timeout(total=timeout), retries=False)

    def send(self, payload: Payload) -> SlackResponse:
        try:
            response = self.http.request(
                "POST",
                self.webhook_url,
                body=dumps(payload.to_dict()).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except HTTPError as e:
            raise SlackError(f"Slack webhook request failed: {e}") from e

        body = response.data.decode("utf-8", errors="replace")
        if response.status != 200:
            raise SlackError(
                f"Slack webhook returned {response.status}: {body}",
                status=response.status,
                body=body,
            )

        return SlackResponse(status=response.status, body=body)
