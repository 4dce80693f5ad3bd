from dataclasses import dataclass, field
from json import JSONDecoder
from math import isfinite
from typing import Any

from aws_lambda_powertools import Logger

logger = Logger(service=__name__)

FLOAT32_MAX = 3.4028234663852886e38


def _str(body: dict[str, Any], key: str) -> str:
    value = body.get(key)
    return value if isinstance(value, str) else ""


def _int(body: dict[str, Any], key: str) -> int:
    value = body.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def _float(body: dict[str, Any], key: str) -> float:
    value = body.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    # Thresholds are single precision; NaN, infinities and overflow stay unset
    if abs(value) > FLOAT32_MAX or not isfinite(value):
        return 0.0
    return float(value)


@dataclass
class Trigger:
    period: int = 0
    evaluation_periods: int = 0
    comparison_operator: str = ""
    threshold: float = 0.0

    @classmethod
    def from_dict(cls, body: Any) -> "Trigger":
        if not isinstance(body, dict):
            return cls()
        return cls(
            period=_int(body, "Period"),
            evaluation_periods=_int(body, "EvaluationPeriods"),
            comparison_operator=_str(body, "ComparisonOperator"),
            threshold=_float(body, "Threshold"),
        )


@dataclass
class AlarmEvent:
    """CloudWatch alarm notification carried in an SNS message body."""

    alarm_name: str = ""
    alarm_description: str = ""
    account_id: str = ""
    new_state_value: str = ""
    new_state_reason: str = ""
    state_change_time: str = ""
    region: str = ""
    old_state_value: str = ""
    trigger: Trigger = field(default_factory=Trigger)

    @classmethod
    def from_message(cls, message: str | None) -> "AlarmEvent":
        """Decode an SNS message body, leaving unreadable fields empty.

        A malformed body never raises: the alarm is still forwarded with
        whatever fields could be recovered.
        """
        if not isinstance(message, str):
            logger.debug("Alarm message is not a string: %r", message)
            return cls()

        # Only the first JSON value is read, anything after it is ignored
        try:
            body, _ = JSONDecoder().raw_decode(message.lstrip(" \t\n\r"))
        except (ValueError, RecursionError):
            logger.debug("Malformed alarm message: %r", message)
            return cls()

        if not isinstance(body, dict):
            logger.debug("Alarm message is not a JSON object: %r", message)
            return cls()

        return cls(
            alarm_name=_str(body, "AlarmName"),
            alarm_description=_str(body, "AlarmDescription"),
            account_id=_str(body, "AWSAccountId"),
            new_state_value=_str(body, "NewStateValue"),
            new_state_reason=_str(body, "NewStateReason"),
            state_change_time=_str(body, "StateChangeTime"),
            region=_str(body, "Region"),
            old_state_value=_str(body, "OldStateValue"),
            trigger=Trigger.from_dict(body.get("Trigger")),
        )
