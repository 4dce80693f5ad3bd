from dataclasses import asdict, dataclass, field
from struct import pack, unpack
from time import time
from typing import Iterator, Sequence, TypeVar

import constants
from alarm_event import AlarmEvent

T = TypeVar("T")


@dataclass(frozen=True)
class AttachmentField:
    title: str
    value: str
    short: bool = True


@dataclass(frozen=True)
class Attachment:
    color: str
    title: str
    text: str
    footer: str
    ts: int
    footer_icon: str = constants.FOOTER_ICON
    fields: tuple[AttachmentField, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        attachment = asdict(self)
        attachment["fields"] = [asdict(f) for f in self.fields]
        return attachment


def state_color(new_state_value: str) -> str:
    """Map a CloudWatch alarm state to a Slack attachment colour."""
    if new_state_value == constants.ALARM:
        return constants.DANGER
    elif new_state_value == constants.INSUFFICIENT_DATA:
        return constants.WARNING
    return constants.GOOD


def _float32_digits(value: float) -> tuple[str, str, int]:
    """Shortest sign, digits and exponent that read back as the same float32."""
    target = pack("f", value)
    for precision in range(9):
        text = f"{unpack('f', target)[0]:.{precision}e}"
        if pack("f", float(text)) == target:
            break
    mantissa, exponent = text.split("e")
    sign = "-" if mantissa.startswith("-") else ""
    digits = mantissa.lstrip("-").replace(".", "")
    return sign, digits, int(exponent)


def format_number(value: int | float) -> str:
    """Render a trigger value as text.

    Floats are single precision thresholds and use the shortest form that
    identifies them, switching to exponent notation below 1e-4 and from
    1e+06 upwards (80 -> "80", 0.5 -> "0.5", 1000000 -> "1e+06").
    """
    if not isinstance(value, float):
        return str(value)

    sign, digits, exponent = _float32_digits(value)
    if exponent < -4 or exponent >= 6:
        fraction = f".{digits[1:]}" if len(digits) > 1 else ""
        return f"{sign}{digits[0]}{fraction}e{exponent:+03d}"

    point = exponent + 1
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}"
    return f"{sign}{digits[:point]}.{digits[point:]}"


def build_attachment(
    alarm: AlarmEvent, subject: str, footer: str, ts: int | None = None
) -> Attachment:
    """Build the Slack attachment for a single alarm notification."""
    return Attachment(
        color=state_color(alarm.new_state_value),
        title=subject,
        text=alarm.new_state_reason,
        footer=footer,
        ts=int(time()) if ts is None else ts,
        fields=(
            AttachmentField("AccountID", alarm.account_id),
            AttachmentField("Region", alarm.region),
            AttachmentField("Period", format_number(alarm.trigger.period)),
            AttachmentField("Threshold", format_number(alarm.trigger.threshold)),
            AttachmentField(
                "Evaluated Periods", format_number(alarm.trigger.evaluation_periods)
            ),
            AttachmentField("Comparison Operator", alarm.trigger.comparison_operator),
        ),
    )


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Split items into contiguous slices of at most size elements."""
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    for start in range(0, len(items), size):
        yield items[start : start + size]
