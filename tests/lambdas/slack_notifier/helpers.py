from json import dumps

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def make_alarm_message(new_state_value: str = "ALARM", **overrides) -> str:
    message = {
        "AlarmName": "cpu-high",
        "AlarmDescription": "CPU above 80%",
        "AWSAccountId": "123456789012",
        "NewStateValue": new_state_value,
        "NewStateReason": "Threshold Crossed: 1 datapoint [91.0] was greater than the threshold (80.0).",
        "StateChangeTime": "2024-01-01T00:00:00.000+0000",
        "Region": "US East (N. Virginia)",
        "OldStateValue": "OK",
        "Trigger": {
            "Period": 300,
            "EvaluationPeriods": 1,
            "ComparisonOperator": "GreaterThanThreshold",
            "Threshold": 80.0,
        },
    }
    message.update(overrides)
    return dumps(message)


def make_sns_record(message: str, subject: str = "ALARM: cpu-high") -> dict:
    return {
        "EventVersion": "1.0",
        "EventSubscriptionArn": "arn:aws:sns:ca-central-1:123456789012:Alarms:e3f1b2c4",
        "EventSource": "aws:sns",
        "Sns": {
            "Type": "Notification",
            "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
            "TopicArn": "arn:aws:sns:ca-central-1:123456789012:Alarms",
            "Subject": subject,
            "Message": message,
            "Timestamp": "2024-01-01T00:00:00.000Z",
            "MessageAttributes": {},
        },
    }


def make_sns_event(*messages: str) -> dict:
    return {
        "Records": [
            make_sns_record(message, subject=f"alarm-{i}")
            for i, message in enumerate(messages)
        ]
    }
