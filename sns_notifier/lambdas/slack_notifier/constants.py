# Environment variable names
SLACK_WEBHOOK = "SLACK_WEBHOOK"
SLACK_WEBHOOK_PARAMETER = "SLACK_WEBHOOK_PARAMETER"
SLACK_MONITOR_CHANNEL = "SLACK_MONITOR_CHANNEL"
FUNCTION_NAME = "AWS_LAMBDA_FUNCTION_NAME"

# Slack only accepts 100 attachments in a single message
SLACK_ATTACHMENTS_CHUNK_SIZE = 100
SLACK_TIMEOUT_SECONDS = 10.0

FOOTER_ICON = "https://d1d05r7k0qlw4w.cloudfront.net/dist-cbe91c5a8477701757ff6752aae4c6f892018972/img/favicon.ico"

# CloudWatch alarm states
ALARM = "ALARM"
INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
OK = "OK"

# Slack attachment colours
DANGER = "danger"
WARNING = "warning"
GOOD = "good"

METRICS_NAMESPACE = "SlackNotifier"
