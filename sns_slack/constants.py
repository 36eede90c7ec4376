NAME = "aws-sns-slack"
VERSION = "0.1.0"

# Defaults for the startup configuration (see settings.py for flags/env names)
DEFAULT_HTTP_ADDR = ":8000"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

# SNS message types that trigger an action; anything else is acknowledged and dropped
TYPE_NOTIFICATION = "Notification"
TYPE_SUBSCRIPTION_CONFIRMATION = "SubscriptionConfirmation"

# Slack Incoming Webhooks accept the JSON document inside this form field
SLACK_FORM_FIELD = "payload"
