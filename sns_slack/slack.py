import json
from dataclasses import dataclass
from typing import Dict

from .constants import SLACK_FORM_FIELD


@dataclass(frozen=True)
class SlackMessage:
    """Message sent to a Slack Incoming Webhook."""

    text: str
    channel: str = ""
    username: str = ""
    icon_url: str = ""
    icon_emoji: str = ""

    @classmethod
    def from_settings(cls, settings, text: str) -> "SlackMessage":
        return cls(
            text=text,
            channel=settings.slack_channel,
            username=settings.slack_username,
            icon_url=settings.slack_icon_url,
            icon_emoji=settings.slack_icon_emoji,
        )

    def to_payload(self) -> Dict[str, str]:
        payload = {}
        # Optional fields are left out entirely when unset
        for key in ("channel", "username", "icon_url", "icon_emoji"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        payload["text"] = self.text
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), separators=(",", ":"), ensure_ascii=False)

    def to_form(self) -> Dict[str, str]:
        return {SLACK_FORM_FIELD: self.to_json()}
