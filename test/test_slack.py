#!/usr/bin/env python3
import json
import unittest

from sns_slack.settings import Settings
from sns_slack.slack import SlackMessage


class TestSlackMessage(unittest.TestCase):
    def test_unset_fields_are_omitted(self):
        msg = SlackMessage(text="hello")
        self.assertEqual(msg.to_payload(), {"text": "hello"})
        self.assertEqual(msg.to_json(), '{"text":"hello"}')

    def test_partial_fields(self):
        msg = SlackMessage(text="hi", channel="#ops", icon_emoji=":ghost:")
        self.assertEqual(msg.to_payload(), {"channel": "#ops", "icon_emoji": ":ghost:", "text": "hi"})
        self.assertNotIn("username", msg.to_json())
        self.assertNotIn("icon_url", msg.to_json())

    def test_from_settings(self):
        settings = Settings(
            slack_webhook="https://hooks.slack.test/T/B/X",
            slack_channel="#alerts",
            slack_username="sns",
            slack_icon_url="https://example.test/icon.png",
            slack_icon_emoji=":bell:",
        )
        msg = SlackMessage.from_settings(settings, "text body")
        self.assertEqual(msg.to_payload(), {
            "channel": "#alerts",
            "username": "sns",
            "icon_url": "https://example.test/icon.png",
            "icon_emoji": ":bell:",
            "text": "text body",
        })

    def test_form_fields(self):
        msg = SlackMessage(text="2023-01-01T00:00:00Z [Alarm] CPU high & 100% éé")
        form = msg.to_form()
        self.assertEqual(list(form), ["payload"])
        self.assertEqual(json.loads(form["payload"]), {"text": "2023-01-01T00:00:00Z [Alarm] CPU high & 100% éé"})


if __name__ == '__main__':
    unittest.main()
