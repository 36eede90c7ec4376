"""Relay of Amazon SNS HTTP notifications to a Slack Incoming Webhook.

This package contains:
- constants: defaults and fixed wire values
- settings: startup flags/environment -> immutable Settings
- sns: SNS envelope decoding
- slack: Slack Incoming Webhook payload
- services: outbound HTTP calls (Slack webhook, subscription confirmation)
- controller: Flask app and dispatch
- cli: process entry point
"""
