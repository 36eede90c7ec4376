import logging

import requests

from .errors import ConfirmationError, DeliveryError

logger = logging.getLogger(__name__)


def post_slack_message(session: requests.Session, url: str, message, timeout: float) -> requests.Response:
    """POSTs ``message`` (a SlackMessage) to the Incoming Webhook at ``url``."""
    try:
        form = message.to_form()
    except (TypeError, ValueError) as exc:
        raise DeliveryError(f"cannot encode Slack payload: {exc}") from exc

    logger.debug("Slack payload: %s", form)
    try:
        resp = session.post(url, data=form, timeout=timeout)
    except requests.RequestException as exc:
        raise DeliveryError(f"Slack webhook request failed: {exc}") from exc

    logger.debug("Slack response: %s", resp.status_code)
    if not 200 <= resp.status_code < 300:
        raise DeliveryError(f"Slack webhook returned {resp.status_code}: {resp.text[:200]}")
    return resp


def confirm_subscription(session: requests.Session, subscribe_url: str, timeout: float) -> requests.Response:
    """GETs the SubscribeURL of a SubscriptionConfirmation, which confirms the topic subscription."""
    if not subscribe_url:
        raise ConfirmationError("SubscriptionConfirmation without SubscribeURL")
    try:
        resp = session.get(subscribe_url, timeout=timeout)
    except requests.RequestException as exc:
        raise ConfirmationError(f"subscription confirmation failed: {exc}") from exc

    logger.debug("Confirmation response: %s", resp.status_code)
    if not 200 <= resp.status_code < 300:
        raise ConfirmationError(f"subscription confirmation returned {resp.status_code}")
    return resp
