import logging
from typing import Optional

import requests
from flask import Flask, request

from .constants import NAME, TYPE_NOTIFICATION, TYPE_SUBSCRIPTION_CONFIRMATION, VERSION
from .errors import RelayError
from .services import confirm_subscription, post_slack_message
from .settings import Settings
from .slack import SlackMessage
from .sns import SNSMessage, parse_message

logger = logging.getLogger(__name__)


def dispatch(sns: SNSMessage, settings: Settings, session: requests.Session) -> None:
    """Routes one decoded SNS message to its action; unknown types are a no-op."""
    if sns.type == TYPE_NOTIFICATION:
        slack = SlackMessage.from_settings(settings, sns.format_text())
        post_slack_message(session, settings.slack_webhook, slack, settings.http_timeout)
        logger.info("Forwarded notification %s from %s", sns.message_id, sns.topic_arn)
    elif sns.type == TYPE_SUBSCRIPTION_CONFIRMATION:
        confirm_subscription(session, sns.subscribe_url, settings.http_timeout)
        logger.info("Confirmed subscription to %s", sns.topic_arn)
    else:
        logger.debug("Ignoring SNS message %s of type %r", sns.message_id, sns.type)


def create_app(settings: Settings, session: Optional[requests.Session] = None, tz=None) -> Flask:
    app = Flask(__name__)
    # Shared across request threads; only used for connection pooling
    http = session if session is not None else requests.Session()

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': NAME, 'version': VERSION}, 200

    @app.route('/', methods=['POST'])
    @app.route('/<path:path>', methods=['POST'])
    def receive(path=''):
        body = request.get_data()
        logger.debug("Received data: %r", body[:2000])
        try:
            sns = parse_message(body, tz=tz)
            dispatch(sns, settings, http)
        except RelayError as exc:
            logger.error("%s: %s", type(exc).__name__, exc)
            return str(exc), 500, {'Content-Type': 'text/plain; charset=utf-8'}
        return '', 200

    return app
