"""Amazon SNS HTTP(S) notification envelopes.

SNS POSTs a JSON document to subscribed HTTP endpoints. Only the fields below
are read; anything else in the document is ignored.
"""
import json
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Optional, Union

from .errors import DecodeError

# Zero value used when the document carries no Timestamp
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", re.ASCII)

# dataclass attribute -> SNS wire name
WIRE_FIELDS = {
    "message": "Message",
    "message_id": "MessageId",
    "signature": "Signature",
    "signature_version": "SignatureVersion",
    "signing_cert_url": "SigningCertURL",
    "subject": "Subject",
    "subscribe_url": "SubscribeURL",
    "token": "Token",
    "topic_arn": "TopicArn",
    "type": "Type",
    "unsubscribe_url": "UnsubscribeURL",
}


@dataclass(frozen=True)
class SNSMessage:
    message: str = ""
    message_id: str = ""
    signature: str = ""
    signature_version: str = ""
    signing_cert_url: str = ""
    subject: str = ""
    subscribe_url: str = ""
    timestamp: datetime = ZERO_TIME
    token: str = ""
    topic_arn: str = ""
    type: str = ""
    unsubscribe_url: str = ""

    def format_text(self) -> str:
        """Timestamp (RFC 3339), subject and body, as posted to Slack."""
        return f"{format_rfc3339(self.timestamp)} [{self.subject}] {self.message}"

    def __str__(self) -> str:
        return self.format_text()


def format_rfc3339(ts: datetime) -> str:
    text = ts.replace(microsecond=0).isoformat()
    if ts.utcoffset() == timedelta(0):
        return text[:-len("+00:00")] + "Z"
    return text


def parse_timestamp(value: str) -> datetime:
    if not _RFC3339.fullmatch(value):
        raise DecodeError(f"invalid Timestamp {value!r}: not RFC 3339")
    raw = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise DecodeError(f"invalid Timestamp {value!r}: {exc}") from exc


def _lookup(doc: Dict[str, Any], name: str) -> Any:
    """
    Value of ``name`` matched case-insensitively. Keys apply in document
    order, so the last non-null match wins; every match must be a string.
    """
    lowered = name.lower()
    found = None
    for key, value in doc.items():
        if key.lower() != lowered or value is None:
            continue
        if not isinstance(value, str):
            raise DecodeError(f"field {name} must be a string, got {type(value).__name__}")
        found = value
    return found


def parse_message(data: Union[bytes, str], tz: Optional[tzinfo] = None) -> SNSMessage:
    """
    Decodes an SNS POST body into an SNSMessage.

    The timestamp is converted to ``tz``, or to the process local time zone
    when ``tz`` is None. Raises DecodeError when the body is not a JSON object
    of the expected shape. If only the zone conversion fails, the DecodeError
    carries the partially decoded message in its ``message`` attribute.
    """
    try:
        doc = json.loads(data)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"invalid JSON body: {exc}") from exc

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise DecodeError(f"expected a JSON object, got {type(doc).__name__}")

    fields = {attr: _lookup(doc, wire) or "" for attr, wire in WIRE_FIELDS.items()}

    raw_ts = _lookup(doc, "Timestamp")
    if raw_ts is None:
        return SNSMessage(**fields)

    ts = parse_timestamp(raw_ts)
    try:
        local_ts = ts.astimezone(tz)
    except (OverflowError, OSError, ValueError) as exc:
        partial = SNSMessage(timestamp=ts, **fields)
        raise DecodeError(f"cannot convert Timestamp to local time: {exc}", message=partial) from exc

    return SNSMessage(timestamp=local_ts, **fields)
