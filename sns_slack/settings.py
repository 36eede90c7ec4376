import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from .constants import DEFAULT_HTTP_ADDR, DEFAULT_HTTP_TIMEOUT_SECONDS, NAME, VERSION
from .errors import ConfigError


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup and never mutated."""

    slack_webhook: str
    http_addr: str = DEFAULT_HTTP_ADDR
    slack_channel: str = ""
    slack_username: str = ""
    slack_icon_url: str = ""
    slack_icon_emoji: str = ""
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    debug: bool = False

    @property
    def listen_address(self) -> Tuple[str, int]:
        return parse_listen_address(self.http_addr)

    def validate(self) -> "Settings":
        if not self.slack_webhook:
            raise ConfigError("--slack-webhook or SLACK_WEBHOOK_URL is required")
        if self.http_timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.http_timeout}")
        parse_listen_address(self.http_addr)
        return self


def parse_listen_address(addr: str) -> Tuple[str, int]:
    """
    Splits a ``host:port`` listen address. An empty host (``:8000``) binds all
    interfaces; IPv6 hosts may be bracketed (``[::1]:8000``).
    """
    host, sep, port = (addr or "").rpartition(":")
    if not sep:
        raise ConfigError(f"invalid listen address {addr!r}: missing port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port_num = int(port)
    except ValueError:
        raise ConfigError(f"invalid listen address {addr!r}: bad port {port!r}") from None
    if not 0 <= port_num <= 65535:
        raise ConfigError(f"invalid listen address {addr!r}: port out of range")
    return host or "0.0.0.0", port_num


def _env_bool(value: Optional[str]) -> bool:
    return (value or "false").strip().lower() in {"1", "true", "yes", "on"}


def _env_float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None


def build_parser(environ: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    env = os.environ if environ is None else environ
    parser = argparse.ArgumentParser(
        prog=NAME,
        description="Relay Amazon SNS notifications to a Slack Incoming Webhook.",
    )
    parser.add_argument("--http-addr", default=env.get("HTTP_ADDR", DEFAULT_HTTP_ADDR),
                        help="HTTP listen address (default: %(default)s)")
    parser.add_argument("--slack-webhook", default=env.get("SLACK_WEBHOOK_URL", ""),
                        help="URL of a Slack Incoming Webhook integration")
    parser.add_argument("--slack-channel", default=env.get("SLACK_CHANNEL", ""),
                        help="Slack channel to post messages from SNS")
    parser.add_argument("--slack-username", default=env.get("SLACK_USERNAME", ""),
                        help="Post messages to Slack as this user")
    parser.add_argument("--slack-icon-url", default=env.get("SLACK_ICON_URL", ""),
                        help="URL to an image to use as the icon for messages")
    parser.add_argument("--slack-icon-emoji", default=env.get("SLACK_ICON_EMOJI", ""),
                        help="Emoji to use as the icon for messages")
    parser.add_argument("--timeout", type=float,
                        default=_env_float(env, "HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
                        help="Timeout in seconds for outbound HTTP calls (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", default=_env_bool(env.get("DEBUG_MODE")),
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"{NAME} {VERSION}")
    return parser


def load_settings(argv: Optional[Sequence[str]] = None,
                  environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads flags (falling back to environment variables) into a validated Settings."""
    args = build_parser(environ).parse_args(argv)
    return Settings(
        slack_webhook=args.slack_webhook.strip(),
        http_addr=args.http_addr,
        slack_channel=args.slack_channel,
        slack_username=args.slack_username,
        slack_icon_url=args.slack_icon_url,
        slack_icon_emoji=args.slack_icon_emoji,
        http_timeout=args.timeout,
        debug=args.debug,
    ).validate()
