import logging
import sys

from .controller import create_app
from .errors import ConfigError
from .settings import load_settings

logger = logging.getLogger(__name__)


def main(argv=None):
    try:
        settings = load_settings(argv)
    except ConfigError as exc:
        print(f"FATAL: {exc}. Refusing to start.", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host, port = settings.listen_address
    app = create_app(settings)
    logger.info("Listening on %s:%s, forwarding to Slack", host, port)
    # use_reloader=False keeps a single process; threaded serves each request on its own thread
    app.run(host=host, port=port, debug=settings.debug, use_reloader=False, threaded=True)
