import argparse
import logging
import os
from typing import Optional

import uvicorn

from crawldigest.api.server import create_app
from crawldigest.container import Container

logger = logging.getLogger("crawldigest")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="crawldigest", description="HTTP server for crawling websites and digesting them with AI")
    parser.add_argument("-p", "--port", type=int, default=int(os.getenv("PORT", "3000")), help="port to run the server on")
    parser.add_argument("--host", default="0.0.0.0", help="interface to bind")
    parser.add_argument("-d", "--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser.parse_args(argv)


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT, handlers=handlers, force=True)


def main(container: Optional[Container] = None, argv=None):
    args = parse_args(argv)
    configure_logging(args.debug, args.log_file)
    if args.debug:
        logger.debug("Debug mode enabled")

    # Allow injecting a container for testing
    container = container or Container()
    app = create_app(container, debug=args.debug)

    logger.info("crawldigest server running on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level="debug" if args.debug else "info")


if __name__ == '__main__':
    main()
