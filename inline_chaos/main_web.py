import argparse
import sys

import uvicorn

from inline_chaos.config import Config
from inline_chaos.exceptions import ConfigurationError
from inline_chaos.logger import session_logger
from inline_chaos.web_server import InlineChaosWebServer

logger = session_logger


def parse_args(argv=None, config: Config = Config()) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="inline-chaos Web Server - inline styling as it should never be done"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=config.host,
        help=f"Host address to bind to (default: {config.host}, or INLINE_CHAOS_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port number to listen on (default: {config.port}, or INLINE_CHAOS_WEB_PORT env var)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=str(e))
        return 1

    logger.set_level(config.log_level_value)
    args = parse_args(argv, config)

    server = InlineChaosWebServer(config=config)

    try:
        logger.info(
            "Starting web server",
            host=args.host,
            port=args.port,
            environment=config.environment,
        )
        uvicorn.run(server.app, host=args.host, port=args.port, log_level=config.log_level.lower())
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
