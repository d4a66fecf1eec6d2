"""Blog API CLI entry point."""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from blogapi import __version__
from blogapi.config import get_settings
from blogapi.database import check_db_connection, close_db, get_db_info, init_db
from blogapi.observability import configure_logging

logger = logging.getLogger(__name__)


def cmd_run(args: argparse.Namespace) -> int:
    """Start the HTTP server."""
    import uvicorn

    from blogapi.api import create_app

    try:
        settings = get_settings()
        if args.store:
            settings.store = args.store
        if args.debug:
            settings.debug = True
            logging.getLogger().setLevel(logging.DEBUG)

        print("\n=== Blog API ===\n")
        print(f"Version: {__version__}")
        print(f"Store: {settings.store}")
        print(f"Listening on: http://{settings.server.host}:{settings.server.port}\n")

        uvicorn.run(
            create_app(settings),
            host=args.host or settings.server.host,
            port=args.port or settings.server.port,
            log_level="debug" if settings.debug else settings.log_level.lower(),
        )
        return 0

    except KeyboardInterrupt:
        print("\n\nReceived interrupt signal. Shutting down...\n")
        return 0
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        print(f"\nFailed to start: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()
        db_info = get_db_info()

        print("\n=== Blog API Configuration ===\n")
        print(f"Environment: {settings.environment}")
        print(f"Debug: {settings.debug}")
        print(f"Log Level: {settings.log_level}")
        print(f"Store: {settings.store}\n")

        print("MongoDB:")
        print(f"  URL: {db_info['url']}")
        print(f"  Database: {settings.mongo.database}")
        print(f"  Collection: {settings.mongo.collection}")
        print(f"  Test URL: {'✓ Set' if settings.mongo.test_url else '✗ Not set'}\n")

        print("Server:")
        print(f"  Host: {settings.server.host}")
        print(f"  Port: {settings.server.port}")
        print(f"  Allowed Origins: {', '.join(settings.server.allowed_origins)}\n")

        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1


def cmd_ping(args: argparse.Namespace) -> int:
    """Check MongoDB connectivity."""

    async def run() -> bool:
        await init_db(get_settings())
        try:
            return await check_db_connection()
        finally:
            await close_db()

    db_info = get_db_info()
    if asyncio.run(run()):
        print(f"✓ MongoDB reachable at {db_info['url']} ({db_info['database']})")
        return 0

    print(f"❌ MongoDB unreachable at {db_info['url']}")
    return 1


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Blog API: CRUD REST service for blog posts",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Blog API {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_run = subparsers.add_parser("run", help="Start the HTTP server")
    parser_run.add_argument(
        "--store",
        choices=["mongo", "memory"],
        help="Storage backend (overrides STORE)",
    )
    parser_run.add_argument("--host", help="Bind host")
    parser_run.add_argument("--port", type=int, help="Bind port")
    parser_run.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser_run.set_defaults(func=cmd_run)

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_ping = subparsers.add_parser(
        "ping",
        help="Check MongoDB connectivity",
    )
    parser_ping.set_defaults(func=cmd_ping)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    configure_logging(get_settings())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
