#!/usr/bin/env python3
"""
Command-line interface for todolist.

Provides commands to run the todo web application and to print the
database schema it expects.
"""

import argparse
import logging
import sys

from rich.logging import RichHandler

from todolist.config import Config, DatabaseSettings
from todolist.database import SCHEMA
from todolist.output import OutputManager, Verbosity, get_output, set_output


def configure_logging(level: str) -> None:
    """
    Route all logging, uvicorn's included, through a Rich handler.

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def cmd_serve(args: argparse.Namespace) -> None:
    """Handle the serve subcommand."""
    import uvicorn

    from todolist.app import create_app

    output = get_output()
    try:
        host = args.host or Config.server_host()
        port = args.port if args.port is not None else Config.server_port()
        configure_logging(args.log_level or Config.log_level())
        settings = DatabaseSettings.from_env()
    except ValueError as e:
        output.error(f"Error: {e}")
        sys.exit(1)

    if settings.host is None or settings.database is None:
        output.info("DB_HOST or DB_NAME is not set; queries will fail until they are")
    output.verbose(
        f"Database: host={settings.host} database={settings.database} "
        f"user={settings.user} pool_size={settings.pool_size}"
    )
    output.success(f"Serving todo list on http://{host}:{port}")

    uvicorn.run(create_app(settings=settings), host=host, port=port, log_config=None)


def cmd_schema(args: argparse.Namespace) -> None:
    """Handle the schema subcommand."""
    get_output().sql(SCHEMA)


def main() -> None:
    """Main entry point for todolist CLI."""
    parser = argparse.ArgumentParser(
        description="Todolist - A minimal todo web application backed by PostgreSQL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todolist serve
  todolist serve --port 3000 --log-level debug
  todolist schema --quiet | psql "$DATABASE_URL"

Database connection settings are read from DB_HOST, DB_USER, DB_PASSWORD,
DB_NAME and DB_POOL_SIZE.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the web application",
    )
    serve_parser.add_argument(
        "--host",
        help="Interface to bind (defaults to HOST env var or 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (defaults to PORT env var or 8000)",
    )
    serve_parser.add_argument(
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env var or INFO)",
    )
    serve_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only show errors",
    )
    serve_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show resolved database settings",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Schema subcommand
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the SQL that creates the todos table",
    )
    schema_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print plain SQL without highlighting",
    )
    schema_parser.set_defaults(func=cmd_schema)

    args = parser.parse_args()

    # Set up verbosity
    if getattr(args, "quiet", False):
        verbosity = Verbosity.QUIET
    elif getattr(args, "verbose", False):
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    output_manager = OutputManager(verbosity=verbosity)
    set_output(output_manager)

    # Call the appropriate command handler
    args.func(args)


if __name__ == "__main__":
    main()
