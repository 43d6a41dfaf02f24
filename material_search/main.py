"""Command-line entry point for Material Search."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from material_search.config.environment import EnvironmentConfig
from material_search.config.exceptions import ConfigurationError
from material_search.config.loader import load_config
from material_search.config.models import AppConfig
from material_search.logging import get_logger
from material_search.logging.config import configure_logging
from material_search.session import SearchSession, SearchView, TranscriptRecognizer

logger = get_logger(__name__, component="cli")

PROMPT = "search> "
HELP_TEXT = """Type a query to filter the list. Commands:
  :say TEXT   run TEXT through the voice input path
  :clear      clear the query
  :help       show this help
  :quit       exit"""


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > environment > config file > INFO.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    return app_config, env_config


def render_view(view: SearchView) -> str:
    """Render a session snapshot as plain text."""
    lines: List[str] = []

    if view.notice is not None:
        lines.append(f"! {view.notice}")
    if view.status:
        lines.append(view.status)

    if view.records:
        width = len(str(len(view.records)))
        for number, record in enumerate(view.records, 1):
            lines.append(f"{number:>{width}}. {record.text}")
    else:
        lines.append(view.empty_message)

    return "\n".join(lines)


def run_interactive(session: SearchSession, recognizer: TranscriptRecognizer,
                    stdin: TextIO, stdout: TextIO) -> None:
    """Read queries line by line until :quit or end of input."""
    print(HELP_TEXT, file=stdout)
    print(render_view(session.view()), file=stdout)

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            print(file=stdout)
            break

        text = line.rstrip("\n")
        command = text.strip()

        if command == ":quit":
            break
        if command == ":help":
            print(HELP_TEXT, file=stdout)
            continue
        if command == ":clear":
            session.clear_query()
        elif command == ":say" or command.startswith(":say "):
            recognizer.queue(command[len(":say"):].strip())
            session.toggle_listening()
        else:
            session.set_query(text)

        print(render_view(session.view()), file=stdout)
        session.dismiss_notice()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for Material Search.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = argparse.ArgumentParser(
        description="Material Search - filter the material list by typed or spoken queries"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: search.yaml if present)",
    )
    parser.add_argument(
        "--query",
        default=None,
        help="Run a single search, print the matches and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    args = parser.parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        records = app_config.build_records()
        logger.info(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "record_count": len(records),
                "locale": app_config.locale,
                "mode": "single" if args.query is not None else "interactive",
            },
        )

        recognizer = TranscriptRecognizer()
        session = SearchSession(records, recognizer=recognizer, locale=app_config.locale)

        try:
            if args.query is not None:
                session.set_query(args.query)
                print(render_view(session.view()))
            else:
                run_interactive(session, recognizer, sys.stdin, sys.stdout)
        finally:
            session.close()

        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nShutdown requested by user", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error",
            extra={
                "event": "service.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
