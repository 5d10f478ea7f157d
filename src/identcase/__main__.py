"""CLI entry point for identcase."""

from __future__ import annotations

import sys

from identcase.cli import (
    build_parser,
    handle_add,
    handle_camel,
    handle_examples,
    handle_kebab,
    report_error,
    resolve_settings,
)
from identcase.config import LOG_LEVELS
from identcase.errors import ActionableError
from identcase.logging import configure_file_logging, logger, set_level


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    file_handler = None
    try:
        settings = resolve_settings(args.settings)

        level = LOG_LEVELS[args.log_level] if args.log_level else settings.logging.level_number
        set_level(level)
        if args.log_file or settings.logging.file_logging:
            file_handler = configure_file_logging(settings.logging.log_dir, level=level)

        if args.command == "kebab":
            handle_kebab(args)
        elif args.command == "camel":
            handle_camel(args)
        elif args.command == "add":
            handle_add(args)
        elif args.command == "examples":
            return handle_examples(args, settings)
    except ActionableError as exc:
        report_error(exc)
        return 1
    finally:
        if file_handler is not None:
            logger.removeHandler(file_handler)
            file_handler.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
