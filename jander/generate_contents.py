"""Generate the Elm contents module from a directory of content files.

Reads ``JANDER_CONTENT``, parses every content file, sorts the records newest
first, renders ``Contents.elm``, formats it with ``elm-format`` and writes it
to ``JANDER_BUILD/JANDER_GENERATED``. Any failure exits with status 1 after
printing the error detail.

Usage
-----
jander-generate [--env-file PATH] [--output PATH] [--no-format] [--log-level LEVEL]
python -m jander.generate_contents ...
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from jander.console import print_error, rprint
from jander.exceptions import AppError
from jander.pipeline.elm_generator import (
    GeneratorSettings,
    configure_logging,
    run_with_settings,
)

logger = logging.getLogger(__name__)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : Sequence[str] | None
        Arguments to parse; ``None`` uses ``sys.argv``.

    Returns
    -------
    argparse.Namespace
        Namespace with ``env_file``, ``output``, ``no_format`` and
        ``log_level``.
    """
    parser = argparse.ArgumentParser(
        description="Generate the Elm contents module from content files."
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Dotenv file with JANDER_* settings (default: ./.env).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write here instead of JANDER_BUILD/JANDER_GENERATED.",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Write the rendered source without running the formatter.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator from command-line arguments.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 on any failure.
    """
    args = parse_arguments(argv)
    disable_file = bool(
        os.environ.get("DISABLE_FILE_LOGS") or os.environ.get("PYTEST_CURRENT_TEST")
    )
    configure_logging(args.log_level, enable_file=not disable_file)
    try:
        settings = GeneratorSettings(env_file=args.env_file)
        records = run_with_settings(
            settings, output_path=args.output, format_output=not args.no_format
        )
    except (AppError, OSError) as exc:
        logger.error("Content generation failed: %s", exc)
        print_error(exc)
        return 1
    except Exception as exc:
        logger.error("Unexpected error: %s", exc, exc_info=True)
        print_error(exc)
        return 1
    output = args.output or settings.output_path
    rprint(f"[green]Generated {len(records)} contents[/green] -> {output}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
