"""Elm Content Generator Runner Module.

This module provides the programmatic entrypoints and logging configuration
for the content generation pipeline. It sequences the stages

    parse content -> sort -> render Elm -> format Elm -> write file

and is the boundary between the command line and the pipeline logic, which
lives in ``jander.pipeline.content_parser`` and the sibling modules of this
package. Any failure aborts the whole run: a malformed content file must
block publication rather than silently drop content.

Examples
--------
>>> from jander.pipeline.elm_generator.runner import configure_logging, run_from_config
>>> configure_logging(log_level="INFO", enable_file=False)
>>> success = run_from_config()  # doctest: +SKIP
>>> assert isinstance(success, bool)  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from jander.config import (
    DEFAULT_MAX_CONCURRENT_PARSES,
    LOG_DIR,
    LOG_FILENAME_GENERATE_CONTENTS,
    LOG_FORMAT,
)
from jander.pipeline.content_parser import ContentRecord, load_content, order_records

from .formatter import format_source
from .settings import GeneratorSettings
from .templating import render_contents
from .writer import write_generated_file

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging for generator execution.

    Sets up a console handler and, optionally, a file handler under
    ``LOG_DIR``, using ``LOG_FORMAT`` from ``jander.config``. Failure to
    create the log directory or file only disables file logging.

    Parameters
    ----------
    log_level : str, optional
        The logging level (e.g., "INFO", "DEBUG"). Defaults to "INFO".
    enable_file : bool, optional
        Whether to also write logs to ``LOG_DIR / LOG_FILENAME_GENERATE_CONTENTS``.

    Notes
    -----
    Existing root handlers are removed first, so repeated calls are safe.
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(
                    LOG_DIR / LOG_FILENAME_GENERATE_CONTENTS, mode="a"
                ),
            )
        except OSError as exc:
            logger.warning("File logging disabled: %s", exc)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


async def run_pipeline(
    content_dir: Path,
    output_path: Path,
    *,
    formatter_command: Sequence[str] | None = None,
    formatter_timeout: float | None = None,
    format_output: bool = True,
    max_concurrent: int = DEFAULT_MAX_CONCURRENT_PARSES,
    template_path: Path | None = None,
) -> list[ContentRecord]:
    """Generate the Elm contents module from a content directory.

    Parameters
    ----------
    content_dir : Path
        Directory of content files.
    output_path : Path
        Destination of the generated source.
    formatter_command : Sequence[str] | None, optional
        Formatter argv; defaults to ``elm-format --stdin``.
    formatter_timeout : float | None, optional
        Seconds to wait for the formatter; ``None`` waits forever.
    format_output : bool, optional
        When False the rendered source is written without formatting.
    max_concurrent : int, optional
        Bound on files parsed at the same time.
    template_path : Path | None, optional
        Template overriding the packaged one.

    Returns
    -------
    list[ContentRecord]
        The records written, newest first.

    Raises
    ------
    jander.exceptions.AppError
        For content, formatter or timeout failures.
    OSError
        For filesystem failures, unmodified.
    """
    logger.info("Parsing content")
    records = await load_content(content_dir, max_concurrent)

    logger.info("Sorting content")
    ordered = order_records(records)

    logger.info("Generating elm")
    source = render_contents(ordered, template_path)

    if format_output:
        logger.info("Formatting elm")
        source = await format_source(source, formatter_command, formatter_timeout)

    logger.info("Writing file")
    write_generated_file(source, output_path)
    logger.info("Wrote %d contents to %s", len(ordered), output_path)
    return ordered


def run_with_settings(
    settings: GeneratorSettings,
    *,
    output_path: Path | None = None,
    format_output: bool = True,
) -> list[ContentRecord]:
    """Run :func:`run_pipeline` synchronously using ``settings``.

    Raises whatever the pipeline raises.
    """
    return asyncio.run(
        run_pipeline(
            settings.content_dir,
            Path(output_path) if output_path is not None else settings.output_path,
            formatter_command=settings.formatter_command,
            formatter_timeout=settings.formatter_timeout,
            format_output=format_output,
            max_concurrent=settings.max_concurrent_parses,
        )
    )


def run_from_config(
    settings: GeneratorSettings | None = None,
    *,
    output_path: Path | None = None,
    format_output: bool = True,
) -> bool:
    """Run the generator using environment configuration.

    Returns
    -------
    bool
        True when the file was generated, False on any failure (logged).
    """
    try:
        settings = settings if settings is not None else GeneratorSettings()
        run_with_settings(
            settings, output_path=output_path, format_output=format_output
        )
        return True
    except Exception as exc:
        logger.exception("Failed to generate contents: %s", exc)
        return False


__all__ = [
    "configure_logging",
    "run_from_config",
    "run_pipeline",
    "run_with_settings",
]
