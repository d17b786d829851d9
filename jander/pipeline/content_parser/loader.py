"""Content directory discovery and concurrent parsing.

Finds the content files in a directory (immediate regular files only) and
parses them concurrently on worker threads. The batch is fail-fast: the first
file that cannot be read or parsed aborts the whole run.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from jander.config import DEFAULT_MAX_CONCURRENT_PARSES

from .parser import parse_content_file
from .records import ContentRecord

logger = logging.getLogger(__name__)


def find_content_files(content_dir: Path) -> list[Path]:
    """Find content files in the given directory.

    Parameters
    ----------
    content_dir : Path
        Directory whose immediate files are content files. Subdirectories
        are ignored.

    Returns
    -------
    list[Path]
        Files sorted by name.

    Raises
    ------
    OSError
        If the directory does not exist or cannot be listed.
    """
    return sorted(path for path in Path(content_dir).iterdir() if path.is_file())


async def parse_content_files(
    paths: list[Path], max_concurrent: int = DEFAULT_MAX_CONCURRENT_PARSES
) -> list[ContentRecord]:
    """Parse content files concurrently, preserving input order.

    Parameters
    ----------
    paths : list[Path]
        Files to parse.
    max_concurrent : int, optional
        Upper bound on files parsed at the same time.

    Returns
    -------
    list[ContentRecord]
        One record per path, in the order of ``paths``.

    Raises
    ------
    jander.exceptions.DataValidationError
        From the first file that fails to parse.
    OSError
        From the first file that cannot be read.
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrent))

    async def parse_one(path: Path) -> ContentRecord:
        async with semaphore:
            return await asyncio.to_thread(parse_content_file, path)

    tasks = [asyncio.ensure_future(parse_one(path)) for path in paths]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def load_content(
    content_dir: Path, max_concurrent: int = DEFAULT_MAX_CONCURRENT_PARSES
) -> list[ContentRecord]:
    """Discover and parse every content file in ``content_dir``."""
    paths = find_content_files(content_dir)
    logger.info("Found %d content files in %s", len(paths), content_dir)
    return await parse_content_files(paths, max_concurrent)
