"""Run generated source through an external formatter over a pipe.

The formatter (``elm-format --stdin`` by default) receives the generated text
on its standard input and writes the formatted text to its standard output.
Input writing and output reading run concurrently, so a formatter that
starts emitting output before it has consumed all of its input cannot fill
the pipe buffer and deadlock the run.

Error Branches
--------------
- Spawn failure (missing executable, permissions): ``FormatterUnavailableError``.
- Non-zero exit: ``FormatterFailedError`` with the exit code and all output
  collected before the process exited.
- Timeout (optional): the process is killed and ``TimeoutExceededError`` is
  raised.

The process is reaped on every exit path, including cancellation.

Examples
--------
>>> import asyncio
>>> from jander.pipeline.elm_generator.formatter import format_source
>>> asyncio.run(format_source("module Main exposing (..)\\n"))  # doctest: +SKIP
'module Main exposing (..)\\n'
"""

from __future__ import annotations

import asyncio
import logging
import shlex
from collections.abc import Sequence
from typing import cast

from jander.config import DEFAULT_FORMATTER_COMMAND
from jander.exceptions import (
    FormatterFailedError,
    FormatterUnavailableError,
    TimeoutExceededError,
)

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE: int = 64 * 1024


def default_formatter_command() -> list[str]:
    """Return the default formatter argv."""
    return shlex.split(DEFAULT_FORMATTER_COMMAND)


async def _feed(stdin: asyncio.StreamWriter, data: bytes) -> None:
    try:
        stdin.write(data)
        await stdin.drain()
    except (BrokenPipeError, ConnectionResetError):
        # The formatter stopped reading; its exit code tells the story.
        logger.debug("Formatter closed its input before all data was written")
    finally:
        stdin.close()
        try:
            await stdin.wait_closed()
        except (BrokenPipeError, ConnectionResetError):
            pass


async def _collect(stdout: asyncio.StreamReader, chunks: list[bytes]) -> None:
    while True:
        chunk = await stdout.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)


async def format_source(
    text: str,
    command: Sequence[str] | None = None,
    timeout: float | None = None,
) -> str:
    """Pipe ``text`` through the formatter and return its output.

    Parameters
    ----------
    text : str
        Unformatted source.
    command : Sequence[str] | None, optional
        Formatter argv. Defaults to ``elm-format --stdin``.
    timeout : float | None, optional
        Seconds to wait for the formatter to finish. ``None`` waits forever.

    Returns
    -------
    str
        Everything the formatter wrote to standard output, when it exits 0.

    Raises
    ------
    FormatterUnavailableError
        If the process cannot be started.
    FormatterFailedError
        If the process exits with a non-zero code.
    TimeoutExceededError
        If ``timeout`` elapses before the process exits.
    """
    argv = list(command) if command else default_formatter_command()
    display = shlex.join(argv)
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise FormatterUnavailableError(display, str(exc)) from exc

    # Both pipes were requested above.
    stdin = cast(asyncio.StreamWriter, process.stdin)
    stdout = cast(asyncio.StreamReader, process.stdout)
    chunks: list[bytes] = []

    async def communicate() -> int:
        await asyncio.gather(_feed(stdin, text.encode("utf-8")), _collect(stdout, chunks))
        return await process.wait()

    try:
        exit_code = await asyncio.wait_for(communicate(), timeout)
    except asyncio.TimeoutError as exc:
        raise TimeoutExceededError(
            f"Formatter {display!r} did not finish within {timeout} seconds",
            context={"command": display, "timeout": timeout},
        ) from exc
    finally:
        if process.returncode is None:
            process.kill()
            await process.wait()

    output = b"".join(chunks).decode("utf-8", errors="replace")
    if exit_code != 0:
        raise FormatterFailedError(exit_code, output)
    logger.debug("Formatter %r produced %d characters", display, len(output))
    return output
