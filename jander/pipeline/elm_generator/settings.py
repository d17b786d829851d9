"""Configuration and environment loader for the Elm content generator.

This module provides ``GeneratorSettings``, which loads, validates, and
exposes the environment-backed configuration the generator needs: where to
read content, where the build root is, which file to generate, and how to
run the formatter.

Role in Architecture
--------------------
- Forms the boundary between the process environment (shell, CI, ``.env``)
  and the pipeline's typed runtime settings.
- No pipeline logic: only configuration loading, structuring and validation.

Examples
--------
>>> import os
>>> os.environ.update(JANDER_BUILD="build", JANDER_CONTENT="content",
...                   JANDER_GENERATED="src/Contents.elm")
>>> settings = GeneratorSettings()
>>> str(settings.output_path)
'build/src/Contents.elm'
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from dotenv import load_dotenv

from jander.config import (
    DEFAULT_FORMATTER_COMMAND,
    DEFAULT_MAX_CONCURRENT_PARSES,
    ENV_BUILD_DIR,
    ENV_CONTENT_DIR,
    ENV_FORMATTER_COMMAND,
    ENV_FORMATTER_TIMEOUT,
    ENV_GENERATED_PATH,
    ENV_MAX_CONCURRENT_PARSES,
)
from jander.exceptions import ConfigurationError


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(
            f'Missing environment variable "{name}"', context={"variable": name}
        )
    return value


def _optional_number(name: str, kind: type, default: float | int | None):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f'Environment variable "{name}" must be a number, got {raw!r}',
            context={"variable": name},
        ) from exc
    if value <= 0:
        raise ConfigurationError(
            f'Environment variable "{name}" must be positive, got {raw!r}',
            context={"variable": name},
        )
    return value


class GeneratorSettings:
    r"""Environment-backed settings for one generator run.

    Attributes
    ----------
    build_dir : Path
        Build output root (``JANDER_BUILD``).
    content_dir : Path
        Directory of content files (``JANDER_CONTENT``).
    generated_path : Path
        Generated file path relative to ``build_dir`` (``JANDER_GENERATED``).
    formatter_command : list[str]
        Formatter argv (``JANDER_FORMATTER``, default ``elm-format --stdin``).
    formatter_timeout : float | None
        Seconds to wait for the formatter (``JANDER_FORMATTER_TIMEOUT``);
        ``None`` waits forever.
    max_concurrent_parses : int
        Bound on files parsed at once (``JANDER_MAX_CONCURRENT_PARSES``).

    Notes
    -----
    Instantiate once at process start. No runtime mutation is intended.
    """

    def __init__(self, env_file: Path | None = None) -> None:
        r"""Load settings from the environment and an optional ``.env`` file.

        Parameters
        ----------
        env_file : Path | None, optional
            Dotenv file to load before reading the environment. Defaults to
            ``.env`` in the working directory. Values already present in the
            environment take precedence over the file.

        Raises
        ------
        ConfigurationError
            If a required variable is missing or an optional numeric
            variable is malformed. The message names the variable.
        """
        env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
        self.build_dir = Path(_require(ENV_BUILD_DIR))
        self.content_dir = Path(_require(ENV_CONTENT_DIR))
        self.generated_path = Path(_require(ENV_GENERATED_PATH))
        self.formatter_command: list[str] = shlex.split(
            os.getenv(ENV_FORMATTER_COMMAND) or DEFAULT_FORMATTER_COMMAND
        )
        self.formatter_timeout: float | None = _optional_number(
            ENV_FORMATTER_TIMEOUT, float, None
        )
        self.max_concurrent_parses: int = _optional_number(
            ENV_MAX_CONCURRENT_PARSES, int, DEFAULT_MAX_CONCURRENT_PARSES
        )

    @property
    def output_path(self) -> Path:
        """Full path of the generated file."""
        return self.build_dir / self.generated_path
