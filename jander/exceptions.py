"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used by the content pipeline to represent its failure
modes: configuration, content validation (pattern matching, captures, dates
and tags), and the external formatter process. Using a centralized hierarchy
makes error handling and testing consistent.

Filesystem failures are not wrapped; ``OSError`` propagates unmodified.
"""

from __future__ import annotations

from typing import Any, Mapping

INDENT: str = " " * 4

MISSING_CAPTURE_MESSAGE: str = """
Missing capture {index}

in string...
{text}

with regex...
{pattern}
"""


def indent_lines(text: str, prefix: str = INDENT) -> str:
    """Return ``text`` with ``prefix`` prepended to every line."""
    return "\n".join(prefix + line for line in text.split("\n"))


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'INVALID_DATE'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'}, transient=True)
    >>> e.code
    'CODE'
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class DataValidationError(AppError):
    """Raised for content that fails grammar or field validation."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "DATA_VALIDATION_ERROR",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code, message, context=context, transient=False)


class NoMatchError(DataValidationError):
    """Raised when a pattern does not match a text block at all."""

    def __init__(self, text: str, pattern: str) -> None:
        super().__init__(
            f"Pattern did not match\n\nin string...\n{indent_lines(text)}"
            f"\n\nwith regex...\n{INDENT}{pattern}",
            code="NO_MATCH",
            context={"pattern": pattern},
        )
        self.text = text
        self.pattern = pattern


class MissingCaptureError(DataValidationError):
    """Raised when a pattern matched but a required capture is absent or empty.

    Parameters
    ----------
    index : int
        Positional index of the missing capture (and of its field name).
    text : str
        The full input text the pattern was applied to.
    pattern : str
        Source of the pattern that was applied.
    """

    def __init__(self, index: int, text: str, pattern: str) -> None:
        super().__init__(
            MISSING_CAPTURE_MESSAGE.format(
                index=index, text=indent_lines(text), pattern=INDENT + pattern
            ),
            code="MISSING_CAPTURE",
            context={"index": index, "pattern": pattern},
        )
        self.index = index
        self.text = text
        self.pattern = pattern


class MalformedContentError(DataValidationError):
    """Raised when a content file does not follow the expected grammar.

    Wraps the ``NoMatchError`` or ``MissingCaptureError`` that occurred in
    either parsing pass. The wrapped error is available as ``cause``.
    """

    def __init__(self, cause: AppError, *, source: str | None = None) -> None:
        where = f" in {source}" if source else ""
        super().__init__(
            f"Malformed content{where}: {cause.message}",
            code="MALFORMED_CONTENT",
            context={"source": source, "cause": cause.code},
        )
        self.cause = cause
        self.__cause__ = cause


class InvalidDateError(DataValidationError):
    """Raised when a content date cannot be parsed as a calendar date."""

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Failed to parse date {raw}",
            code="INVALID_DATE",
            context={"date": raw},
        )
        self.raw = raw


class EmptyTagListError(DataValidationError):
    """Raised when a content tag list has no items."""

    def __init__(self, raw: str = "") -> None:
        super().__init__(
            "Content tags must have at least one item",
            code="EMPTY_TAG_LIST",
            context={"tags": raw},
        )
        self.raw = raw


class TimeoutExceededError(AppError):
    """Raised when a configured timeout or deadline is exceeded."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "TIMEOUT_EXCEEDED_ERROR", message, context=context, transient=True
        )


class ExternalServiceError(AppError):
    """Raised for unexpected failures from an external process or service."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "EXTERNAL_SERVICE_ERROR",
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(code, message, context=context, transient=transient)


class FormatterFailedError(ExternalServiceError):
    """Raised when the formatter process exits with a non-zero code.

    Parameters
    ----------
    exit_code : int
        The exit code reported by the process.
    output : str
        Everything the process wrote to its standard output before exiting.
    """

    def __init__(self, exit_code: int, output: str) -> None:
        super().__init__(
            f"Formatter exited with code {exit_code}",
            code="FORMATTER_FAILED",
            context={"exit_code": exit_code, "output_length": len(output)},
        )
        self.exit_code = exit_code
        self.output = output


class FormatterUnavailableError(ExternalServiceError):
    """Raised when the formatter process cannot be started."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(
            f"Could not start formatter {command!r}: {reason}",
            code="FORMATTER_UNAVAILABLE",
            context={"command": command},
        )
        self.command = command
