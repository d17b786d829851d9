"""Two-pass parser for frontmatter content files.

A content file follows a fixed, line-oriented grammar::

    # <title>
    <date-string>
    - <tag> - <tag> - ...
    ---
    <body text>

The first pass splits the file into its meta block and body on the last
``---`` line. The second pass pulls the title, date and tag list out of the
meta block. Grammar failures from either pass are reported as
``MalformedContentError`` wrapping the underlying ``NoMatchError`` or
``MissingCaptureError``; field failures (dates, tags) are reported as-is.

Examples
--------
>>> text = "# Hello\\n2020-01-01\\n- x - y\\n---\\nHi"
>>> record = parse_content(text).unwrap()
>>> record.title, record.tags
('Hello', ('x', 'y'))
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jander.config import (
    CONTENT_FIELDS,
    CONTENT_PATTERN,
    META_FIELDS,
    META_PATTERN,
    TAGS_FIELD_INDEX,
)
from jander.exceptions import MalformedContentError, MissingCaptureError

from .captures import bind_fields
from .records import ContentRecord, build_record
from .result import Err, Result

logger = logging.getLogger(__name__)

CONTENT_RE = re.compile(CONTENT_PATTERN, re.DOTALL)
META_RE = re.compile(META_PATTERN, re.DOTALL)


def _is_missing_tags(outcome: Result[dict[str, str]]) -> bool:
    return (
        isinstance(outcome, Err)
        and isinstance(outcome.error, MissingCaptureError)
        and outcome.error.index == TAGS_FIELD_INDEX
    )


def parse_content(text: str, source: Path | None = None) -> Result[ContentRecord]:
    """Parse the full text of one content file into a ``ContentRecord``.

    Parameters
    ----------
    text : str
        File contents. ``\\r\\n`` line endings are normalised first.
    source : Path | None, optional
        Path of the file, used in error context and kept on the record.

    Returns
    -------
    Result[ContentRecord]
        ``Ok`` with the validated record, ``Err(MalformedContentError)`` when
        the grammar does not match, or ``Err`` with the field error raised by
        a normalizer.
    """
    label = str(source) if source is not None else None
    text = text.replace("\r\n", "\n")

    sections = bind_fields(text, CONTENT_FIELDS, CONTENT_RE)
    if isinstance(sections, Err):
        return Err(MalformedContentError(sections.error, source=label))

    meta = bind_fields(sections.value["meta"], META_FIELDS, META_RE)
    if _is_missing_tags(meta):
        header = bind_fields(
            sections.value["meta"], META_FIELDS[:TAGS_FIELD_INDEX], META_RE
        )
        meta = header.map(lambda fields: {**fields, "tags": ""})
    if isinstance(meta, Err):
        return Err(MalformedContentError(meta.error, source=label))

    outcome = build_record({**meta.value, "body": sections.value["body"]}, source=source)
    if isinstance(outcome, Err) and label is not None:
        outcome.error.context.setdefault("source", label)
    return outcome


def parse_content_file(path: Path) -> ContentRecord:
    """Read and parse one content file, raising on any failure.

    Parameters
    ----------
    path : Path
        UTF-8 content file.

    Returns
    -------
    ContentRecord
        The parsed record.

    Raises
    ------
    jander.exceptions.DataValidationError
        If the file is malformed or a field is invalid.
    OSError
        If the file cannot be read.
    """
    text = path.read_text(encoding="utf-8")
    record = parse_content(text, source=path).unwrap()
    logger.debug("Parsed %s as %s (%s)", path.name, record.id, record.title)
    return record
