"""Per-field normalization and validation for parsed content headers.

Each function takes one raw captured field and turns it into its canonical
form. Normalizers that can reject their input return an ``Ok``/``Err``
outcome rather than raising; pure transformations return plain values.

- ``normalize_date``: general date parsing to epoch milliseconds.
- ``normalize_tags``: ``- a - b`` style lists to an ordered tuple of tags.
- ``derive_identifier``: 8 hex characters of SHA-256 over title and date.
- ``escape_body``: backslash-escapes double quotes for string literals.
"""

from __future__ import annotations

import hashlib
import re

from dateutil import parser as date_parser

from jander.config import (
    CONTENT_ID_LENGTH,
    DATE_DEFAULT,
    DATE_YEAR_PROBE,
    TAG_DELIMITER,
)
from jander.exceptions import EmptyTagListError, InvalidDateError

from .result import Err, Ok, Result

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_date(raw: str) -> Result[int]:
    """Parse a header date string into milliseconds since the Unix epoch.

    Any format understood by ``dateutil.parser`` is accepted, as long as it
    names a year. Missing month and day default to January 1st and a missing
    time to midnight, never to the current date, so the result does not
    depend on when the build runs. Dates without an explicit offset are
    interpreted in local time.

    Parameters
    ----------
    raw : str
        Date string as captured from the content header.

    Returns
    -------
    Result[int]
        ``Ok`` with the timestamp, or ``Err(InvalidDateError)`` naming ``raw``.

    Examples
    --------
    >>> normalize_date("1970-01-01T00:00:00Z").unwrap()
    0
    >>> normalize_date("not-a-date").is_ok()
    False
    """
    try:
        parsed = date_parser.parse(raw, default=DATE_DEFAULT)
        # Parsing again against another year reveals input with no year.
        if date_parser.parse(raw, default=DATE_YEAR_PROBE).year != parsed.year:
            return Err(InvalidDateError(raw))
        return Ok(int(round(parsed.timestamp() * 1000)))
    except (ValueError, OverflowError):
        return Err(InvalidDateError(raw))


def normalize_tags(raw: str) -> Result[tuple[str, ...]]:
    """Split a dash-delimited tag list into trimmed, non-empty tags.

    Parameters
    ----------
    raw : str
        Tag text such as ``"- python - build\\n- elm"``.

    Returns
    -------
    Result[tuple[str, ...]]
        Tags in source order, or ``Err(EmptyTagListError)`` when the text is
        blank or contains no tag between delimiters.

    Examples
    --------
    >>> normalize_tags("- x -  y ").unwrap()
    ('x', 'y')
    """
    if not raw or not raw.strip():
        return Err(EmptyTagListError(raw))
    collapsed = _WHITESPACE_RE.sub(" ", raw)
    tags = tuple(
        segment.strip()
        for segment in collapsed.split(TAG_DELIMITER)
        if segment.strip()
    )
    if not tags:
        return Err(EmptyTagListError(raw))
    return Ok(tags)


def derive_identifier(title: str, date: int) -> str:
    """Return the content identifier for a ``(title, date)`` pair.

    Records sharing both title and date share an identifier.

    Examples
    --------
    >>> len(derive_identifier("Hello", 0))
    8
    """
    digest = hashlib.sha256((title + str(date)).encode("utf-8")).hexdigest()
    return digest[:CONTENT_ID_LENGTH]


def escape_body(body: str) -> str:
    """Escape double quotes so the body can sit inside a string literal."""
    return body.replace('"', '\\"')
