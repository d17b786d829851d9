"""Typed content records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .normalizers import derive_identifier, escape_body, normalize_date, normalize_tags
from .result import Result


@dataclass(frozen=True)
class ContentRecord:
    """One parsed and validated content file.

    Attributes
    ----------
    id : str
        Eight hex characters derived from ``title`` and ``date``.
    title : str
        Title from the ``# `` header line.
    date : int
        Milliseconds since the Unix epoch.
    tags : tuple[str, ...]
        At least one trimmed, non-empty tag, in source order.
    body : str
        Body text with double quotes escaped.
    source : Path | None
        File the record was read from, for diagnostics only.
    """

    id: str
    title: str
    date: int
    tags: tuple[str, ...]
    body: str
    source: Path | None = field(default=None, compare=False, repr=False)

    def to_context(self) -> dict[str, Any]:
        """Return the mapping exposed to the contents template."""
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "tags": list(self.tags),
            "body": self.body,
        }


def build_record(
    fields: dict[str, str], *, source: Path | None = None
) -> Result[ContentRecord]:
    """Normalize raw header and body captures into a ``ContentRecord``.

    Every field is validated before the record is constructed, so a record
    that exists is always complete.

    Parameters
    ----------
    fields : dict[str, str]
        Raw captures keyed by ``title``, ``date``, ``tags`` and ``body``.
    source : Path | None, optional
        Originating file, kept for diagnostics.

    Returns
    -------
    Result[ContentRecord]
        The record, or the first ``InvalidDateError``/``EmptyTagListError``.
    """
    title = fields["title"]

    def with_date(date: int) -> Result[ContentRecord]:
        return normalize_tags(fields["tags"]).map(
            lambda tags: ContentRecord(
                id=derive_identifier(title, date),
                title=title,
                date=date,
                tags=tags,
                body=escape_body(fields["body"]),
                source=source,
            )
        )

    return normalize_date(fields["date"]).then(with_date)
