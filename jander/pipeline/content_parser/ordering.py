"""Ordering of parsed content records."""

from __future__ import annotations

from collections.abc import Iterable

from .records import ContentRecord


def order_records(records: Iterable[ContentRecord]) -> list[ContentRecord]:
    """Return records sorted newest first.

    The sort is stable: records with equal dates keep their input order.

    Examples
    --------
    >>> order_records([])
    []
    """
    return sorted(records, key=lambda record: record.date, reverse=True)
