"""Capture extraction and positional field binding.

These two helpers are the lowest layer of the content parser. The extractor
applies a regular expression to a block of text and returns its groups in
order; the binder zips those groups onto field names and refuses any field
whose capture is missing, reporting the field index, the full input and the
pattern so a content author can see exactly what failed to match.

Examples
--------
>>> bind_fields("a=1", ["key", "value"], r"^(\\w+)=(\\w+)$").unwrap()
{'key': 'a', 'value': '1'}
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from jander.exceptions import MissingCaptureError, NoMatchError

from .result import Err, Ok, Result

def _compile(pattern: re.Pattern[str] | str) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.DOTALL)


def extract_captures(
    text: str, pattern: re.Pattern[str] | str
) -> Result[list[str | None]]:
    """Return the ordered capture groups of ``pattern`` applied to ``text``.

    String patterns are compiled with ``re.DOTALL``; pre-compiled patterns
    are used as given. The full match is not included.

    Parameters
    ----------
    text : str
        The text block to search.
    pattern : re.Pattern[str] | str
        Pattern with zero or more capturing groups.

    Returns
    -------
    Result[list[str | None]]
        ``Ok`` with one entry per group (``None`` for groups that did not
        participate in the match), or ``Err(NoMatchError)`` when the pattern
        does not match anywhere in ``text``.
    """
    compiled = _compile(pattern)
    match = compiled.search(text)
    if match is None:
        return Err(NoMatchError(text, compiled.pattern))
    return Ok(list(match.groups()))


def bind_fields(
    text: str, names: Sequence[str], pattern: re.Pattern[str] | str
) -> Result[dict[str, str]]:
    """Bind the captures of ``pattern`` on ``text`` to ``names`` by position.

    Parameters
    ----------
    text : str
        The text block to parse.
    names : Sequence[str]
        Field names, one per capturing group, in group order.
    pattern : re.Pattern[str] | str
        Pattern whose group count equals ``len(names)``.

    Returns
    -------
    Result[dict[str, str]]
        ``Ok`` mapping every name to a non-empty capture. ``Err`` carrying
        ``NoMatchError`` if nothing matched, or ``MissingCaptureError`` for
        the first name whose capture is absent or empty.
    """
    compiled = _compile(pattern)
    outcome = extract_captures(text, compiled)
    if isinstance(outcome, Err):
        return outcome
    captures = outcome.value
    bound: dict[str, str] = {}
    for index, name in enumerate(names):
        value = captures[index] if index < len(captures) else None
        if not value:
            return Err(MissingCaptureError(index, text, compiled.pattern))
        bound[name] = value
    return Ok(bound)
