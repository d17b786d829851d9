"""Templating utilities for generated Elm source.

This module binds ordered content records into the ``Contents`` Elm module
template. Its only responsibility is template loading and rendering: string
safety (quote escaping) has already been applied by the content parser, so
Jinja2 autoescaping is disabled to avoid escaping the structural characters
of the generated source a second time.

Boundaries
----------
- Reads the template file; does not write to disk or run processes.
- Deterministic given the records and template.

Examples
--------
>>> from jander.pipeline.elm_generator.templating import render_contents
>>> source = render_contents([])
>>> "contentDict" in source
True
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from jander.config import CONTENTS_TEMPLATE_PATH
from jander.pipeline.content_parser import ContentRecord

logger = logging.getLogger(__name__)


def load_template(path: Path) -> Template:
    """Load a Jinja2 template for generated source.

    Parameters
    ----------
    path : Path
        Path to the template file.

    Returns
    -------
    jinja2.Template
        Compiled template with autoescaping disabled and strict undefined
        variables.

    Raises
    ------
    jinja2.TemplateNotFound
        If the file does not exist.
    """
    environment = Environment(
        loader=FileSystemLoader(str(path.parent)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    return environment.get_template(path.name)


def build_template_context(records: Sequence[ContentRecord]) -> dict[str, object]:
    """Return the template context for ``records`` in the given order."""
    return {"contents": [record.to_context() for record in records]}


def render_contents(
    records: Sequence[ContentRecord], template_path: Path | None = None
) -> str:
    """Render the Elm ``Contents`` module for the ordered ``records``.

    Parameters
    ----------
    records : Sequence[ContentRecord]
        Records in output order (newest first).
    template_path : Path | None, optional
        Template to use instead of the packaged ``Contents.elm.jinja``.

    Returns
    -------
    str
        Unformatted Elm source.
    """
    template = load_template(Path(template_path or CONTENTS_TEMPLATE_PATH))
    source = template.render(build_template_context(records))
    logger.debug("Rendered %d records into %d characters", len(records), len(source))
    return source
