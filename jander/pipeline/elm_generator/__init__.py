"""Elm generator pipeline package.

Public API for the output half of the pipeline: rendering ordered content
records into the ``Contents`` Elm module, piping the result through the
formatter, writing the generated file, and the runner that sequences it all
from environment settings.
"""

from .formatter import format_source
from .runner import configure_logging, run_from_config, run_pipeline, run_with_settings
from .settings import GeneratorSettings
from .templating import build_template_context, load_template, render_contents
from .writer import write_generated_file

__all__ = [
    "GeneratorSettings",
    "build_template_context",
    "configure_logging",
    "format_source",
    "load_template",
    "render_contents",
    "run_from_config",
    "run_pipeline",
    "run_with_settings",
    "write_generated_file",
]
