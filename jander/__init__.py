"""Jander content pipeline package.

Build-time generator that turns a directory of frontmatter content files
into an Elm module consumed by the site build.

Package Structure
-----------------
- `pipeline/content_parser/`:
    Capture binding, field normalizers, the two-pass content parser,
    concurrent directory loading and ordering.
- `pipeline/elm_generator/`:
    Jinja2 rendering, the formatter pipe, the file writer, environment
    settings and the runner.
- `config.py`: Configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.
- `generate_contents.py`: Command-line entrypoint.
"""

__version__ = "0.1.0"
