"""Global configuration constants for the project.

Defines paths, environment variable names and defaults used across the
content pipeline and its command-line entrypoint.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

# Project directories
PACKAGE_DIR: Path = Path(__file__).resolve().parent
PROJECT_ROOT: Path = PACKAGE_DIR.parent
LOG_DIR: Path = Path.cwd() / "logs"

# Environment variables (required)
ENV_BUILD_DIR: str = "JANDER_BUILD"
ENV_CONTENT_DIR: str = "JANDER_CONTENT"
ENV_GENERATED_PATH: str = "JANDER_GENERATED"

# Environment variables (optional)
ENV_FORMATTER_COMMAND: str = "JANDER_FORMATTER"
ENV_FORMATTER_TIMEOUT: str = "JANDER_FORMATTER_TIMEOUT"
ENV_MAX_CONCURRENT_PARSES: str = "JANDER_MAX_CONCURRENT_PARSES"

# Formatter defaults
DEFAULT_FORMATTER_COMMAND: str = "elm-format --stdin"
DEFAULT_MAX_CONCURRENT_PARSES: int = 8

# Content grammar
CONTENT_PATTERN: str = r"^(.*)---\n(.*)$"
CONTENT_FIELDS: tuple[str, ...] = ("meta", "body")
# The tag group is optional so a blank tag line binds title and date and is
# then rejected as an empty tag list rather than as a grammar mismatch. The
# date line may not start with the list marker.
META_PATTERN: str = r"^# ([^\n]+)\n\s*([^\s-][^\n]*)(?:\n\s*(-.+))?\s*$"
META_FIELDS: tuple[str, ...] = ("title", "date", "tags")
TAGS_FIELD_INDEX: int = META_FIELDS.index("tags")
TAG_DELIMITER: str = "-"
# Date parts absent from a header date are taken from here.
DATE_DEFAULT: datetime = datetime(1970, 1, 1)
DATE_YEAR_PROBE: datetime = datetime(1971, 1, 1)
CONTENT_ID_LENGTH: int = 8

# Templating
TEMPLATE_DIR: Path = PACKAGE_DIR / "templates"
CONTENTS_TEMPLATE_NAME: str = "Contents.elm.jinja"
CONTENTS_TEMPLATE_PATH: Path = TEMPLATE_DIR / CONTENTS_TEMPLATE_NAME

# Logging
LOG_FILENAME_GENERATE_CONTENTS: str = "generate_contents.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
