"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides helpers for writing content files and fake formatter processes.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


def content_text(
    title: str = "Hello",
    date: str = "2020-01-01",
    tags: str = "- x - y",
    body: str = "Body text",
) -> str:
    """Return the text of a content file in the expected grammar."""
    return f"# {title}\n{date}\n{tags}\n---\n{body}"


@pytest.fixture
def write_content(tmp_path: Path):
    """Return a helper that writes a content file under ``tmp_path/content``."""
    content_dir = tmp_path / "content"
    content_dir.mkdir()

    def _write(name: str, text: str) -> Path:
        path = content_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    _write.dir = content_dir
    return _write


@pytest.fixture
def python_command():
    """Return a helper building an argv that runs a Python snippet."""

    def _command(code: str) -> list[str]:
        return [sys.executable, "-c", code]

    return _command


# Echoes standard input unchanged, like a formatter with nothing to fix.
CAT_SCRIPT = "import sys; sys.stdout.write(sys.stdin.read())"


@pytest.fixture
def cat_formatter(python_command) -> list[str]:
    """Argv for a formatter that echoes its input."""
    return python_command(CAT_SCRIPT)


JANDER_VARS = (
    "JANDER_BUILD",
    "JANDER_CONTENT",
    "JANDER_GENERATED",
    "JANDER_FORMATTER",
    "JANDER_FORMATTER_TIMEOUT",
    "JANDER_MAX_CONCURRENT_PARSES",
)


@pytest.fixture
def isolated_env(monkeypatch):
    """Unset every JANDER_* variable and remove them again at teardown.

    Setting before deleting makes monkeypatch restore the unset state even
    when a dotenv file loaded the variables during the test.
    """
    for name in JANDER_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
