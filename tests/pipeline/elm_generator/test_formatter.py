"""Tests for piping generated source through an external formatter."""

import pytest

from jander.exceptions import (
    FormatterFailedError,
    FormatterUnavailableError,
    TimeoutExceededError,
)
from jander.pipeline.elm_generator import format_source
from jander.pipeline.elm_generator.formatter import default_formatter_command


@pytest.mark.asyncio
async def test_format_source_returns_formatter_output(cat_formatter):
    text = 'module Contents exposing (..)\n\nbody = "x"\n'
    assert await format_source(text, cat_formatter) == text


@pytest.mark.asyncio
async def test_format_source_transforms_text(python_command):
    upper = python_command("import sys; sys.stdout.write(sys.stdin.read().upper())")
    assert await format_source("abc\n", upper) == "ABC\n"


@pytest.mark.asyncio
async def test_format_source_large_output_does_not_deadlock(cat_formatter):
    text = ("x" * 1023 + "\n") * 2048
    output = await format_source(text, cat_formatter, timeout=60)
    assert len(output) == len(text)
    assert output == text


@pytest.mark.asyncio
async def test_format_source_output_before_input_consumed(python_command):
    # Writes a large block before reading anything.
    eager = python_command(
        "import sys; sys.stdout.write('y' * 2_000_000); sys.stdout.flush(); "
        "sys.stdin.read()"
    )
    output = await format_source("z" * 2_000_000, eager, timeout=60)
    assert output == "y" * 2_000_000


@pytest.mark.asyncio
async def test_format_source_nonzero_exit_carries_code_and_output(python_command):
    failing = python_command(
        "import sys; sys.stdin.read(); sys.stdout.write('partial'); "
        "sys.stdout.flush(); sys.exit(3)"
    )
    with pytest.raises(FormatterFailedError) as info:
        await format_source("input", failing)
    assert info.value.exit_code == 3
    assert info.value.output == "partial"
    assert info.value.code == "FORMATTER_FAILED"


@pytest.mark.asyncio
async def test_format_source_failure_without_reading_input(python_command):
    failing = python_command("import sys; sys.exit(5)")
    with pytest.raises(FormatterFailedError) as info:
        await format_source("a" * 1_000_000, failing, timeout=60)
    assert info.value.exit_code == 5
    assert info.value.output == ""


@pytest.mark.asyncio
async def test_format_source_missing_executable():
    with pytest.raises(FormatterUnavailableError) as info:
        await format_source("x", ["jander-no-such-formatter-binary", "--stdin"])
    assert "jander-no-such-formatter-binary" in info.value.command


@pytest.mark.asyncio
async def test_format_source_timeout_kills_process(python_command):
    sleeper = python_command("import time; time.sleep(30)")
    with pytest.raises(TimeoutExceededError) as info:
        await format_source("x", sleeper, timeout=0.5)
    assert info.value.transient is True
    assert info.value.context["timeout"] == 0.5


def test_default_formatter_command():
    assert default_formatter_command() == ["elm-format", "--stdin"]
