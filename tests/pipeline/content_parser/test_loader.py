"""Tests for content directory discovery and concurrent parsing."""

from pathlib import Path

import pytest
from conftest import content_text

from jander.exceptions import InvalidDateError, MalformedContentError
from jander.pipeline.content_parser import (
    find_content_files,
    load_content,
    parse_content_files,
)


def test_find_content_files_sorted_and_non_recursive(write_content):
    write_content("b.md", content_text())
    write_content("a.md", content_text())
    nested = write_content.dir / "drafts"
    nested.mkdir()
    (nested / "c.md").write_text(content_text(), encoding="utf-8")
    names = [path.name for path in find_content_files(write_content.dir)]
    assert names == ["a.md", "b.md"]


def test_find_content_files_missing_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        find_content_files(tmp_path / "nope")


@pytest.mark.asyncio
async def test_parse_content_files_preserves_input_order(write_content):
    paths = [
        write_content(f"{index:02d}.md", content_text(title=f"Post {index}"))
        for index in range(12)
    ]
    records = await parse_content_files(paths, max_concurrent=3)
    assert [record.title for record in records] == [f"Post {i}" for i in range(12)]


@pytest.mark.asyncio
async def test_parse_content_files_fails_fast(write_content):
    good = write_content("good.md", content_text())
    bad = write_content("bad.md", content_text(date="not-a-date"))
    with pytest.raises(InvalidDateError):
        await parse_content_files([good, bad])


@pytest.mark.asyncio
async def test_load_content_reads_directory(write_content):
    write_content("one.md", content_text(title="One"))
    write_content("two.md", content_text(title="Two"))
    records = await load_content(write_content.dir)
    assert sorted(record.title for record in records) == ["One", "Two"]


@pytest.mark.asyncio
async def test_load_content_one_malformed_file_aborts(write_content):
    write_content("one.md", content_text(title="One"))
    write_content("broken.md", "just some text")
    with pytest.raises(MalformedContentError):
        await load_content(write_content.dir)


@pytest.mark.asyncio
async def test_load_content_empty_directory(write_content):
    assert await load_content(write_content.dir) == []
