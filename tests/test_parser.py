"""Tests for the message parser and size formatting."""

import re
from datetime import timezone
from zoneinfo import ZoneInfo

import pytest
from hypothesis import given, strategies as st

from games_bridge.services.parser import (
    SIZE_UNITS,
    clean_game_name,
    format_file_size,
    format_posted_at,
    is_archive_name,
    parse_game_message,
)
from tests.conftest import make_message

SIZE_PATTERN = re.compile(r"^-?\d+(\.\d{1,2})? (" + "|".join(SIZE_UNITS) + r")$")


class TestFormatFileSize:
    @pytest.mark.parametrize(
        ("num_bytes", "expected"),
        [
            (0, "0 Bytes"),
            (1, "1 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1048576, "1 MB"),
            (1073741824, "1 GB"),
            (1099511627776, "1 TB"),
            (5 * 1024**3 + 123 * 1024**2, "5.12 GB"),
        ],
    )
    def test_known_values(self, num_bytes: int, expected: str) -> None:
        assert format_file_size(num_bytes) == expected

    def test_just_below_a_unit_boundary_stays_in_smaller_unit(self) -> None:
        assert format_file_size(1048575) == "1024 KB"

    def test_huge_values_clamp_to_terabytes(self) -> None:
        assert format_file_size(2048 * 1024**4) == "2048 TB"

    def test_negative_values_clamp_to_bytes(self) -> None:
        assert format_file_size(-512) == "-512 Bytes"

    @given(st.integers(min_value=0, max_value=1024**6))
    def test_result_is_number_and_unit(self, num_bytes: int) -> None:
        assert SIZE_PATTERN.match(format_file_size(num_bytes))


class TestCleanGameName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My Game [Remastered].zip", "My Game"),
            ("Game.RAR", "Game"),
            ("Game.7z", "Game"),
            ("[v1.2] Game [EU] [Multi]", "Game"),
            ("  Spaced Out  ", "Spaced Out"),
            ("Game.zip.rar", "Game.zip"),
            ("zipless", "zipless"),
        ],
    )
    def test_cleanup(self, raw: str, expected: str) -> None:
        assert clean_game_name(raw) == expected

    @given(st.text(alphabet=st.characters(blacklist_characters="[]"), max_size=40))
    def test_no_brackets_survive(self, title: str) -> None:
        cleaned = clean_game_name(f"{title}[tag]")
        assert "[tag]" not in cleaned
        assert cleaned == cleaned.strip()


def test_is_archive_name() -> None:
    assert is_archive_name("a.zip")
    assert is_archive_name("A.RaR")
    assert is_archive_name("b.7Z")
    assert not is_archive_name("notes.txt")
    assert not is_archive_name("zip")


class TestParseGameMessage:
    def test_name_falls_back_to_filename(self) -> None:
        entry = parse_game_message(make_message(1, "", ["My Game [Remastered].zip"]))

        assert entry is not None
        assert entry.name == "My Game"
        assert entry.file_name == "My Game [Remastered].zip"

    def test_name_uses_first_line_of_body(self) -> None:
        entry = parse_game_message(make_message(1, "Cool Game\nmore text", ["x.rar"]))

        assert entry is not None
        assert entry.name == "Cool Game"

    def test_whitespace_body_falls_back_to_filename(self) -> None:
        entry = parse_game_message(make_message(1, "   \nsecond line", ["Fallback.7z"]))

        assert entry is not None
        assert entry.name == "Fallback"

    def test_body_is_cleaned_too(self) -> None:
        entry = parse_game_message(make_message(1, "Title [HD].zip", ["x.zip"]))

        assert entry is not None
        assert entry.name == "Title"

    @pytest.mark.parametrize("files", [[], ["readme.txt"], ["cover.png", "notes.md"]])
    def test_no_archive_returns_none(self, files: list[str]) -> None:
        assert parse_game_message(make_message(1, "Not a game", files)) is None

    def test_any_attachment_qualifies_but_first_is_reported(self) -> None:
        message = make_message(7, "", ["cover.png", "game.zip"], size=2048)

        entry = parse_game_message(message)

        assert entry is not None
        assert entry.file_name == "cover.png"
        assert entry.name == "cover.png"
        assert entry.size == "2 KB"

    def test_entry_fields(self) -> None:
        message = make_message(
            123456789012345678, "Game", ["game.zip"], timestamp_ms=1700000000000, size=1536
        )

        entry = parse_game_message(message)

        assert entry is not None
        assert entry.available is True
        assert entry.channel_id == "555"
        assert entry.message_id == "123456789012345678"
        assert entry.size == "1.5 KB"
        assert entry.timestamp == 1700000000000
        assert entry.posted_by == "uploader"
        assert entry.posted_at == "11/14/2023"


def test_posted_at_uses_display_timezone() -> None:
    # 2023-11-14 23:30 UTC is already the 15th in Tokyo
    ts = 1700004600000
    assert format_posted_at(ts, timezone.utc) == "11/14/2023"
    assert format_posted_at(ts, ZoneInfo("Asia/Tokyo")) == "11/15/2023"
