"""
Unit Tests for RecordCollection

Tests for batch parsing and the puzzle aggregates.
"""

import logging

import pytest

from cube_tally.core.errors import MissingGameHeader, ParseError, UnknownColor
from cube_tally.core.models.collection import CollectionSummary, RecordCollection
from cube_tally.core.models.records import Record
from cube_tally.core.models.token_set import DEFAULT_CAPACITY, TokenSet


TWO_GAMES = (
    "Game 1: 3 red, 4 blue; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
)


class TestRecordCollectionParse:
    """Tests for RecordCollection.parse."""

    def test_parse_when_sample_then_one_record_per_line(self, sample_text):
        games = RecordCollection.parse(sample_text)
        assert len(games) == 5
        assert [g.id for g in games] == [1, 2, 3, 4, 5]

    def test_parse_when_empty_text_then_empty_collection(self):
        games = RecordCollection.parse("")
        assert len(games) == 0
        assert games.sum_valid_ids() == 0
        assert games.sum_minimal_powers() == 0

    def test_parse_when_no_trailing_newline_then_same_result(self):
        assert RecordCollection.parse(TWO_GAMES.rstrip("\n")) == RecordCollection.parse(TWO_GAMES)

    def test_parse_when_trailing_blank_lines_then_skipped(self):
        games = RecordCollection.parse(TWO_GAMES + "\n  \n\n")
        assert len(games) == 2

    def test_parse_when_crlf_line_endings_then_parses(self):
        games = RecordCollection.parse(TWO_GAMES.replace("\n", "\r\n"))
        assert len(games) == 2
        assert games[1].observations[-1] == TokenSet(red=1, green=5)

    def test_parse_when_form_feed_separator_then_not_a_line_break(self):
        """Only newline ends a game line; other separators stay in the line."""
        with pytest.raises(UnknownColor) as exc_info:
            RecordCollection.parse("Game 1: 1 red\x0cGame 2: 2 blue")
        assert exc_info.value.line_number == 1
        assert exc_info.value.line == "Game 1: 1 red\x0cGame 2: 2 blue"

    def test_parse_when_unicode_line_separator_then_line_numbers_follow_newlines(self):
        text = "Game 1: 1 red\nGame 2: 2 blue\u2028Game 3: 3 green\n"
        with pytest.raises(UnknownColor) as exc_info:
            RecordCollection.parse(text)
        assert exc_info.value.line_number == 2

    def test_parse_when_blank_line_in_middle_then_raises_on_that_line(self):
        text = "Game 1: 1 red\n\nGame 2: 2 red\n"
        with pytest.raises(MissingGameHeader) as exc_info:
            RecordCollection.parse(text)
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == ""

    def test_parse_when_missing_colon_then_reports_line_one(self):
        with pytest.raises(MissingGameHeader) as exc_info:
            RecordCollection.parse("Game 2 3 red")
        err = exc_info.value
        assert err.line_number == 1
        assert err.line == "Game 2 3 red"
        assert "line 1" in str(err)

    def test_parse_when_later_line_fails_then_aborts_whole_batch(self):
        text = TWO_GAMES + "Game 4: 3 orange\n" + "Game 5: 1 red\n"
        with pytest.raises(UnknownColor) as exc_info:
            RecordCollection.parse(text)
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "Game 4: 3 orange"
        assert isinstance(exc_info.value.__cause__, ParseError)

    def test_parse_when_duplicate_ids_then_both_kept(self):
        games = RecordCollection.parse("Game 1: 1 red\nGame 1: 2 blue\n")
        assert len(games) == 2
        assert len(games.find(1)) == 2
        assert games.sum_valid_ids() == 2

    def test_parse_when_debug_logging_then_logs_record_count(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cube_tally"):
            RecordCollection.parse(TWO_GAMES)
        assert "Parsed 2 game records" in caplog.text


class TestRecordCollectionAggregates:
    """Tests for sum_valid_ids, sum_minimal_powers and summarize."""

    def test_sum_valid_ids_when_two_games_then_only_possible_counted(self):
        games = RecordCollection.parse(TWO_GAMES)
        assert games.sum_valid_ids(DEFAULT_CAPACITY) == 1

    def test_sum_minimal_powers_when_two_games_then_sums_both(self):
        games = RecordCollection.parse(TWO_GAMES)
        assert games.sum_minimal_powers() == 36 + 1560

    def test_sum_valid_ids_when_sample_then_matches_worked_example(self, sample_text):
        assert RecordCollection.parse(sample_text).sum_valid_ids() == 8

    def test_sum_minimal_powers_when_sample_then_matches_worked_example(self, sample_text):
        assert RecordCollection.parse(sample_text).sum_minimal_powers() == 2286

    def test_sum_valid_ids_when_no_game_fits_then_zero(self):
        games = RecordCollection.parse(TWO_GAMES)
        assert games.sum_valid_ids(TokenSet.zero()) == 0

    def test_possible_ids_when_iterated_then_input_order(self, sample_text):
        games = RecordCollection.parse(sample_text)
        assert list(games.possible_ids()) == [1, 2, 5]
        assert list(games.minimal_powers()) == [48, 12, 1560, 630, 36]

    def test_summarize_when_called_then_matches_individual_queries(self, sample_text):
        games = RecordCollection.parse(sample_text)
        summary = games.summarize()
        assert summary == CollectionSummary(
            record_count=5,
            possible_count=3,
            sum_valid_ids=games.sum_valid_ids(),
            sum_minimal_powers=games.sum_minimal_powers(),
            capacity=DEFAULT_CAPACITY,
        )
        assert summary.to_dict()["capacity"] == {"red": 12, "green": 13, "blue": 14}


class TestRecordCollectionAccess:
    """Tests for sequence access and serialization helpers."""

    def test_getitem_when_indexed_then_returns_record(self):
        games = RecordCollection.parse(TWO_GAMES)
        assert isinstance(games[0], Record)
        assert games[-1].id == 3

    def test_find_when_missing_id_then_empty(self):
        assert RecordCollection.parse(TWO_GAMES).find(99) == []

    def test_to_text_when_reparsed_then_equal(self, sample_text):
        games = RecordCollection.parse(sample_text)
        assert RecordCollection.parse(games.to_text()) == games

    def test_from_dict_when_to_dict_output_then_equal(self):
        games = RecordCollection.parse(TWO_GAMES)
        assert RecordCollection.from_dict(games.to_dict()) == games

    def test_init_when_frozen_then_immutable(self):
        games = RecordCollection.parse(TWO_GAMES)
        with pytest.raises(AttributeError):
            games.records = ()  # type: ignore
