"""Tests for lenient query-parameter parsing."""
import pytest

from feedback_aggregator.api.utils import optional_enum, parse_non_negative_int
from feedback_aggregator.database.entities.feedback import Sentiment, Source


class TestParseNonNegativeInt:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, 30),
            ("7", 7),
            (" 14 ", 14),
            ("0", 0),
            ("-3", 30),
            ("abc", 30),
            ("1.5", 30),
            ("", 30),
        ],
    )
    def test_parsing(self, raw, expected):
        assert parse_non_negative_int(raw, 30) == expected


class TestOptionalEnum:

    def test_empty_means_no_filter(self):
        assert optional_enum(Sentiment, None) is None
        assert optional_enum(Sentiment, "") is None

    def test_known_values(self):
        assert optional_enum(Sentiment, "negative") is Sentiment.NEGATIVE
        assert optional_enum(Source, "GitHub Issue") is Source.GITHUB_ISSUE

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            optional_enum(Sentiment, "angry")

    def test_match_is_case_sensitive(self):
        with pytest.raises(ValueError):
            optional_enum(Source, "email")
