"""
Unit tests for answer_parser.py
"""

import logging
import math

import pytest

from marketing_trainer.answer_parser import (
    find_invalid_fields,
    is_blank,
    parse_answers,
    parse_number,
)


class TestParseNumber:

    @pytest.mark.parametrize("raw, expected", [
        ("50", 50.0),
        ("12.5", 12.5),
        (" 7 ", 7.0),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e2", 100.0),
        ("12.5%", 12.5),
        ("666.67", 666.67),
        (42, 42.0),
        (0.8, 0.8),
    ])
    def test_numbers(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", None, "abc", "$50", "nan", "infinity", float("nan")])
    def test_unparseable_becomes_zero(self, raw):
        assert parse_number(raw) == 0.0

    @pytest.mark.parametrize("raw, expected", [
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
        ("Infinity%", math.inf),
        ("1e400", math.inf),
        (math.inf, math.inf),
    ])
    def test_infinity_kept(self, raw, expected):
        assert parse_number(raw) == expected


class TestIsBlank:

    def test_blank(self):
        assert is_blank("")
        assert is_blank("  ")
        assert is_blank(None)

    def test_not_blank(self):
        assert not is_blank("0")
        assert not is_blank(0)
        assert not is_blank("abc")


class TestFindInvalidFields:

    def test_reports_non_numeric_only(self):
        raw = {"CAC": "50", "LTV": "ninety", "ROI": "", "ROAS": "1.8x"}
        assert find_invalid_fields(raw) == ["LTV"]

    def test_numbers_are_valid(self):
        assert find_invalid_fields({"A": 10, "B": 2.5}) == []

    def test_infinity_is_valid(self):
        assert find_invalid_fields({"CAC": "Infinity", "LTV": "1e400"}) == []


class TestParseAnswers:

    def test_coerces_every_field(self):
        raw = {"Google Ads": "50", "LinkedIn Ads": "", "Email Marketing": "oops"}
        assert parse_answers(raw) == {"Google Ads": 50.0, "LinkedIn Ads": 0.0, "Email Marketing": 0.0}

    def test_logs_coerced_fields(self, caplog):
        with caplog.at_level(logging.WARNING, logger="marketing_trainer.answer_parser"):
            parse_answers({"CAC": "fifty"})
        assert "CAC" in caplog.text
        assert "treating it as 0" in caplog.text

    def test_blank_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="marketing_trainer.answer_parser"):
            parse_answers({"CAC": ""})
        assert caplog.text == ""
