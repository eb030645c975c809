"""Tests des fonctions utilitaires de normalisation."""

from datetime import datetime

import pytest

from src.utils.helpers import (
    clean_movie_title,
    is_blank,
    normalize_accents,
    normalize_title,
    parse_date,
    strip_invisible_chars,
    to_url_slug,
)


class TestTextNormalization:
    def test_normalize_accents(self):
        assert normalize_accents("Amélie à Noël") == "Amelie a Noel"

    def test_strip_invisible_chars(self):
        assert strip_invisible_chars("\u200eMatrix\ufeff") == "Matrix"

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("The Matrix", "the-matrix"),
            ("Amélie", "amelie"),
            ("Mission: Impossible - Fallout", "mission-impossible-fallout"),
            ("  -WALL·E- ", "walle"),
        ],
    )
    def test_to_url_slug(self, title: str, expected: str):
        assert to_url_slug(title) == expected

    def test_clean_movie_title_drops_punctuation_and_spaces(self):
        assert clean_movie_title("Amélie!") == "amelie"

    def test_normalize_title_collapses_delimiters(self):
        assert normalize_title("Blade_Runner.2049") == normalize_title("Blade Runner 2049")


class TestParseDate:
    def test_plain_date(self):
        assert parse_date("1999-03-31") == datetime(1999, 3, 31)

    def test_iso_timestamp_with_zulu_is_naive(self):
        result = parse_date("2009-12-18T00:00:00.000Z")

        assert result == datetime(2009, 12, 18)
        assert result.tzinfo is None

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_returns_none(self, value):
        assert parse_date(value) is None

    def test_invalid_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_date("31/03/1999")


@pytest.mark.parametrize("value,expected", [(None, True), ("", True), (" ", True), ("x", False)])
def test_is_blank(value, expected):
    assert is_blank(value) is expected
