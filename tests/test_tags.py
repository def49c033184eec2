"""Tests for tag expression parsing and display derivations."""

from reader_catalog.catalog.tags import (
    chip_label,
    parse_tag,
    search_value,
    search_values,
    split_tags,
    tag_chips,
)


class TestParseTag:
    """parse_tag classification rules."""

    def test_flat_dimension(self):
        record = parse_tag("temporal/20th-century")
        assert record.dimension == "temporal"
        assert record.value == "20th-century"
        assert record.subtype is None

    def test_dimension_key_is_case_insensitive(self):
        assert parse_tag("Regional/Europe").dimension == "regional"
        # values keep their case
        assert parse_tag("Regional/Europe").value == "Europe"

    def test_genre_fiction(self):
        record = parse_tag("genre/fiction/mystery")
        assert record.dimension == "genre-fiction"
        assert record.value == "mystery"
        assert record.subtype == "fiction"

    def test_genre_subtype_case_variation(self):
        record = parse_tag("genre/Fiction/Mystery")
        assert record.dimension == "genre-fiction"
        assert record.value == "Mystery"

    def test_both_nonfiction_spellings(self):
        assert parse_tag("genre/nonfiction/history").dimension == "genre-nonfiction"
        assert parse_tag("genre/non-fiction/history").dimension == "genre-nonfiction"

    def test_unknown_genre_subtype_is_dropped(self):
        assert parse_tag("genre/romance/regency") is None

    def test_genre_with_two_segments_is_dropped(self):
        assert parse_tag("genre/fiction") is None

    def test_unknown_dimension_is_dropped(self):
        assert parse_tag("mood/dark") is None
        assert parse_tag("genre-fiction/mystery") is None

    def test_malformed(self):
        assert parse_tag("classic") is None
        assert parse_tag("") is None
        assert parse_tag(None) is None
        assert parse_tag("temporal/") is None

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_tag("  discipline/biology \n").value == "biology"


class TestDisplayDerivations:
    """Search value and chip label differ for genre tags."""

    def test_genre_search_value_is_third_segment(self):
        assert search_value("genre/fiction/mystery") == "mystery"

    def test_genre_chip_label_keeps_subtype(self):
        assert chip_label("genre/fiction/mystery") == "fiction/mystery"

    def test_flat_tag(self):
        assert search_value("temporal/20c") == "20c"
        assert chip_label("temporal/20c") == "20c"

    def test_extra_segments_on_flat_tag(self):
        assert search_value("regional/europe/france") == "europe"
        assert chip_label("regional/europe/france") == "europe/france"

    def test_unrecognised_dimension_still_has_display_values(self):
        assert search_value("mood/dark") == "dark"
        assert chip_label("mood/dark") == "dark"

    def test_malformed_has_no_display_values(self):
        assert search_value("classic") is None
        assert chip_label("classic") is None


class TestItemHelpers:
    def test_split_tags_trims_and_drops_blanks(self):
        assert split_tags(" temporal/20c , ,genre/fiction/mystery,") == [
            "temporal/20c",
            "genre/fiction/mystery",
        ]
        assert split_tags("") == []
        assert split_tags(None) == []

    def test_search_values(self):
        assert search_values("temporal/20c, classic, genre/fiction/mystery") == [
            "20c",
            "mystery",
        ]

    def test_tag_chips_carry_dimension(self):
        chips = tag_chips("temporal/20c, genre/nonfiction/history, mood/dark, classic")
        assert [(c.label, c.dimension) for c in chips] == [
            ("20c", "temporal"),
            ("nonfiction/history", "genre-nonfiction"),
            ("dark", None),
        ]
