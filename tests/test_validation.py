"""
Tests for request validation (bodies, ids, query strings).
"""

import pytest

from paperhub.api.errors import RequestValidationFailed
from paperhub.api.validation import (
    parse_author_query,
    parse_paper_query,
    parse_resource_id,
    validate_author_input,
    validate_paper_input,
)

VALID_PAPER = {
    "title": "T",
    "publishedIn": "V",
    "year": 2024,
    "authors": [{"name": "A"}],
}


class TestValidatePaperInput:

    def test_valid_body_has_no_errors(self):
        assert validate_paper_input(VALID_PAPER) == []

    def test_empty_body_reports_all_four_in_order(self):
        assert validate_paper_input({}) == [
            "Title is required",
            "Published venue is required",
            "Published year is required",
            "At least one author is required",
        ]

    def test_non_object_body_is_treated_as_empty(self):
        assert len(validate_paper_input(None)) == 4
        assert len(validate_paper_input(["x"])) == 4

    def test_blank_strings_count_as_missing(self):
        body = dict(VALID_PAPER, title="   ", publishedIn="\t")
        assert validate_paper_input(body) == [
            "Title is required",
            "Published venue is required",
        ]

    def test_null_year_is_missing(self):
        body = dict(VALID_PAPER, year=None)
        assert validate_paper_input(body) == ["Published year is required"]

    @pytest.mark.parametrize(
        "year",
        [1900, 1899, 0, -5, "1901a", "2020", 2020.5, True, 2**31, 10**20, 1e20],
    )
    def test_invalid_years(self, year):
        body = dict(VALID_PAPER, year=year)
        assert validate_paper_input(body) == ["Valid year after 1900 is required"]

    @pytest.mark.parametrize("year", [1901, 2024, 2024.0])
    def test_valid_years(self, year):
        assert validate_paper_input(dict(VALID_PAPER, year=year)) == []

    @pytest.mark.parametrize("authors", [None, [], "John Doe", {"name": "A"}])
    def test_missing_or_empty_authors(self, authors):
        body = dict(VALID_PAPER, authors=authors)
        assert validate_paper_input(body) == ["At least one author is required"]

    def test_author_name_error_reported_once(self):
        body = dict(VALID_PAPER, authors=[{"name": "ok"}, {"email": "x@mail.com"}, {"name": ""}])
        assert validate_paper_input(body) == ["Author name is required"]

    def test_non_object_author_needs_a_name(self):
        body = dict(VALID_PAPER, authors=["Jane"])
        assert validate_paper_input(body) == ["Author name is required"]

    def test_errors_accumulate_across_fields(self):
        body = {"publishedIn": "V", "year": 1900, "authors": [{"name": " "}]}
        assert validate_paper_input(body) == [
            "Title is required",
            "Valid year after 1900 is required",
            "Author name is required",
        ]


class TestValidateAuthorInput:

    def test_valid(self):
        assert validate_author_input({"name": "Jane"}) == []

    @pytest.mark.parametrize("body", [{}, {"name": None}, {"name": "  "}, {"name": 42}, None])
    def test_name_required(self, body):
        assert validate_author_input(body) == ["Name is required"]


class TestParseResourceId:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (" 7 ", 7), ("+5", 5)])
    def test_positive_integers(self, raw, expected):
        assert parse_resource_id(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("2.0", 2), ("1e3", 1000), ("1.50e1", 15)])
    def test_numeric_strings_with_integer_value(self, raw, expected):
        assert parse_resource_id(raw) == expected

    def test_largest_integer_column_value(self):
        assert parse_resource_id("2147483647") == 2147483647

    @pytest.mark.parametrize(
        "raw",
        ["abc", "-1", "0", "1a", "1.5", "", "1e-3", "0x10", "nan", "inf"],
    )
    def test_rejected(self, raw):
        with pytest.raises(RequestValidationFailed) as exc:
            parse_resource_id(raw)
        assert exc.value.message == "Invalid ID format"

    @pytest.mark.parametrize("raw", ["2147483648", "99999999999999999999", "1e400", "1e99999999"])
    def test_out_of_range_rejected(self, raw):
        with pytest.raises(RequestValidationFailed) as exc:
            parse_resource_id(raw)
        assert exc.value.message == "Invalid ID format"


class TestParseQueries:

    def test_paper_defaults(self):
        query = parse_paper_query()
        assert query.year is None
        assert query.published_in is None
        assert query.limit == 10
        assert query.offset == 0

    def test_paper_values(self):
        query = parse_paper_query(year="2024", published_in="icse", limit="100", offset="0")
        assert (query.year, query.published_in, query.limit, query.offset) == (2024, "icse", 100, 0)

    def test_empty_strings_fall_back_to_defaults(self):
        query = parse_paper_query(year="", published_in="", limit="", offset="")
        assert query.year is None
        assert query.published_in is None
        assert query.limit == 10
        assert query.offset == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"year": "1900"},
            {"year": "abc"},
            {"limit": "0"},
            {"limit": "101"},
            {"limit": "ten"},
            {"offset": "-1"},
            {"offset": "1.5"},
            {"offset": "99999999999999999999"},
            {"year": "99999999999999999999"},
            {"limit": "99999999999999999999"},
        ],
    )
    def test_paper_rejected(self, kwargs):
        with pytest.raises(RequestValidationFailed) as exc:
            parse_paper_query(**kwargs)
        assert exc.value.message == "Invalid query parameter format"

    def test_numeric_strings_with_integer_value(self):
        query = parse_paper_query(year="2024.0", limit="1.0", offset="2e1")
        assert (query.year, query.limit, query.offset) == (2024, 1, 20)

    def test_author_values(self):
        query = parse_author_query(name="jOh", affiliation="mit", limit="1", offset="1")
        assert (query.name, query.affiliation, query.limit, query.offset) == ("jOh", "mit", 1, 1)

    def test_author_rejected(self):
        with pytest.raises(RequestValidationFailed):
            parse_author_query(offset="-1")
