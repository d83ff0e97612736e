"""
Feed Parser Tests - Unit Tests for the CNB Daily Feed Parser

Covers the line tokenizer, header date parser, column index resolver,
row decoder and the orchestrating parse_daily_feed, including the
two-tier failure policy (structural errors empty the whole feed,
malformed rows are dropped individually).

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cnbrates.application.feed_parser (functions under test)
- cnbrates.domain (models and errors)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Expected publication dates

from cnbrates.application.feed_parser import (
    decode_row,
    parse_daily_feed,
    parse_header_date,
    parse_number,
    resolve_column_indexes,
    split_lines,
)
from cnbrates.domain.errors import InvalidDateFormat, MissingHeaders
from cnbrates.domain.models import ColumnIndexes, FeedResponse, RateRecord

STANDARD_INDEXES = ColumnIndexes(country=0, currency=1, amount=2, code=3, rate=4)


class TestSplitLines:
    def test_lf_and_crlf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_blank_lines_dropped(self):
        assert split_lines("a\n\n\nb\n\n") == ["a", "b"]

    def test_lines_not_trimmed(self):
        assert split_lines("  a  \n b") == ["  a  ", " b"]

    def test_empty_text(self):
        assert split_lines("") == []


class TestParseHeaderDate:
    def test_with_comment(self):
        assert parse_header_date("15 Oct 2025 # Daily rates") == date(2025, 10, 15)

    def test_without_comment(self):
        assert parse_header_date("15 Oct 2025") == date(2025, 10, 15)

    def test_cnb_serial_comment(self):
        assert parse_header_date("03 Jan 2025 #2") == date(2025, 1, 3)

    def test_single_digit_day(self):
        assert parse_header_date("1 Feb 2024") == date(2024, 2, 1)

    def test_month_must_be_capitalised_abbreviation(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15 OCT 2025")
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15 oct 2025")

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("\u0661\u0665 Oct 2025")
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15 Oct \u0662\u0660\u0662\u0665")

    def test_surrounding_whitespace(self):
        assert parse_header_date("  15 Oct 2025   ") == date(2025, 10, 15)

    def test_bad_date(self):
        with pytest.raises(InvalidDateFormat, match="Invalid date format"):
            parse_header_date("BadDate 2025")

    def test_empty_line(self):
        with pytest.raises(InvalidDateFormat, match="Invalid date format"):
            parse_header_date("")

    def test_unknown_month(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15 Foo 2025")

    def test_impossible_calendar_date(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("31 Feb 2025")

    def test_leap_day(self):
        assert parse_header_date("29 Feb 2024") == date(2024, 2, 29)
        with pytest.raises(InvalidDateFormat):
            parse_header_date("29 Feb 2025")

    def test_trailing_characters_rejected(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15 Oct 2025 extra")

    def test_double_space_rejected(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("15  Oct 2025")

    def test_ambiguous_numeric_format_rejected(self):
        with pytest.raises(InvalidDateFormat):
            parse_header_date("10/11/2025")

    def test_token_kept_on_error(self):
        with pytest.raises(InvalidDateFormat) as exc_info:
            parse_header_date("2025-10-15 # iso")
        assert exc_info.value.token == "2025-10-15"


class TestResolveColumnIndexes:
    def test_standard_header(self):
        idx = resolve_column_indexes("Country|Currency|Amount|Code|Rate")
        assert idx == STANDARD_INDEXES

    def test_case_and_whitespace_insensitive(self):
        idx = resolve_column_indexes(" COUNTRY | currency|AmOuNt |code| Rate ")
        assert idx.country == 0
        assert idx.rate == 4

    def test_reordered_header(self):
        idx = resolve_column_indexes("Code|Rate|Country|Amount|Currency")
        assert idx == ColumnIndexes(country=2, currency=4, amount=3, code=0, rate=1)

    def test_extra_columns_allowed(self):
        idx = resolve_column_indexes("Country|Currency|Amount|Code|Rate|Note")
        assert idx == STANDARD_INDEXES

    def test_missing_rate(self):
        with pytest.raises(MissingHeaders, match="Missing required headers"):
            resolve_column_indexes("Country|Currency|Amount|Code")

    def test_reports_every_missing_column(self):
        with pytest.raises(MissingHeaders) as exc_info:
            resolve_column_indexes("Country|Currency|Rate")
        assert exc_info.value.missing == ("amount", "code")
        assert "amount, code" in str(exc_info.value)


class TestParseNumber:
    def test_plain_decimal(self):
        assert parse_number("23.500") == 23.5

    def test_decimal_comma(self):
        assert parse_number("23,500") == 23.5

    def test_integer(self):
        assert parse_number("100") == 100.0

    def test_rejects_garbage(self):
        assert parse_number("abc") is None
        assert parse_number("") is None
        assert parse_number("1.2.3") is None

    def test_rejects_non_finite(self):
        assert parse_number("inf") is None
        assert parse_number("nan") is None
        assert parse_number("1e999") is None

    def test_rejects_non_ascii_digits(self):
        assert parse_number("\u0662\u0663.\u0665") is None
        assert parse_number("\uff11\uff10\uff10") is None


class TestDecodeRow:
    def test_valid_row(self):
        record = decode_row(["Japan", "Yen", "100", "JPY", "15.800"], STANDARD_INDEXES)
        assert record == RateRecord(
            country="Japan", currency="Yen", amount=100.0, currency_code="JPY", rate=15.8
        )

    def test_blank_amount_defaults_to_one(self):
        record = decode_row(["United States", "Dollar", "", "USD", "23.500"], STANDARD_INDEXES)
        assert record is not None
        assert record.amount == 1.0

    def test_amount_out_of_range_defaults_to_one(self):
        idx = ColumnIndexes(country=0, currency=1, amount=9, code=2, rate=3)
        record = decode_row(["United States", "Dollar", "USD", "23.5"], idx)
        assert record is not None
        assert record.amount == 1.0

    def test_zero_amount_dropped(self):
        assert decode_row(["X", "Y", "0", "XXX", "1.0"], STANDARD_INDEXES) is None

    def test_negative_rate_dropped(self):
        assert decode_row(["X", "Y", "1", "XXX", "-1"], STANDARD_INDEXES) is None

    def test_empty_code_dropped(self):
        assert decode_row(["X", "Y", "1", "", "1.0"], STANDARD_INDEXES) is None

    def test_missing_rate_cell_dropped(self):
        assert decode_row(["X", "Y", "1", "XXX"], STANDARD_INDEXES) is None

    def test_non_numeric_rate_dropped(self):
        assert decode_row(["X", "Y", "1", "XXX", "n/a"], STANDARD_INDEXES) is None

    def test_decimal_comma_rate(self):
        record = decode_row(["Eurozone", "Euro", "1", "EUR", "24,355"], STANDARD_INDEXES)
        assert record is not None
        assert record.rate == pytest.approx(24.355)


class TestParseDailyFeed:
    def test_sample_feed(self, sample_daily_text):
        result = parse_daily_feed(sample_daily_text)
        assert result.date == "2025-10-15"
        assert len(result.rates) == 3
        jpy = next(r for r in result.rates if r.currency_code == "JPY")
        assert jpy.amount == 100
        assert jpy.rate == 15.8

    def test_preserves_feed_order(self, sample_daily_text):
        result = parse_daily_feed(sample_daily_text)
        assert [r.currency_code for r in result.rates] == ["USD", "EUR", "JPY"]

    def test_crlf_feed(self, sample_daily_text):
        result = parse_daily_feed(sample_daily_text.replace("\n", "\r\n"))
        assert result.date == "2025-10-15"
        assert len(result.rates) == 3

    def test_too_short_feed(self):
        assert parse_daily_feed("") == FeedResponse.empty()
        assert parse_daily_feed("15 Oct 2025\nCountry|Currency|Amount|Code|Rate\n\n") == FeedResponse.empty()

    def test_bad_header_date_empties_feed(self, sample_daily_text):
        text = sample_daily_text.replace("15 Oct 2025 # Daily rates", "BadDate 2025")
        assert parse_daily_feed(text) == FeedResponse(date="", rates=())

    def test_missing_rate_column_empties_feed(self, sample_daily_text):
        text = sample_daily_text.replace("Country|Currency|Amount|Code|Rate", "Country|Currency|Amount|Code")
        assert parse_daily_feed(text) == FeedResponse.empty()

    def test_malformed_rows_skipped_siblings_kept(self):
        text = (
            "15 Oct 2025 #1\n"
            "Country|Currency|Amount|Code|Rate\n"
            "Zero|Zero|0|ZZZ|1.0\n"
            "United States|Dollar|1|USD|23.500\n"
            "Negative|Neg|1|NEG|-1\n"
            "Nocode|None|1||2.0\n"
            "Japan|Yen|100|JPY|15.800\n"
        )
        result = parse_daily_feed(text)
        assert result.date == "2025-10-15"
        assert [r.currency_code for r in result.rates] == ["USD", "JPY"]

    def test_column_order_independence(self):
        standard = (
            "15 Oct 2025\n"
            "Country|Currency|Amount|Code|Rate\n"
            "United States|Dollar|1|USD|23.500\n"
            "Japan|Yen|100|JPY|15.800\n"
        )
        swapped = (
            "15 Oct 2025\n"
            "Rate|Code|Amount|Currency|Country\n"
            "23.500|USD|1|Dollar|United States\n"
            "15.800|JPY|100|Yen|Japan\n"
        )
        assert parse_daily_feed(standard) == parse_daily_feed(swapped)

    def test_row_with_non_ascii_digits_dropped(self):
        text = (
            "15 Oct 2025\n"
            "Country|Currency|Amount|Code|Rate\n"
            "US|Dollar|1|USD|\u0662\u0663.\u0665\n"
            "Japan|Yen|100|JPY|15.800\n"
        )
        result = parse_daily_feed(text)
        assert [r.currency_code for r in result.rates] == ["JPY"]

    def test_whitespace_only_rows_ignored(self, sample_daily_text):
        result = parse_daily_feed(sample_daily_text + "   \n\t\n")
        assert len(result.rates) == 3

    def test_idempotent(self, sample_daily_text):
        assert parse_daily_feed(sample_daily_text) == parse_daily_feed(sample_daily_text)

    def test_to_dict_shape(self, sample_daily_text):
        data = parse_daily_feed(sample_daily_text).to_dict()
        assert data["date"] == "2025-10-15"
        assert data["rates"][0] == {
            "country": "United States",
            "currency": "Dollar",
            "amount": 1,
            "currencyCode": "USD",
            "rate": 23.5,
        }
        assert isinstance(data["rates"][0]["amount"], int)

    def test_to_dict_keeps_fractional_amount(self):
        record = RateRecord(country="X", currency="Y", amount=0.5, currency_code="XXX", rate=2.0)
        assert record.to_dict()["amount"] == 0.5


class TestFeedResponse:
    def test_rates_without_date_rejected(self):
        record = RateRecord(country="X", currency="Y", amount=1.0, currency_code="XXX", rate=1.0)
        with pytest.raises(ValueError):
            FeedResponse(date="", rates=(record,))

    def test_empty(self):
        empty = FeedResponse.empty()
        assert empty.is_empty
        assert empty.to_dict() == {"date": "", "rates": []}
