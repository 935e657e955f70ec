"""
Tests for lenient input normalization.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from trading_journal.schemas.normalized import (
    parse_decimal,
    parse_optional_decimal,
    parse_optional_int,
    parse_optional_text,
    parse_text,
    parse_timestamp,
    quantize,
)

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _now():
    return NOW


class TestParseDecimal:

    @pytest.mark.parametrize("raw,expected", [
        ("1.0850", Decimal("1.0850")),
        (" 42 ", Decimal("42")),
        (3, Decimal("3")),
        (1.5, Decimal("1.5")),
        (Decimal("-0.25"), Decimal("-0.25")),
    ])
    def test_parses_valid_input(self, raw, expected):
        parsed = parse_decimal(raw)
        assert parsed.value == expected
        assert parsed.defaulted is False

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "NaN", "inf", True, {"a": 1}, [1]])
    def test_falls_back_to_default(self, raw):
        parsed = parse_decimal(raw)
        assert parsed.value == Decimal("0")
        assert parsed.defaulted is True

    def test_custom_default(self):
        assert parse_decimal("oops", default=Decimal("7")).value == Decimal("7")

    def test_rounds_to_places(self):
        assert parse_decimal("1.123456", places=5).value == Decimal("1.12346")

    def test_quantize_rounds_half_up(self):
        assert quantize(Decimal("2.345"), 2) == Decimal("2.35")
        assert quantize(Decimal("-2.345"), 2) == Decimal("-2.35")

    def test_integer_digits_beyond_column_are_defaulted(self):
        assert parse_decimal("100000", places=5, max_digits=18) == (Decimal("100000.00000"), False)
        assert parse_decimal(10**13, places=5, max_digits=18) == (Decimal("0"), True)
        assert parse_decimal("9999999999999.99999", places=5, max_digits=18).defaulted is False

    def test_huge_integer_is_defaulted(self):
        assert parse_decimal(10**400, places=5).defaulted is True


class TestParseOptionalDecimal:

    def test_absent_is_not_defaulted(self):
        assert parse_optional_decimal(None) == (None, False)
        assert parse_optional_decimal("  ") == (None, False)

    def test_garbage_is_none_and_flagged(self):
        assert parse_optional_decimal("n/a") == (None, True)

    def test_out_of_range_is_none_and_flagged(self):
        assert parse_optional_decimal("1e20", places=5, max_digits=18) == (None, True)

    def test_valid(self):
        assert parse_optional_decimal("1.2") == (Decimal("1.2"), False)


class TestParseOptionalInt:

    @pytest.mark.parametrize("raw,expected", [(12, 12), ("12", 12), (12.0, 12), (" 7 ", 7), (2**31 - 1, 2**31 - 1)])
    def test_valid(self, raw, expected):
        assert parse_optional_int(raw) == (expected, False)

    @pytest.mark.parametrize("raw", ["abc", 1.5, True, 2**31, -(2**31) - 1, 10**20, "100000000000000000000"])
    def test_invalid(self, raw):
        assert parse_optional_int(raw) == (None, True)

    def test_absent(self):
        assert parse_optional_int(None) == (None, False)
        assert parse_optional_int("") == (None, False)


class TestParseTimestamp:

    def test_iso_with_z_suffix(self):
        parsed = parse_timestamp("2024-03-01T10:30:00Z", _now)
        assert parsed.value == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        assert parsed.defaulted is False

    def test_iso_with_offset_is_converted_to_utc(self):
        parsed = parse_timestamp("2024-03-01T10:30:00+02:00", _now)
        assert parsed.value == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)

    def test_naive_iso_is_utc(self):
        parsed = parse_timestamp("2024-03-01 10:30:00", _now)
        assert parsed.value.tzinfo == timezone.utc
        assert parsed.value.hour == 10

    def test_epoch_seconds(self):
        parsed = parse_timestamp(1709290800, _now)
        assert parsed.value == datetime(2024, 3, 1, 11, 0, tzinfo=timezone.utc)

    def test_epoch_milliseconds(self):
        parsed = parse_timestamp("1709290800000", _now)
        assert parsed.value == datetime(2024, 3, 1, 11, 0, tzinfo=timezone.utc)

    def test_aware_datetime_passthrough(self):
        value = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        parsed = parse_timestamp(value, _now)
        assert parsed.value == datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", [None, "", "yesterday", "{{timenow}}", True, {"t": 1}, 10**400, "9" * 400, float("inf")])
    def test_unparseable_uses_now(self, raw):
        parsed = parse_timestamp(raw, _now)
        assert parsed.value == NOW
        assert parsed.defaulted is True


class TestParseText:

    def test_strips(self):
        assert parse_text("  EURUSD ", "UNKNOWN") == ("EURUSD", False)

    @pytest.mark.parametrize("raw", [None, "", "   ", {"x": 1}, []])
    def test_default(self, raw):
        assert parse_text(raw, "UNKNOWN") == ("UNKNOWN", True)

    def test_non_string_is_stringified(self):
        assert parse_text(123, "x") == ("123", False)

    def test_truncates_and_flags(self):
        parsed = parse_text("A" * 30, "x", max_length=20)
        assert parsed.value == "A" * 20
        assert parsed.defaulted is True

    def test_optional_text(self):
        assert parse_optional_text(None) is None
        assert parse_optional_text("  ") is None
        assert parse_optional_text(" note ") == "note"
