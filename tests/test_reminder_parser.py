"""Tests for reminder time parsing, validation and formatting."""

from datetime import datetime

import pytest

from domains.errors import ScheduleValidationError
from domains.reminders.parser import (
    MISSING_FIELDS_MESSAGE,
    current_time_key,
    format_time_12h,
    normalize_time,
    parse_time,
    time_options,
    validate_event_input,
)


class TestParseTime:

    @pytest.mark.parametrize("value,expected", [
        ("09:00", (9, 0)),
        ("9:05", (9, 5)),
        ("23:59", (23, 59)),
        (" 00:00 ", (0, 0)),
    ])
    def test_valid_times(self, value, expected):
        assert parse_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "9", "9:5", "", "12:00:00"])
    def test_invalid_times(self, value):
        with pytest.raises(ScheduleValidationError):
            parse_time(value)

    def test_normalize_pads_hour(self):
        assert normalize_time("7:30") == "07:30"


class TestValidateEventInput:

    def test_trims_and_normalizes(self):
        assert validate_event_input("8:15", "  Stretch  ", " legs ") == ("08:15", "Stretch", "legs")

    def test_description_optional(self):
        assert validate_event_input("08:15", "Stretch") == ("08:15", "Stretch", "")

    @pytest.mark.parametrize("time_str,title", [
        ("", "Stretch"),
        (None, "Stretch"),
        ("08:15", ""),
        ("08:15", "   "),
        ("08:15", None),
    ])
    def test_missing_fields(self, time_str, title):
        with pytest.raises(ScheduleValidationError) as exc:
            validate_event_input(time_str, title)
        assert str(exc.value) == MISSING_FIELDS_MESSAGE

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_event_input("99:99", "Stretch")


class TestFormatting:

    @pytest.mark.parametrize("value,expected", [
        ("00:00", "12:00 AM"),
        ("09:05", "9:05 AM"),
        ("12:00", "12:00 PM"),
        ("13:30", "1:30 PM"),
        ("23:59", "11:59 PM"),
    ])
    def test_format_12h(self, value, expected):
        assert format_time_12h(value) == expected

    def test_current_time_key(self):
        assert current_time_key(datetime(2026, 10, 19, 7, 4, 59)) == "07:04"

    def test_time_options_half_hours(self):
        options = time_options()
        assert options[0] == "06:00"
        assert options[1] == "06:30"
        assert options[-1] == "23:30"
        assert len(options) == 36
