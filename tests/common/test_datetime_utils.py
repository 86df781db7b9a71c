from datetime import date, datetime

import pytest

from attendance_tracker.common.datetime_utils import parse_iso_date, parse_iso_datetime
from attendance_tracker.core.exceptions import ValidationError

def test_offset_timestamp_is_converted_to_local_time():
    assert parse_iso_datetime("2024-05-02T03:30:00+00:00", tz_name="Asia/Kolkata") == datetime(2024, 5, 2, 9, 0)
    assert parse_iso_datetime("2024-05-02T09:00:00+05:30", tz_name="Asia/Kolkata") == datetime(2024, 5, 2, 9, 0)


def test_naive_timestamp_and_bare_time_are_kept():
    assert parse_iso_datetime("2024-05-02 09:15:00", tz_name="Asia/Kolkata") == datetime(2024, 5, 2, 9, 15)
    assert parse_iso_datetime("09:15", work_date=date(2024, 5, 2)) == datetime(2024, 5, 2, 9, 15)


def test_invalid_values():
    with pytest.raises(ValidationError):
        parse_iso_datetime("quarter past nine", work_date=date(2024, 5, 2))
    with pytest.raises(ValidationError):
        parse_iso_date("02/05/2024")

