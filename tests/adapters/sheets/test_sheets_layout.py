from __future__ import annotations

from datetime import datetime

import pytest

from redasync.adapters.sheets.layout import (
    LAST_COLUMN,
    column_letter,
    data_range,
    format_query_timestamp,
)


@pytest.mark.parametrize(("index", "letter"), [(1, "A"), (9, "I"), (26, "Z"), (27, "AA")])
def test_column_letter(index: int, letter: str) -> None:
    assert column_letter(index) == letter


def test_range_spans_nine_columns() -> None:
    assert LAST_COLUMN == "I"
    assert data_range("MooD 08", 0) == "'MooD 08'!A1:I1"


def test_query_timestamp_format() -> None:
    assert format_query_timestamp(datetime(2025, 10, 13, 14, 7, 9)) == "13/10/2025, 14:07:09"


def test_query_timestamp_does_not_pad_day_month_or_hour() -> None:
    assert format_query_timestamp(datetime(2025, 1, 6, 0, 0, 5)) == "6/1/2025, 0:00:05"
