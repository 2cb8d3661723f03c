"""Cell layout of a published project tab."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from redasync.domain.model import MergedRow

type CellValue = str | int | float
type SheetValues = list[list[CellValue]]

HEADER: Final[tuple[str, ...]] = (
    "Hora de consulta",
    "Proyecto",
    "Unidad",
    "Estatus",
    "m2",
    "Precio",
    "Fecha Bloqueo",
    "Fecha Formalización",
    "Valor Cobrado",
)


def column_letter(index: int) -> str:
    """Return the A1 column letter for a 1-based column index."""

    if index < 1:
        raise ValueError("Column index must be positive")
    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(65 + remainder) + letters
    return letters


LAST_COLUMN: Final[str] = column_letter(len(HEADER))


def quote_sheet_title(title: str) -> str:
    return "'" + title.replace("'", "''") + "'"


def data_range(title: str, row_count: int) -> str:
    """Range covering the header plus ``row_count`` data rows."""

    return f"{quote_sheet_title(title)}!A1:{LAST_COLUMN}{row_count + 1}"


def full_columns_range(title: str) -> str:
    return f"{quote_sheet_title(title)}!A:{LAST_COLUMN}"


def format_query_timestamp(value: datetime) -> str:
    return f"{value.day}/{value.month}/{value.year}, {value.hour}:{value:%M:%S}"


def row_values(row: MergedRow, *, queried_at: str) -> list[CellValue]:
    return [
        queried_at,
        row.project,
        row.unit_name,
        row.status,
        row.area,
        row.price,
        row.lock_date_display,
        row.formalized_date_display,
        row.amount_collected,
    ]


def build_sheet_values(rows: Sequence[MergedRow], *, queried_at: datetime) -> SheetValues:
    stamp = format_query_timestamp(queried_at)
    values: SheetValues = [list(HEADER)]
    values.extend(row_values(row, queried_at=stamp) for row in rows)
    return values
