from __future__ import annotations

import io

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..core.constants import REPORT_SHEET_NAME, REPORT_TOTAL_LABEL
from .matrix import Matrix, MatrixCell

FIXED_COLUMNS = [("AM", 10), ("Surname", 20), ("Name", 20), ("Department", 15)]
DAY_COLUMN_WIDTH = 5

EMPLOYMENT_BLOCKED_FILL = PatternFill(fill_type="solid", fgColor="FFBFBFBF")
NON_WORKING_DAY_FILL = PatternFill(fill_type="solid", fgColor="FFD3D3D3")
TOTAL_FILL = PatternFill(fill_type="solid", fgColor="FFE6F4EA")

HEADER_FONT = Font(bold=True)
DAY_HEADER_ALIGNMENT = Alignment(textRotation=90, vertical="center", horizontal="center")
CENTER = Alignment(horizontal="center", vertical="center")


def _cell_fill(cell: MatrixCell) -> PatternFill | None:
    if cell.employment_blocked:
        return EMPLOYMENT_BLOCKED_FILL
    if cell.weekend or cell.holiday:
        return NON_WORKING_DAY_FILL
    return None


def _to_frame(matrix: Matrix, *, include_totals: bool) -> pd.DataFrame:
    columns = [name for name, _ in FIXED_COLUMNS] + matrix.day_keys
    records: list[list[object]] = []
    for row in matrix.rows:
        records.append([row.am, row.surname, row.name, row.department] + [c.code for c in row.cells])
    if include_totals:
        records.append([REPORT_TOTAL_LABEL, "", "", ""] + list(matrix.on_site_totals))
    return pd.DataFrame(records, columns=columns, dtype=object)


def render_matrix_xlsx(matrix: Matrix, *, include_totals: bool = True) -> bytes:
    """Render the matrix as an .xlsx workbook.

    The whole workbook is written to memory first; callers never see a
    partial file if styling or serialization fails.
    """

    df = _to_frame(matrix, include_totals=include_totals)
    first_day_col = len(FIXED_COLUMNS) + 1

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=REPORT_SHEET_NAME, index=False)
        ws = writer.sheets[REPORT_SHEET_NAME]

        for col, (_, width) in enumerate(FIXED_COLUMNS, start=1):
            ws.column_dimensions[get_column_letter(col)].width = width
        for offset in range(len(matrix.days)):
            ws.column_dimensions[get_column_letter(first_day_col + offset)].width = DAY_COLUMN_WIDTH

        for col in range(1, len(df.columns) + 1):
            header = ws.cell(row=1, column=col)
            header.font = HEADER_FONT
            if col >= first_day_col:
                header.alignment = DAY_HEADER_ALIGNMENT

        for row_idx, row in enumerate(matrix.rows, start=2):
            for offset, cell in enumerate(row.cells):
                target = ws.cell(row=row_idx, column=first_day_col + offset)
                target.alignment = CENTER
                fill = _cell_fill(cell)
                if fill is not None:
                    target.fill = fill

        if include_totals:
            total_row = len(matrix.rows) + 2
            for col in range(1, len(df.columns) + 1):
                target = ws.cell(row=total_row, column=col)
                target.font = HEADER_FONT
                if col >= first_day_col:
                    target.alignment = CENTER
                    target.fill = TOTAL_FILL

    return out.getvalue()
