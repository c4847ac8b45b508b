"""Workbook readers rendering every sheet as a CSV grid."""

import csv
import io
from collections.abc import Iterable
from datetime import date, datetime, time

import openpyxl
import xlrd
from xlrd.sheet import Sheet

from invoice_dashboard.ingestion.base import BaseTextReader
from invoice_dashboard.ingestion.exceptions import DocumentReadError


def format_cell(value: object) -> str:
    """Render a single cell the way a spreadsheet would display it in CSV."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time():
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def render_grid(rows: Iterable[Iterable[object]]) -> str:
    """Render rows as comma-delimited text, one line per row."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in rows:
        writer.writerow([format_cell(value) for value in row])
    return buf.getvalue().removesuffix("\n")


def render_workbook(sheets: Iterable[tuple[str, Iterable[Iterable[object]]]]) -> str:
    """Concatenate ``Sheet: <name>`` sections in workbook order."""
    text = "".join(f"Sheet: {name}\n{render_grid(rows)}\n\n" for name, rows in sheets)
    return text.rstrip()


class XlsxReader(BaseTextReader):
    """Reads Office Open XML workbooks with openpyxl."""

    def read(self, data: bytes) -> str:
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
        except Exception as exc:
            raise DocumentReadError(f"openpyxl could not open workbook: {exc}") from exc
        try:
            return render_workbook(
                (sheet.title, sheet.iter_rows(values_only=True))
                for sheet in workbook.worksheets
            )
        finally:
            workbook.close()


class XlsReader(BaseTextReader):
    """Reads legacy BIFF (.xls) workbooks with xlrd."""

    def read(self, data: bytes) -> str:
        try:
            book = xlrd.open_workbook(file_contents=data)
        except Exception as exc:
            raise DocumentReadError(f"xlrd could not open workbook: {exc}") from exc
        return render_workbook(
            (sheet.name, self._sheet_rows(sheet, book.datemode))
            for sheet in book.sheets()
        )

    @staticmethod
    def _sheet_rows(sheet: Sheet, datemode: int) -> Iterable[list[object]]:
        for index in range(sheet.nrows):
            row: list[object] = []
            for cell in sheet.row(index):
                if cell.ctype == xlrd.XL_CELL_DATE:
                    row.append(xlrd.xldate_as_datetime(cell.value, datemode))
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    row.append(bool(cell.value))
                elif cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
                    row.append(None)
                else:
                    row.append(cell.value)
            yield row
