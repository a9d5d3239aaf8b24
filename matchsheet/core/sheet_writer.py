"""Output sinks for the finished grid.

Rows and columns are 0-based here; XlsxSink shifts them to the 1-based
coordinates openpyxl uses.
"""

import csv
import re
from abc import ABC, abstractmethod

from openpyxl import Workbook

from .errors import PersistenceError
from .models import SHEET_TITLE

# Excel/openpyxl rejects control chars: 0x00-0x08, 0x0B-0x0C, 0x0E-0x1F
_ILLEGAL_XLSX_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


class ReportSink(ABC):
    @abstractmethod
    def create_row(self) -> int:
        """Start a new row and return its index."""

    @abstractmethod
    def set_cell(self, row: int, column: int, value=None) -> None:
        """Write one cell. None creates an empty cell."""

    @abstractmethod
    def save(self, path: str) -> None:
        """Persist the grid to path. Raises PersistenceError on failure."""


class GridSink(ReportSink):
    """Keep the grid in memory as a list of rows.

    Unwritten gaps inside a row read as ''.
    """

    def __init__(self):
        self.rows: list[list] = []
        self.saved_path = None

    def create_row(self) -> int:
        self.rows.append([])
        return len(self.rows) - 1

    def set_cell(self, row: int, column: int, value=None) -> None:
        cells = self.rows[row]
        if len(cells) <= column:
            cells.extend([''] * (column + 1 - len(cells)))
        cells[column] = '' if value is None else value

    def save(self, path: str) -> None:
        self.saved_path = path


class CsvSink(GridSink):
    """Write the grid as a CSV file."""

    def save(self, path: str) -> None:
        try:
            with open(path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerows(self.rows)
        except OSError as e:
            raise PersistenceError(path, str(e)) from e
        self.saved_path = path


class XlsxSink(ReportSink):
    """Write the grid to a single-sheet Excel workbook."""

    def __init__(self, sheet_title: str = SHEET_TITLE):
        self.workbook = Workbook()
        self.sheet = self.workbook.active
        self.sheet.title = sheet_title
        self._row_count = 0

    def create_row(self) -> int:
        self._row_count += 1
        return self._row_count - 1

    def set_cell(self, row: int, column: int, value=None) -> None:
        cell = self.sheet.cell(row=row + 1, column=column + 1)
        if isinstance(value, str):
            value = _ILLEGAL_XLSX_RE.sub('', value)
        if value is not None and value != '':
            cell.value = value

    def save(self, path: str) -> None:
        try:
            self.workbook.save(path)
        except OSError as e:
            raise PersistenceError(path, str(e)) from e
