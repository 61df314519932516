"""Spreadsheet decoding for winner imports.

Only the first worksheet is read. Row 1 holds the column headers; every
following non-blank row becomes a ``{header: value}`` mapping with blank
cells left out, so the importer can treat "missing column" and "empty cell"
the same way.
"""
import logging
from io import BytesIO
from pathlib import Path

import openpyxl
import xlrd

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".xlsx", ".xls")
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

TEMPLATE_SHEET = "Winners"
TEMPLATE_ROWS = [
    {
        "Phone No": "9876543210",
        "Name": "John Doe",
        "Address": "123 Main Street, City, State",
        "Paid": "Yes",
        "Product": "Lucky Draw Prize",
        "Prize Amount:": "1000",
        "Date:": "2024-01-01",
        "Status": "Approved",
    }
]


class SpreadsheetError(Exception):
    """The uploaded bytes could not be decoded as a workbook."""


def has_allowed_extension(filename) -> bool:
    return Path(filename or "").suffix.lower() in ALLOWED_EXTENSIONS


def _is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _rows_to_dicts(header_cells, body_rows):
    headers = [str(h).strip() if not _is_blank(h) else "" for h in header_cells]
    out = []
    for values in body_rows:
        row = {}
        for idx, value in enumerate(values):
            if idx >= len(headers) or not headers[idx] or _is_blank(value):
                continue
            row[headers[idx]] = value
        if row:
            out.append(row)
    return out


def _read_xlsx(content: bytes):
    wb = openpyxl.load_workbook(BytesIO(content), read_only=True, data_only=True)
    try:
        if not wb.worksheets:
            return []
        rows = wb.worksheets[0].iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            return []
        return _rows_to_dicts(header, rows)
    finally:
        wb.close()


def _xls_value(book, cell):
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate.xldate_as_datetime(cell.value, book.datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
        return None
    return cell.value


def _read_xls(content: bytes):
    book = xlrd.open_workbook(file_contents=content)
    if book.nsheets == 0:
        return []
    sheet = book.sheet_by_index(0)
    if sheet.nrows == 0:
        return []
    header = [_xls_value(book, c) for c in sheet.row(0)]
    body = (
        [_xls_value(book, c) for c in sheet.row(r)]
        for r in range(1, sheet.nrows)
    )
    return _rows_to_dicts(header, body)


def read_rows(content: bytes, filename: str = "") -> list[dict]:
    """Decode workbook bytes into header-keyed row mappings.

    ``filename`` only picks the reader; ``.xls`` goes through xlrd and
    everything else through openpyxl. Zero-byte content decodes to no rows;
    any other decoding failure is re-raised as :class:`SpreadsheetError`.
    """
    if not content:
        return []
    legacy = Path(filename or "").suffix.lower() == ".xls"
    try:
        rows = _read_xls(content) if legacy else _read_xlsx(content)
    except Exception as e:
        logger.warning("Could not decode spreadsheet %s: %s", filename or "<upload>", e)
        raise SpreadsheetError(str(e) or e.__class__.__name__) from e
    logger.debug("Decoded %d rows from %s", len(rows), filename or "<upload>")
    return rows


def build_template() -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = TEMPLATE_SHEET
    headers = list(TEMPLATE_ROWS[0].keys())
    ws.append(headers)
    for row in TEMPLATE_ROWS:
        ws.append([row.get(h, "") for h in headers])
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()
