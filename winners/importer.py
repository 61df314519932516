"""Bulk winner import.

Each row goes through the same four steps, one row at a time:

    normalize_row -> find_existing -> write_winner -> ImportResult

A failing row is recorded and skipped; it never stops the run and rows that
were already written are kept. The existence check and the write are two
separate queries, so phone duplicates from a concurrent writer can still slip
through. Duplicate external ids and winner codes are caught by the unique
constraints and reported as a per-row storage error instead.
"""
from __future__ import annotations

import datetime
import logging
import re
import secrets
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from .models import Winner
from .spreadsheet import read_rows

logger = logging.getLogger(__name__)

# Candidate headers per field, highest priority first.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "external_id": ("ID", "Id", "id"),
    "phone": ("Phone", "Phone No", "Mobile", "phone"),
    "name": ("Name", "FullName", "name"),
    "address": ("Address", "address"),
    "paid": ("Paid", "paid", "Amount"),
    "product": ("Product", "product"),
    "prize_amount": ("Prize Amount:", "Prize Amount", "PrizeAmount", "prizeAmount", "Amount"),
    "date": ("Date:", "Date", "date"),
    "status": ("Status", "status"),
    "wcode": ("W-Code", "WCode", "wcode"),
}

REQUIRED_FIELDS = ("phone", "name", "address", "paid", "product", "prize_amount", "date")

# Spreadsheet row 1 is the header, so row index 0 is what a person sees as row 2.
HEADER_ROW_OFFSET = 2

MISSING_FIELDS_REASON = "Missing required fields"

_NON_ALNUM = re.compile(r"[^0-9a-z]+")


class WinnerWriteError(Exception):
    """The store refused a new winner (validation, constraint or connectivity)."""


def _header_key(header) -> str:
    return _NON_ALNUM.sub("", str(header).lower())


def cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return str(value).strip()


def resolve_field(row: Mapping[str, Any], aliases: Iterable[str]) -> str:
    """First non-blank value among ``aliases``, falling back to a loose header match."""
    aliases = tuple(aliases)
    for key in aliases:
        text = cell_text(row.get(key))
        if text:
            return text
    loose = {}
    for header, value in row.items():
        loose.setdefault(_header_key(header), value)
    for key in aliases:
        text = cell_text(loose.get(_header_key(key)))
        if text:
            return text
    return ""


def placeholder_token() -> str:
    return secrets.token_hex(8).upper()


@dataclass
class WinnerCandidate:
    external_id: str
    phone: str
    name: str
    address: str
    paid: str
    product: str
    prize_amount: str
    date: str
    status: str
    wcode: str

    def missing_fields(self) -> list[str]:
        return [f for f in REQUIRED_FIELDS if not getattr(self, f)]

    def as_model_kwargs(self) -> dict[str, str]:
        return {
            "external_id": self.external_id,
            "phone": self.phone,
            "name": self.name,
            "address": self.address,
            "paid": self.paid,
            "product": self.product,
            "prize_amount": self.prize_amount,
            "date": self.date,
            "status": self.status,
            "wcode": self.wcode,
        }


def normalize_row(row: Mapping[str, Any], index: int, default_status: str = Winner.STATUS_ACTIVE) -> WinnerCandidate:
    values = {name: resolve_field(row, aliases) for name, aliases in FIELD_ALIASES.items()}
    if not values["external_id"]:
        values["external_id"] = f"AUTO_{placeholder_token()}_{index}"
    if not values["wcode"]:
        values["wcode"] = f"W{placeholder_token()}{index}"
    if not values["status"]:
        values["status"] = default_status
    return WinnerCandidate(**values)


def find_existing(candidate: WinnerCandidate) -> Winner | None:
    return (
        Winner.objects.matching_keys(candidate.phone, candidate.external_id, candidate.wcode)
        .order_by("pk")
        .first()
    )


def write_winner(candidate: WinnerCandidate) -> Winner:
    winner = Winner(is_active=True, **candidate.as_model_kwargs())
    try:
        with transaction.atomic():
            # status is free text on import: length is checked, choices are not
            winner.full_clean(exclude=["status"])
            Winner._meta.get_field("status").run_validators(winner.status)
            winner.save(force_insert=True)
    except ValidationError as e:
        raise WinnerWriteError("; ".join(e.messages)) from e
    except DatabaseError as e:
        raise WinnerWriteError(str(e)) from e
    return winner


@dataclass
class ImportResult:
    imported_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    total_rows: int = 0
    empty: bool = False
    error_limit: int = 1000

    def record_success(self) -> None:
        self.imported_count += 1

    def record_error(self, index: int, reason: str) -> None:
        self.error_count += 1
        if len(self.errors) < self.error_limit:
            self.errors.append(f"Row {index + HEADER_ROW_OFFSET}: {reason}")

    @property
    def processed(self) -> int:
        return self.imported_count + self.error_count

    def as_dict(self) -> dict[str, Any]:
        return {
            "importedCount": self.imported_count,
            "errorCount": self.error_count,
            "errors": list(self.errors),
            "totalRows": self.total_rows,
        }

    def summary_message(self) -> str:
        message = f"Upload completed: {self.imported_count} winners added successfully"
        if self.error_count > 0:
            message += f", {self.error_count} errors occurred"
        return message

    def error_detail(self, limit: int = 10) -> str | None:
        """Joined error list, or None when there is nothing or too much to show.

        A list cut short by ``error_limit`` is never shown as if complete.
        """
        if not self.errors or self.error_count > limit or self.error_count > len(self.errors):
            return None
        return "Errors: " + "; ".join(self.errors)


def import_rows(rows: Iterable[Mapping[str, Any]], default_status: str = Winner.STATUS_ACTIVE) -> ImportResult:
    rows = list(rows)
    result = ImportResult(
        total_rows=len(rows),
        error_limit=getattr(settings, "IMPORT_ERROR_LIST_LIMIT", 1000),
    )
    if not rows:
        result.empty = True
        return result

    for index, row in enumerate(rows):
        candidate = normalize_row(row, index, default_status)

        if candidate.missing_fields():
            result.record_error(index, MISSING_FIELDS_REASON)
            continue

        try:
            existing = find_existing(candidate)
        except DatabaseError as e:
            logger.exception("Existence check failed for import row %d", index + HEADER_ROW_OFFSET)
            result.record_error(index, str(e))
            continue
        if existing is not None:
            result.record_error(index, f"Winner already exists (Phone: {candidate.phone})")
            continue

        try:
            write_winner(candidate)
        except WinnerWriteError as e:
            logger.warning("Import row %d rejected by store: %s", index + HEADER_ROW_OFFSET, e)
            result.record_error(index, str(e))
            continue
        result.record_success()

    logger.info(
        "Winner import finished: %d rows, %d imported, %d errors",
        result.total_rows,
        result.imported_count,
        result.error_count,
    )
    return result


def import_workbook(content: bytes, filename: str, default_status: str = Winner.STATUS_ACTIVE) -> ImportResult:
    """Decode an uploaded workbook and import its rows; SpreadsheetError propagates."""
    return import_rows(read_rows(content, filename), default_status)
