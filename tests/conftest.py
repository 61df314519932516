"""Shared fixtures: panel users, logged-in clients and in-memory workbooks."""

from __future__ import annotations

from io import BytesIO

import openpyxl
import pytest

MODEL_BACKEND = "django.contrib.auth.backends.ModelBackend"

ADMIN_HEADERS = ["Phone No", "Name", "Address", "Paid", "Product", "Prize Amount:", "Date:", "Status"]


# ---------------------------------------------------------------------------
# Workbooks
# ---------------------------------------------------------------------------

def build_xlsx(headers, rows) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(list(headers))
    for row in rows:
        ws.append(list(row))
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def make_xlsx():
    return build_xlsx


@pytest.fixture
def winner_row():
    """One complete spreadsheet row under the admin headers."""

    def _row(phone="9876543210", name="Asha Rao", status="Approved"):
        return [phone, name, "12 MG Road, Pune", "Yes", "Maruti XL6", "1480000", "2024-01-01", status]

    return _row


# ---------------------------------------------------------------------------
# Users and clients
# ---------------------------------------------------------------------------

@pytest.fixture
def panel_admin(db, django_user_model):
    return django_user_model.objects.create_user(
        username="panel", password="Str0ng-pass-123", email="panel@example.com", is_staff=True
    )


@pytest.fixture
def panel_client(client, panel_admin):
    client.force_login(panel_admin, backend=MODEL_BACKEND)
    return client


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_api_client(api_client, panel_admin):
    api_client.force_login(panel_admin, backend=MODEL_BACKEND)
    return api_client


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@pytest.fixture
def make_winner(db):
    from winners.models import Winner

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        data = {
            "external_id": f"ID{n:04d}",
            "wcode": f"WC{n:04d}",
            "phone": f"98765{n:05d}",
            "name": f"Winner {n}",
            "address": "Main Road",
            "paid": "Yes",
            "product": "Swift Dzire",
            "prize_amount": "930000",
            "date": "2024-01-01",
            "status": Winner.STATUS_APPROVED,
        }
        data.update(overrides)
        return Winner.objects.create(**data)

    return _make
