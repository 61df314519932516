"""Admin panel: authentication, winners CRUD, uploads and prize updates."""

from __future__ import annotations

import pytest
from django.contrib.messages import get_messages
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from winners.models import Winner
from winners.spreadsheet import XLSX_CONTENT_TYPE

pytestmark = pytest.mark.django_db

ADMIN_HEADERS = ["Phone No", "Name", "Address", "Paid", "Product", "Prize Amount:", "Date:", "Status"]


def flashed(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


def xlsx_upload(content, name="winners.xlsx"):
    return SimpleUploadedFile(name, content, content_type=XLSX_CONTENT_TYPE)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class TestPanelAuth:
    @pytest.mark.parametrize(
        "name",
        ["winners:dashboard", "winners:list", "winners:upload", "banking:bank_details", "prizes:list", "accounts:settings"],
    )
    def test_anonymous_redirected_to_login(self, client, name):
        response = client.get(reverse(name))
        assert response.status_code == 302
        assert response.url == reverse("accounts:login")

    def test_login_page_renders(self, client):
        assert client.get(reverse("accounts:login")).status_code == 200

    def test_login_success(self, client, panel_admin):
        response = client.post(reverse("accounts:login"), {"username": "panel", "password": "Str0ng-pass-123"})
        assert response.status_code == 302
        assert response.url == reverse("winners:dashboard")
        assert "Login successful" in flashed(response)

    def test_login_wrong_password(self, client, panel_admin):
        response = client.post(reverse("accounts:login"), {"username": "panel", "password": "nope"})
        assert response.url == reverse("accounts:login")
        assert "Invalid username or password" in flashed(response)

    def test_login_missing_fields(self, client, db):
        response = client.post(reverse("accounts:login"), {"username": ""})
        assert "Username and password are required" in flashed(response)

    def test_non_staff_cannot_log_in(self, client, django_user_model):
        django_user_model.objects.create_user(username="shopper", password="Str0ng-pass-123")
        response = client.post(reverse("accounts:login"), {"username": "shopper", "password": "Str0ng-pass-123"})
        assert response.url == reverse("accounts:login")

    def test_logged_in_user_skips_login_page(self, panel_client):
        response = panel_client.get(reverse("accounts:login"))
        assert response.url == reverse("winners:dashboard")

    def test_logout(self, panel_client):
        panel_client.get(reverse("accounts:logout"))
        assert panel_client.get(reverse("winners:dashboard")).status_code == 302

    def test_panel_index_redirects_to_dashboard(self, panel_client):
        response = panel_client.get(reverse("winners:index"))
        assert response.url == reverse("winners:dashboard")


class TestSettings:
    def test_change_email(self, panel_client, panel_admin):
        response = panel_client.post(reverse("accounts:settings"), {"email": "new@example.com"})
        assert "Settings updated successfully" in flashed(response)
        panel_admin.refresh_from_db()
        assert panel_admin.email == "new@example.com"

    def test_password_change_needs_current(self, panel_client):
        response = panel_client.post(reverse("accounts:settings"), {"new_password": "An0ther-pass-456"})
        assert "Current password is required to change password" in flashed(response)

    def test_wrong_current_password(self, panel_client):
        response = panel_client.post(
            reverse("accounts:settings"),
            {"current_password": "wrong", "new_password": "An0ther-pass-456"},
        )
        assert "Current password is incorrect" in flashed(response)

    def test_password_change_keeps_session(self, panel_client, panel_admin):
        panel_client.post(
            reverse("accounts:settings"),
            {"current_password": "Str0ng-pass-123", "new_password": "An0ther-pass-456"},
        )
        panel_admin.refresh_from_db()
        assert panel_admin.check_password("An0ther-pass-456")
        assert panel_client.get(reverse("winners:dashboard")).status_code == 200


# ---------------------------------------------------------------------------
# Dashboard and winners list
# ---------------------------------------------------------------------------

class TestDashboard:
    def test_stats_and_recent(self, panel_client, make_winner):
        make_winner(status="Pending")
        make_winner(status="Approved")
        make_winner(status="Paid")
        make_winner(status="Paid", is_active=False)
        response = panel_client.get(reverse("winners:dashboard"))
        assert response.status_code == 200
        assert response.context["stats"] == {
            "totalWinners": 3,
            "pendingWinners": 1,
            "approvedWinners": 1,
            "paidWinners": 1,
        }
        assert len(response.context["recent_winners"]) == 3


class TestWinnerList:
    def test_paginates_by_twenty(self, panel_client, make_winner):
        for _ in range(25):
            make_winner()
        response = panel_client.get(reverse("winners:list"))
        assert len(response.context["winners"]) == 20
        response = panel_client.get(reverse("winners:list"), {"page": 2})
        assert len(response.context["winners"]) == 5

    def test_search_and_status(self, panel_client, make_winner):
        make_winner(name="Asha Rao", status="Paid")
        make_winner(name="Asha Iyer", status="Pending")
        make_winner(name="Ravi")
        response = panel_client.get(reverse("winners:list"), {"search": "asha", "status": "Paid"})
        assert [w.name for w in response.context["winners"]] == ["Asha Rao"]

    def test_create(self, panel_client):
        data = {
            "external_id": "X1",
            "wcode": "WX1",
            "name": "Asha",
            "phone": "9876543210",
            "address": "Pune",
            "paid": "Yes",
            "product": "XL6",
            "prize_amount": "1480000",
            "date": "2024-01-01",
            "status": "Approved",
        }
        response = panel_client.post(reverse("winners:list"), data)
        assert "Winner added successfully" in flashed(response)
        assert Winner.objects.get(wcode="WX1").status == "Approved"

    def test_create_missing_field(self, panel_client):
        response = panel_client.post(reverse("winners:list"), {"name": "Asha"})
        assert "All required fields must be filled" in flashed(response)
        assert not Winner.objects.exists()

    def test_create_duplicate(self, panel_client, make_winner):
        existing = make_winner()
        data = {
            "external_id": "NEW",
            "wcode": "WNEW",
            "name": "Other",
            "phone": existing.phone,
            "address": "Pune",
            "paid": "Yes",
            "product": "XL6",
            "prize_amount": "1",
            "date": "2024-01-01",
        }
        response = panel_client.post(reverse("winners:list"), data)
        assert "Winner with this phone number, W-Code, or ID already exists" in flashed(response)


class TestWinnerDelete:
    def test_soft_delete(self, panel_client, make_winner):
        w = make_winner()
        response = panel_client.post(reverse("winners:delete", args=[w.pk]))
        assert response.json() == {"success": True, "message": "Winner deleted successfully"}
        w.refresh_from_db()
        assert w.is_active is False

    def test_delete_verb(self, panel_client, make_winner):
        w = make_winner()
        response = panel_client.delete(reverse("winners:delete", args=[w.pk]))
        assert response.json()["success"] is True

    def test_missing_winner(self, panel_client):
        response = panel_client.post(reverse("winners:delete", args=[999]))
        assert response.json() == {"success": False, "message": "Winner not found"}

    def test_get_not_allowed(self, panel_client, make_winner):
        w = make_winner()
        assert panel_client.get(reverse("winners:delete", args=[w.pk])).status_code == 405


# ---------------------------------------------------------------------------
# Upload
# ---------------------------------------------------------------------------

class TestUpload:
    def test_page(self, panel_client):
        assert panel_client.get(reverse("winners:upload")).status_code == 200

    def test_no_file(self, panel_client):
        response = panel_client.post(reverse("winners:upload"), {})
        assert "Please select an Excel file to upload" in flashed(response)

    def test_wrong_extension(self, panel_client):
        upload = SimpleUploadedFile("winners.csv", b"a,b\n1,2\n", content_type="text/csv")
        response = panel_client.post(reverse("winners:upload"), {"excelFile": upload})
        assert "Only Excel files (.xlsx, .xls) are allowed" in flashed(response)

    def test_too_large(self, panel_client, settings, make_xlsx):
        settings.WINNER_IMPORT_MAX_UPLOAD_BYTES = 10
        upload = xlsx_upload(make_xlsx(ADMIN_HEADERS, []))
        response = panel_client.post(reverse("winners:upload"), {"excelFile": upload})
        assert any(m.startswith("File is larger than") for m in flashed(response))

    def test_imports_rows(self, panel_client, make_xlsx, winner_row):
        content = make_xlsx(ADMIN_HEADERS, [winner_row("9000000001"), winner_row("9000000002", status=None)])
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(content)})
        assert response.url == reverse("winners:upload")
        assert "Upload completed: 2 winners added successfully" in flashed(response)
        assert Winner.objects.get(phone="9000000002").status == "Active"

    def test_partial_import_reports_errors(self, panel_client, make_xlsx, winner_row):
        bad = winner_row("9000000002")
        bad[2] = None
        content = make_xlsx(ADMIN_HEADERS, [winner_row("9000000001"), bad])
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(content)})
        messages = flashed(response)
        assert "Upload completed: 1 winners added successfully, 1 errors occurred" in messages
        assert "Errors: Row 3: Missing required fields" in messages

    def test_nothing_imported(self, panel_client, make_xlsx, winner_row, make_winner):
        make_winner(phone="9000000001")
        content = make_xlsx(ADMIN_HEADERS, [winner_row("9000000001")])
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(content)})
        assert "No winners were added. Please check your Excel file format." in flashed(response)

    def test_error_list_suppressed_when_long(self, panel_client, make_xlsx):
        rows = [["9000000001"] + [None] * 7 for _ in range(11)]
        content = make_xlsx(ADMIN_HEADERS, rows)
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(content)})
        assert not any(m.startswith("Errors:") for m in flashed(response))

    def test_empty_sheet(self, panel_client, make_xlsx):
        response = panel_client.post(
            reverse("winners:upload"), {"excelFile": xlsx_upload(make_xlsx(ADMIN_HEADERS, []))}
        )
        assert "Excel file is empty or has no data" in flashed(response)

    def test_zero_byte_file(self, panel_client):
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(b"")})
        assert flashed(response) == ["Excel file is empty or has no data"]

    def test_undecodable_file(self, panel_client):
        response = panel_client.post(reverse("winners:upload"), {"excelFile": xlsx_upload(b"not a workbook")})
        assert any(m.startswith("Error processing Excel file:") for m in flashed(response))


class TestTemplateDownload:
    def test_attachment(self, panel_client):
        response = panel_client.get(reverse("winners:download_template"))
        assert response.status_code == 200
        assert response["Content-Type"] == XLSX_CONTENT_TYPE
        assert response["Content-Disposition"] == "attachment; filename=winners_template.xlsx"


# ---------------------------------------------------------------------------
# Update prize
# ---------------------------------------------------------------------------

class TestUpdatePrize:
    def test_page(self, panel_client):
        assert panel_client.get(reverse("winners:update_prize")).status_code == 200

    def test_updates_winner(self, panel_client, make_winner):
        w = make_winner(phone="9000000001", status="Pending")
        response = panel_client.post(
            reverse("winners:update_prize"),
            {
                "phone": "9000000001",
                "new_prize_amount": "250000",
                "prize_status": "Approved",
                "update_date": "2024-06-01",
                "update_reason": "Upgrade",
            },
        )
        assert response.url == reverse("winners:list")
        assert "Prize updated successfully" in flashed(response)
        w.refresh_from_db()
        assert (w.prize_amount, w.status, w.date) == ("250000", "Approved", "2024-06-01")

    def test_unknown_phone(self, panel_client):
        response = panel_client.post(
            reverse("winners:update_prize"), {"phone": "9000000009", "new_prize_amount": "1"}
        )
        assert "Winner not found with the provided phone number" in flashed(response)
