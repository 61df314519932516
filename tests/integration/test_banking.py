"""Winner bank details and company payout accounts."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from banking.forms import parse_amount
from banking.models import BankDetails, CompanyBankDetails

pytestmark = pytest.mark.django_db


def flashed(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


def bank_form(phone, **extra):
    data = {
        "phone": phone,
        "winner_name": "Asha Rao",
        "bank_name": "State Bank of India",
        "account_number": "123456789012",
        "ifsc_code": "sbin0001234",
        "account_holder_name": "ASHA RAO",
    }
    data.update(extra)
    return data


def company_account(**extra):
    data = {
        "bank_name": "SBI",
        "account_number": "12345678901234",
        "ifsc_code": "SBIN0001234",
        "account_holder_name": "HERBAL AYURVEDA PVT LTD",
    }
    data.update(extra)
    return CompanyBankDetails.objects.create(**data)


# ---------------------------------------------------------------------------
# Helpers on the models
# ---------------------------------------------------------------------------

class TestParseAmount:
    def test_rupee_text(self):
        assert parse_amount("₹14,80,000") == Decimal("1480000")

    def test_blank(self):
        assert parse_amount("") is None
        assert parse_amount("n/a") is None


class TestBankDetailsModel:
    def test_display_helpers(self, make_winner):
        w = make_winner()
        d = BankDetails.objects.create(
            winner=w, winner_name=w.name, phone=w.phone, wcode=w.wcode, bank_name="SBI",
            account_number="123456789012", ifsc_code="sbin0001234", account_holder_name="A",
            prize_amount=Decimal("1480000"),
        )
        assert d.ifsc_code == "SBIN0001234"
        assert d.masked_account_number == "XXXXXXXX9012"
        assert d.formatted_prize_amount == "₹14,80,000"
        assert d.status == "Pending"
        assert d.status_badge_class == "warning"
        assert d.verification_badge_class == "secondary"
        assert BankDetails.objects.for_phone(w.phone) == d
        assert BankDetails.objects.for_winner(w) == d


class TestCompanyBankModel:
    def test_display_account_number(self):
        assert company_account().display_account_number == "123XXXXXXXX234"

    def test_one_primary_per_purpose(self):
        first = company_account(is_primary=True)
        other_purpose = company_account(is_primary=True, purpose="Registration Fees")
        second = company_account(is_primary=True)
        first.refresh_from_db()
        other_purpose.refresh_from_db()
        assert first.is_primary is False
        assert other_purpose.is_primary is True
        assert second.is_primary is True

    def test_primary_and_ordering(self):
        plain = company_account()
        primary = company_account(is_primary=True)
        assert CompanyBankDetails.objects.primary() == primary
        assert list(CompanyBankDetails.objects.all_active()) == [primary, plain]
        assert list(CompanyBankDetails.objects.by_purpose("Registration Fees")) == []

    def test_frontend_format(self):
        data = company_account(upi_id=" Herbal@SBI ").to_frontend_format()
        assert data["upiId"] == "herbal@sbi"
        assert data["displayName"] == "Prize Distributor Department"
        assert data["companyName"] == "Herbal Ayurveda Pvt. Ltd."


# ---------------------------------------------------------------------------
# Panel views
# ---------------------------------------------------------------------------

class TestBankUpdate:
    def test_page(self, panel_client):
        assert panel_client.get(reverse("banking:bank_update")).status_code == 200

    def test_creates_then_updates(self, panel_client, make_winner):
        w = make_winner(phone="9000000001", prize_amount="₹9,30,000")
        response = panel_client.post(reverse("banking:bank_update"), bank_form("9000000001"))
        assert response.url == reverse("banking:bank_details")
        assert "Bank details created successfully" in flashed(response)
        d = BankDetails.objects.get()
        assert d.winner == w
        assert d.wcode == w.wcode
        assert d.ifsc_code == "SBIN0001234"
        assert d.prize_amount == Decimal("930000")
        assert d.created_by == "panel"

        response = panel_client.post(
            reverse("banking:bank_update"),
            bank_form("9000000001", bank_name="HDFC", prize_amount="5000", status="Verified"),
        )
        assert "Bank details updated successfully" in flashed(response)
        d = BankDetails.objects.get()
        assert (d.bank_name, d.prize_amount, d.status, d.updated_by) == ("HDFC", Decimal("5000"), "Verified", "panel")

    def test_missing_fields(self, panel_client):
        response = panel_client.post(reverse("banking:bank_update"), {"phone": "9000000001"})
        assert "All required fields must be filled" in flashed(response)

    def test_unknown_winner(self, panel_client):
        response = panel_client.post(reverse("banking:bank_update"), bank_form("9000000009"))
        assert "Winner not found with the provided phone number" in flashed(response)
        assert not BankDetails.objects.exists()


class TestBankDetailsList:
    def test_search(self, panel_client, make_winner):
        for name in ("Asha", "Ravi"):
            w = make_winner(name=name)
            BankDetails.objects.create(
                winner=w, winner_name=name, phone=w.phone, wcode=w.wcode, bank_name="SBI",
                account_number="1234", ifsc_code="X", account_holder_name=name, prize_amount=1,
            )
        response = panel_client.get(reverse("banking:bank_details"), {"search": "ravi"})
        assert [d.winner_name for d in response.context["bank_details"]] == ["Ravi"]


class TestCompanyBankViews:
    def test_list(self, panel_client):
        company_account()
        response = panel_client.get(reverse("banking:company_bank"))
        assert len(response.context["accounts"]) == 1

    def test_create(self, panel_client):
        response = panel_client.post(
            reverse("banking:company_bank"),
            {
                "bank_name": "HDFC Bank",
                "account_number": "98765432109876",
                "ifsc_code": "hdfc0001234",
                "account_holder_name": "HERBAL",
                "purpose": "Registration Fees",
                "is_primary": "on",
            },
        )
        assert "Company bank details added successfully" in flashed(response)
        account = CompanyBankDetails.objects.get()
        assert account.ifsc_code == "HDFC0001234"
        assert account.is_primary is True
        assert account.account_type == "Current"
        assert account.created_by == "panel"

    def test_create_missing_fields(self, panel_client):
        response = panel_client.post(reverse("banking:company_bank"), {"bank_name": "HDFC"})
        assert "All required bank fields must be filled" in flashed(response)

    def test_soft_delete(self, panel_client):
        account = company_account()
        response = panel_client.post(reverse("banking:company_bank_delete", args=[account.pk]))
        assert response.json() == {"success": True, "message": "Company bank details deleted successfully"}
        account.refresh_from_db()
        assert account.is_active is False
        response = panel_client.post(reverse("banking:company_bank_delete", args=[account.pk]))
        assert response.json()["success"] is False
