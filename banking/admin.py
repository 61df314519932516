from django.contrib import admin
from .models import BankDetails, CompanyBankDetails

@admin.register(BankDetails)
class BankDetailsAdmin(admin.ModelAdmin):
    list_display = ("id", "winner_name", "phone", "wcode", "bank_name", "prize_amount", "status", "verification_status", "is_active")
    list_filter = ("status", "verification_status", "is_active")
    search_fields = ("winner_name", "phone", "wcode", "bank_name", "account_holder_name")
    raw_id_fields = ("winner",)


@admin.register(CompanyBankDetails)
class CompanyBankDetailsAdmin(admin.ModelAdmin):
    list_display = ("id", "bank_name", "display_name", "purpose", "is_primary", "is_active", "sort_order")
    list_filter = ("purpose", "is_primary", "is_active")
    search_fields = ("bank_name", "account_holder_name", "display_name")
