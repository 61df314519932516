from django.contrib import admin
from .models import Winner

@admin.register(Winner)
class WinnerAdmin(admin.ModelAdmin):
    list_display = ("id", "external_id", "wcode", "name", "phone", "prize_amount", "status", "is_active", "created_at")
    list_filter = ("status", "is_active")
    search_fields = ("external_id", "wcode", "name", "phone")
