from django.contrib import admin
from .models import Prize

@admin.register(Prize)
class PrizeAdmin(admin.ModelAdmin):
    list_display = ("position", "title", "amount", "medal", "is_active")
    list_filter = ("is_active",)
    ordering = ("position",)
