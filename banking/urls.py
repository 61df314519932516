from django.urls import path
from . import views

app_name = "banking"

urlpatterns = [
    path("bank-details/", views.bank_details, name="bank_details"),
    path("bank-update/", views.bank_update, name="bank_update"),
    path("company-bank/", views.company_bank, name="company_bank"),
    path("company-bank/<int:pk>/delete/", views.company_bank_delete, name="company_bank_delete"),
]
