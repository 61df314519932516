import logging

from django.contrib import messages
from django.core.paginator import Paginator
from django.http import HttpResponseNotAllowed, JsonResponse
from django.shortcuts import redirect, render

from accounts.decorators import require_panel_admin
from winners.models import Winner
from .forms import BankUpdateForm, CompanyBankForm
from .models import BankDetails, CompanyBankDetails

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


@require_panel_admin
def bank_details(request):
    search = request.GET.get("search", "")
    status = request.GET.get("status", "")
    qs = BankDetails.objects.active().select_related("winner").search(search)
    if status:
        qs = qs.filter(status=status)
    page = Paginator(qs.order_by("-created_at", "-id"), PAGE_SIZE).get_page(request.GET.get("page"))
    return render(
        request,
        "banking/bank_details.html",
        {
            "title": "Bank Details Management",
            "page_obj": page,
            "bank_details": page.object_list,
            "search": search,
            "status": status,
            "status_choices": BankDetails.STATUS_CHOICES,
            "active_nav": "bank_details",
        },
    )


@require_panel_admin
def bank_update(request):
    if request.method != "POST":
        return render(
            request,
            "banking/bank_update.html",
            {"title": "Bank Update", "status_choices": BankDetails.STATUS_CHOICES, "active_nav": "bank_update"},
        )

    form = BankUpdateForm(request.POST)
    if not form.is_valid():
        messages.error(request, "All required fields must be filled")
        return redirect("banking:bank_update")

    winner = Winner.objects.active().filter(phone=form.cleaned_data["phone"]).first()
    if not winner:
        messages.error(request, "Winner not found with the provided phone number")
        return redirect("banking:bank_update")

    details = BankDetails.objects.for_winner(winner)
    created = details is None
    form.apply(details or BankDetails(), winner, request.user.username)
    logger.info("Bank details for %s %s by %s", winner.wcode, "created" if created else "updated", request.user.username)
    if created:
        messages.success(request, "Bank details created successfully")
    else:
        messages.success(request, "Bank details updated successfully")
    return redirect("banking:bank_details")


@require_panel_admin
def company_bank(request):
    if request.method == "POST":
        form = CompanyBankForm(request.POST)
        if not form.is_valid():
            messages.error(request, "All required bank fields must be filled")
            return redirect("banking:company_bank")
        account = form.save(commit=False)
        account.created_by = request.user.username
        account.save()
        logger.info("Company account %s added by %s", account.pk, request.user.username)
        messages.success(request, "Company bank details added successfully")
        return redirect("banking:company_bank")

    return render(
        request,
        "banking/company_bank.html",
        {
            "title": "Company Bank Details",
            "accounts": CompanyBankDetails.objects.all_active(),
            "form": CompanyBankForm(),
            "active_nav": "company_bank",
        },
    )


@require_panel_admin
def company_bank_delete(request, pk: int):
    if request.method not in ("POST", "DELETE"):
        return HttpResponseNotAllowed(["POST", "DELETE"])
    updated = CompanyBankDetails.objects.filter(pk=pk, is_active=True).update(
        is_active=False, updated_by=request.user.username
    )
    if not updated:
        return JsonResponse({"success": False, "message": "Company bank details not found"})
    logger.info("Company account %s deactivated by %s", pk, request.user.username)
    return JsonResponse({"success": True, "message": "Company bank details deleted successfully"})
