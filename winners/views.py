import logging
from django.conf import settings
from django.contrib import messages
from django.core.paginator import Paginator
from django.http import HttpResponse, HttpResponseNotAllowed, JsonResponse
from django.shortcuts import redirect, render
from accounts.decorators import require_panel_admin
from .forms import PrizeUpdateForm, WinnerForm, WinnerUploadForm
from .importer import import_workbook
from .models import Winner
from .spreadsheet import XLSX_CONTENT_TYPE, SpreadsheetError, build_template

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


def _first_form_error(form):
    for errs in form.errors.values():
        if errs:
            return errs[0]
    return "Invalid form submission"


@require_panel_admin
def panel_index(request):
    return redirect("winners:dashboard")


@require_panel_admin
def dashboard(request):
    recent = Winner.objects.active().order_by("-created_at", "-id")[:5]
    return render(
        request,
        "winners/dashboard.html",
        {
            "title": "Admin Dashboard",
            "stats": Winner.objects.stats(),
            "recent_winners": recent,
            "active_nav": "dashboard",
        },
    )


@require_panel_admin
def winner_list(request):
    if request.method == "POST":
        return _create_winner(request)
    search = request.GET.get("search", "")
    status = request.GET.get("status", "")
    qs = Winner.objects.active().search(search).with_status(status).order_by("-created_at", "-id")
    page = Paginator(qs, PAGE_SIZE).get_page(request.GET.get("page"))
    return render(
        request,
        "winners/winners.html",
        {
            "title": "Winners Management",
            "page_obj": page,
            "winners": page.object_list,
            "search": search,
            "status": status,
            "status_choices": Winner.STATUS_CHOICES,
            "active_nav": "winners",
        },
    )


def _create_winner(request):
    form = WinnerForm(request.POST)
    if not form.is_valid():
        messages.error(request, "All required fields must be filled")
        return redirect("winners:list")
    if form.duplicate_exists():
        messages.error(request, "Winner with this phone number, W-Code, or ID already exists")
        return redirect("winners:list")
    winner = form.save()
    logger.info("Winner %s added by %s", winner.wcode, request.user.username)
    messages.success(request, "Winner added successfully")
    return redirect("winners:list")


@require_panel_admin
def winner_delete(request, pk: int):
    if request.method not in ("POST", "DELETE"):
        return HttpResponseNotAllowed(["POST", "DELETE"])
    updated = Winner.objects.filter(pk=pk, is_active=True).update(is_active=False)
    if not updated:
        return JsonResponse({"success": False, "message": "Winner not found"})
    logger.info("Winner %s deactivated by %s", pk, request.user.username)
    return JsonResponse({"success": True, "message": "Winner deleted successfully"})


@require_panel_admin
def upload(request):
    if request.method != "POST":
        return render(request, "winners/upload.html", {"title": "Upload Excel File", "active_nav": "upload"})

    if "excelFile" not in request.FILES:
        messages.error(request, "Please select an Excel file to upload")
        return redirect("winners:upload")

    form = WinnerUploadForm(request.POST, request.FILES)
    uploaded = request.FILES["excelFile"]
    try:
        if not form.is_valid():
            messages.error(request, _first_form_error(form))
            return redirect("winners:upload")
        result = import_workbook(
            uploaded.read(),
            uploaded.name,
            default_status=getattr(settings, "ADMIN_IMPORT_DEFAULT_STATUS", Winner.STATUS_ACTIVE),
        )
    except SpreadsheetError as e:
        messages.error(request, f"Error processing Excel file: {e}")
        return redirect("winners:upload")
    finally:
        # temporary upload files are removed on close
        uploaded.close()

    if result.empty:
        messages.error(request, "Excel file is empty or has no data")
        return redirect("winners:upload")

    if result.imported_count > 0:
        messages.success(request, result.summary_message())
    else:
        messages.error(request, "No winners were added. Please check your Excel file format.")
    detail = result.error_detail(getattr(settings, "IMPORT_ERROR_DETAIL_LIMIT", 10))
    if detail:
        messages.error(request, detail)
    logger.info(
        "Panel import by %s: %d/%d rows imported",
        request.user.username,
        result.imported_count,
        result.total_rows,
    )
    return redirect("winners:upload")


@require_panel_admin
def download_template(request):
    response = HttpResponse(build_template(), content_type=XLSX_CONTENT_TYPE)
    response["Content-Disposition"] = "attachment; filename=winners_template.xlsx"
    return response


@require_panel_admin
def update_prize(request):
    if request.method != "POST":
        return render(
            request,
            "winners/update_prize.html",
            {"title": "Update Prize", "status_choices": Winner.STATUS_CHOICES, "active_nav": "update_prize"},
        )
    form = PrizeUpdateForm(request.POST)
    if not form.is_valid():
        messages.error(request, _first_form_error(form))
        return redirect("winners:update_prize")
    data = form.cleaned_data
    winner = Winner.objects.active().filter(phone=data["phone"]).first()
    if not winner:
        messages.error(request, "Winner not found with the provided phone number")
        return redirect("winners:update_prize")
    winner.prize_amount = data["new_prize_amount"]
    fields = ["prize_amount", "updated_at"]
    if data.get("prize_status"):
        winner.status = data["prize_status"]
        fields.append("status")
    if data.get("prize_description"):
        winner.product = data["prize_description"]
        fields.append("product")
    if data.get("update_date"):
        winner.date = data["update_date"].isoformat()
        fields.append("date")
    winner.save(update_fields=fields)
    logger.info(
        "Prize for %s updated by %s: %s",
        winner.wcode,
        request.user.username,
        data.get("update_reason") or "no reason given",
    )
    messages.success(request, "Prize updated successfully")
    return redirect("winners:list")
