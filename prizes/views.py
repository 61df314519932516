import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from accounts.decorators import require_panel_admin
from .forms import IMAGE_ERROR, PrizeForm
from .models import Prize

logger = logging.getLogger(__name__)


def _form_error(form):
    if "image" in form.errors:
        return IMAGE_ERROR
    for field, errs in form.errors.items():
        if errs:
            label = form.fields[field].label if field in form.fields else None
            return f"{label}: {errs[0]}" if label else errs[0]
    return "Invalid form submission"


@require_panel_admin
def prize_list(request):
    return render(
        request,
        "prizes/prizes.html",
        {
            "title": "Prize Management",
            "prizes": Prize.objects.order_by("position"),
            "medal_choices": Prize.MEDAL_CHOICES,
            "active_nav": "prizes",
        },
    )


@require_panel_admin
@require_POST
def prize_add(request):
    form = PrizeForm(request.POST, request.FILES)
    if not form.is_valid():
        messages.error(request, f"Error adding prize: {_form_error(form)}")
        return redirect("prizes:list")
    prize = form.save()
    logger.info("Prize %s added by %s", prize.pk, request.user.username)
    messages.success(request, "Prize added successfully!")
    return redirect("prizes:list")


@require_panel_admin
@require_POST
def prize_update(request, pk: int):
    prize = get_object_or_404(Prize, pk=pk)
    form = PrizeForm(request.POST, request.FILES, instance=prize)
    if not form.is_valid():
        messages.error(request, f"Error updating prize: {_form_error(form)}")
        return redirect("prizes:list")
    form.save()
    logger.info("Prize %s updated by %s", pk, request.user.username)
    messages.success(request, "Prize updated successfully!")
    return redirect("prizes:list")


@require_panel_admin
@require_POST
def prize_delete(request, pk: int):
    deleted, _ = Prize.objects.filter(pk=pk).delete()
    if not deleted:
        messages.error(request, "Error deleting prize: Prize not found")
        return redirect("prizes:list")
    logger.info("Prize %s deleted by %s", pk, request.user.username)
    messages.success(request, "Prize deleted successfully!")
    return redirect("prizes:list")
