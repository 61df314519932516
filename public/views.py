import logging
from urllib.parse import urlencode

from django.db.models import Q
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from banking.models import CompanyBankDetails
from prizes.models import Prize
from winners.models import Winner

logger = logging.getLogger(__name__)

HOME_WINNERS = 8
HOME_PRIZES = 10
WINNER_LIST_LIMIT = 20
SEARCH_RESULT_LIMIT = 20
SEARCH_WINNERS_LIMIT = 50
MIN_QUERY_LENGTH = 2

SEARCH_FIELDS = {"phone": "phone", "wcode": "wcode", "name": "name"}

STATUS_FOUND = "Winner details found successfully!"


def _page(request, template, title, current, **extra):
    context = {"title": title, "current_page": current}
    context.update(extra)
    return render(request, template, context)


def _home(request, error=None):
    winners = [w.public_dict() for w in Winner.objects.active().order_by("-created_at", "-id")[:HOME_WINNERS]]
    prizes = Prize.objects.active()[:HOME_PRIZES]
    return _page(
        request,
        "public/index.html",
        "Online Shopping",
        "home",
        recent_winners=winners,
        prizes=prizes,
        error=error,
    )


@require_http_methods(["GET", "POST"])
def home(request):
    if request.method != "POST":
        return _home(request)
    phone = request.POST.get("phone", "").strip()
    if not phone:
        return _home(request, error="Please enter phone number")
    if not Winner.objects.active().filter(phone=phone).exists():
        return _home(request, error="No winner found with this phone number")
    return redirect(f"{reverse('public:status')}?{urlencode({'phone': phone, 'found': 'true'})}")


@require_GET
def winner_list(request):
    qs = (
        Winner.objects.active()
        .filter(status__in=Winner.PUBLIC_STATUSES)
        .order_by("-created_at", "-id")[:WINNER_LIST_LIMIT]
    )
    return _page(
        request,
        "public/winner_list.html",
        "Online Shopping",
        "winners",
        winners=[w.public_dict() for w in qs],
    )


@require_http_methods(["GET", "POST"])
def status(request):
    if request.method == "POST":
        phone = request.POST.get("phone", "").strip()
        wcode = request.POST.get("wcode", "").strip()
        if not phone or not wcode:
            return _page(
                request,
                "public/status.html",
                "Online Shopping",
                "status",
                error="Please enter both phone number and W-Code",
                search_phone=phone,
            )
        winner = Winner.objects.active().filter(phone=phone, wcode=wcode).first()
        if winner is None:
            return _page(
                request,
                "public/status.html",
                "Online Shopping",
                "status",
                error="No winner found with the provided details",
                search_phone=phone,
            )
        return _page(
            request, "public/status.html", "Online Shopping", "status",
            winner=winner, success=STATUS_FOUND, search_phone=phone,
        )

    phone = request.GET.get("phone", "").strip()
    winner = None
    success = None
    if phone and request.GET.get("found") == "true":
        winner = Winner.objects.active().filter(phone=phone).first()
        if winner:
            success = STATUS_FOUND
    return _page(
        request, "public/status.html", "Online Shopping", "status",
        winner=winner, success=success, search_phone=phone,
    )


@require_GET
def search_result(request):
    query = request.GET.get("q", "").strip()
    search_type = request.GET.get("type") or "phone"
    account = (
        CompanyBankDetails.objects.primary()
        or CompanyBankDetails.objects.by_purpose(CompanyBankDetails.PURPOSE_PRIZE_DISTRIBUTION).first()
    )
    winners = []
    error = None
    if query and search_type == "phone":
        qs = Winner.objects.active().filter(phone__icontains=query).order_by("-created_at", "-id")[:SEARCH_RESULT_LIMIT]
        winners = [w.public_dict() | {"formattedDate": w.created_at.strftime("%d/%m/%Y")} for w in qs]
        if not winners:
            error = f"No winners found for phone number: {query}"
    return _page(
        request,
        "public/search_result.html",
        "Search Results - Online Shopping",
        "search",
        winners=winners,
        search_query=query,
        search_type=search_type,
        error=error,
        company_bank=account.to_frontend_format() if account else None,
    )


@csrf_exempt
@require_POST
def check_status(request):
    phone = request.POST.get("phone", "").strip()
    wcode = request.POST.get("wcode", "").strip()
    if not phone and not wcode:
        return JsonResponse({"success": False, "message": "Please provide either phone number or W-Code"})
    lookup = {"phone": phone} if phone else {"wcode": wcode}
    winner = Winner.objects.active().filter(**lookup).first()
    if winner is None:
        return JsonResponse({"success": False, "message": "No winner found with the provided information"})
    return JsonResponse(
        {
            "success": True,
            "winner": {
                "name": winner.name,
                "wcode": winner.wcode,
                "status": winner.status,
                "prizeAmount": winner.prize_amount,
                "product": winner.product,
                "date": winner.date,
            },
        }
    )


@require_GET
def winner_details(request, wcode):
    winner = Winner.objects.active().filter(wcode=wcode, status=Winner.STATUS_APPROVED).first()
    if winner is None:
        return JsonResponse({"success": False, "message": "Winner not found"}, status=404)
    return JsonResponse(
        {
            "success": True,
            "winner": {
                "name": winner.name,
                "wcode": winner.wcode,
                "prizeAmount": winner.prize_amount,
                "product": winner.product,
                "date": winner.date,
                "paid": winner.paid,
                "image": winner.image,
            },
        }
    )


def _search_filter(query, search_type):
    field = SEARCH_FIELDS.get(search_type)
    if field:
        return Q(**{f"{field}__icontains": query})
    return Q(name__icontains=query) | Q(phone__icontains=query) | Q(wcode__icontains=query)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def search_winners(request):
    if request.method == "POST":
        query = request.POST.get("query", "").strip()
        search_type = request.POST.get("searchType", "")
    else:
        query = request.GET.get("q", "").strip()
        search_type = request.GET.get("type", "")

    if len(query) < MIN_QUERY_LENGTH:
        return JsonResponse(
            {"success": False, "message": "Please enter at least 2 characters to search", "winners": []}
        )

    qs = (
        Winner.objects.active()
        .filter(status=Winner.STATUS_APPROVED)
        .filter(_search_filter(query, search_type))
        .order_by("-created_at", "-id")[:SEARCH_WINNERS_LIMIT]
    )
    winners = [
        w.public_dict("name", "phone", "wcode", "prizeAmount", "product", "date", "image", "paid", "createdAt")
        for w in qs
    ]
    return JsonResponse({"success": True, "winners": winners, "count": len(winners), "query": query})


def static_page(template, title, current):
    @require_GET
    def view(request):
        return _page(request, template, title, current)
    view.__name__ = current.replace("-", "_")
    return view


products = static_page("public/products.html", "Products - Online Shopping", "products")
how_to_win = static_page("public/how_to_win.html", "Online Shopping", "how-to-win")
terms = static_page("public/terms.html", "Online Shopping", "terms")
contact = static_page("public/contact.html", "Online Shopping", "contact")
winner_cash = static_page("public/winner_cash.html", "Winner Cash - Online Shopping", "winner-cash")
car_processing = static_page("public/car_processing.html", "Car Processing - Online Shopping", "car-processing")


@require_GET
def prize(request):
    return _page(request, "public/prize.html", "Online Shopping", "prize", prizes=Prize.objects.active())
