import logging
import math

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from winners.importer import import_workbook
from winners.models import Winner
from winners.spreadsheet import SpreadsheetError, has_allowed_extension
from .permissions import IsPanelAdmin
from .serializers import WinnerSerializer

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 10
PUBLIC_LIMIT = 20


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@api_view(["GET"])
@permission_classes([AllowAny])
def winner_list(request):
    page = _positive_int(request.query_params.get("page"), 1)
    limit = _positive_int(request.query_params.get("limit"), DEFAULT_PAGE_LIMIT)
    qs = (
        Winner.objects.active()
        .search(request.query_params.get("search", ""))
        .with_status(request.query_params.get("status", ""))
        .order_by("-created_at", "-id")
    )
    total = qs.count()
    offset = (page - 1) * limit
    return Response(
        {
            "winners": WinnerSerializer(qs[offset:offset + limit], many=True).data,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "pages": math.ceil(total / limit),
            },
        }
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def public_winners(request):
    limit = _positive_int(request.query_params.get("limit"), PUBLIC_LIMIT)
    qs = Winner.objects.active().filter(status=Winner.STATUS_APPROVED).order_by("-created_at", "-id")[:limit]
    return Response([w.public_dict("name", "phone", "image", "wcode", "createdAt") for w in qs])


@api_view(["POST"])
@permission_classes([IsPanelAdmin])
def upload(request):
    uploaded = request.FILES.get("excelFile")
    if uploaded is None:
        return Response({"error": "No file uploaded"}, status=status.HTTP_400_BAD_REQUEST)
    try:
        limit = getattr(settings, "WINNER_IMPORT_MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
        if not has_allowed_extension(uploaded.name) or uploaded.size > limit:
            return Response({"error": "No file uploaded"}, status=status.HTTP_400_BAD_REQUEST)
        result = import_workbook(
            uploaded.read(),
            uploaded.name,
            default_status=getattr(settings, "API_IMPORT_DEFAULT_STATUS", Winner.STATUS_PENDING),
        )
    except SpreadsheetError:
        logger.exception("API import of %s failed", uploaded.name)
        return Response({"error": "Failed to import winners"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    finally:
        uploaded.close()

    message = "Excel file is empty or has no data" if result.empty else "Import completed"
    return Response(
        {
            "message": message,
            "imported": result.imported_count,
            "errors": result.errors,
            "total": result.total_rows,
        }
    )


@api_view(["PUT", "PATCH", "DELETE"])
@permission_classes([IsPanelAdmin])
def winner_detail(request, pk: int):
    winner = Winner.objects.filter(pk=pk).first()
    if winner is None:
        return Response({"error": "Winner not found"}, status=status.HTTP_404_NOT_FOUND)

    if request.method == "DELETE":
        winner.is_active = False
        winner.save(update_fields=["is_active", "updated_at"])
        logger.info("Winner %s deactivated through the API by %s", pk, request.user.username)
        return Response({"message": "Winner deleted successfully"})

    serializer = WinnerSerializer(winner, data=request.data, partial=request.method == "PATCH")
    serializer.is_valid(raise_exception=True)
    serializer.save()
    logger.info("Winner %s updated through the API by %s", pk, request.user.username)
    return Response(serializer.data)


@api_view(["GET"])
@permission_classes([IsPanelAdmin])
def stats(request):
    return Response(Winner.objects.stats())
