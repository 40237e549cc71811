# ===== apps/trading/views.py =====

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from django.db import transaction

import logging

from apps.users.ownership import list_owned, upsert_owned, delete_owned
from .models import Trade, Capital
from .serializers import TradeSerializer, CapitalSerializer

logger = logging.getLogger(__name__)


# ============================================================
# TRADES
# ============================================================

@api_view(["GET", "POST", "DELETE"])
@permission_classes([IsAuthenticated])
def trades(request):
    if request.method == "GET":
        return list_owned(request, Trade, TradeSerializer)

    if request.method == "POST":
        return upsert_owned(request, Trade, TradeSerializer)

    return delete_owned(request, Trade)


# ============================================================
# CAPITAL
# ============================================================

def get_capital(user):
    capital, created = Capital.objects.get_or_create(user=user)
    if created:
        logger.info(f"Created default capital {capital.total} for {user.pk}")
    return capital


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticated])
def capital(request):
    if request.method == "GET":
        return Response(CapitalSerializer(get_capital(request.user)).data)

    serializer = CapitalSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    with transaction.atomic():
        obj, _ = Capital.objects.update_or_create(
            user=request.user,
            defaults={"total": serializer.validated_data["total"]},
        )

    return Response(CapitalSerializer(obj).data)
