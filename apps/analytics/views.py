# ===== apps/analytics/views.py =====
import math

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from apps.trading.models import Trade
from apps.trading.views import get_capital
from apps.ipo.models import IpoAccount, IpoRecord
from . import stats
from .serializers import PositionSizeQuerySerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_statistics(request):
    """Dashboard summary: capital deployment plus swing and IPO totals"""
    user = request.user
    trades = Trade.objects.filter(user=user)
    records = IpoRecord.objects.filter(user=user)
    capital = get_capital(user)

    return Response(stats.portfolio_summary(trades, records, capital.total))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_trade_statistics(request):
    """Get swing trade statistics"""
    trades = Trade.objects.filter(user=request.user)
    return Response(stats.trade_stats(trades))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_ipo_statistics(request):
    """IPO totals with per-year and per-account rollups"""
    records = list(IpoRecord.objects.filter(user=request.user))
    accounts = IpoAccount.objects.filter(user=request.user)

    return Response({
        'summary': stats.ipo_stats(records),
        'by_year': stats.ipo_by_year(records),
        'by_account': stats.ipo_by_account(records, accounts),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_position_size(request):
    """Position sizing calculator; capital defaults to the stored total"""
    serializer = PositionSizeQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    capital = data.get('capital')
    if capital is None:
        capital = get_capital(request.user).total

    result = stats.position_size(capital, data['risk_pct'], data['sl_pct'])
    if not (math.isfinite(result['risk_amount']) and math.isfinite(result['max_position'])):
        return Response(
            {'error': 'Position size is out of range for these inputs'},
            status=status.HTTP_400_BAD_REQUEST
        )

    price = data.get('price')
    return Response({
        'capital': capital,
        'risk_pct': data['risk_pct'],
        'sl_pct': data['sl_pct'],
        'risk_amount': result['risk_amount'],
        'max_position': result['max_position'],
        'quantity': stats.quantity_for_price(result['max_position'], price) if price else None,
    })
