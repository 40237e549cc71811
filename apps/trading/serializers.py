# ===== apps/trading/serializers.py =====
from rest_framework import serializers

from apps.users.ownership import OwnedRecordSerializer
from apps.analytics.stats import trade_metrics
from .models import Trade, Capital


class TradeSerializer(OwnedRecordSerializer):
    metrics = serializers.SerializerMethodField()

    class Meta:
        model = Trade
        fields = [
            "id",
            "symbol",
            "sector",
            "status",
            "buy_price",
            "qty",
            "sl",
            "target",
            "buy_date",
            "reason",
            "timing",
            "image_url",
            "chart_link",
            "tags",
            "exit_price",
            "exit_date",
            "deployed",
            "metrics",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "deployed", "created_at", "updated_at"]

    def validate_symbol(self, value):
        return value.strip().upper()

    def get_metrics(self, obj):
        return {
            k: float(v) if v is not None else None
            for k, v in trade_metrics(obj).items()
        }


class CapitalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Capital
        fields = ["total", "updated_at"]
        read_only_fields = ["updated_at"]
        extra_kwargs = {"total": {"required": True}}
