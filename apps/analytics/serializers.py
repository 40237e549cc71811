# ===== apps/analytics/serializers.py =====
import math

from rest_framework import serializers


class PositionSizeQuerySerializer(serializers.Serializer):
    capital = serializers.DecimalField(max_digits=20, decimal_places=2, required=False, min_value=0)
    risk_pct = serializers.FloatField(required=False, default=1.0, min_value=0)
    sl_pct = serializers.FloatField()
    price = serializers.FloatField(required=False, allow_null=True)

    def validate_risk_pct(self, value):
        if not math.isfinite(value):
            raise serializers.ValidationError("A finite number is required.")
        return value

    def validate_sl_pct(self, value):
        # inf/nan position sizes are not representable in JSON
        if not math.isfinite(value) or value <= 0:
            raise serializers.ValidationError("Stop-loss distance must be greater than zero.")
        return value

    def validate_price(self, value):
        if value is not None and not math.isfinite(value):
            raise serializers.ValidationError("A finite number is required.")
        return value
