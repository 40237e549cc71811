# ===== apps/ipo/serializers.py =====
from cryptography.fernet import InvalidToken
from rest_framework import serializers

from apps.users.ownership import OwnedRecordSerializer
from apps.analytics.stats import ipo_record_metrics
from .encryption import encryption_service
from .models import IpoAccount, IpoRecord


class EncryptedCharField(serializers.CharField):
    """Plain text on the wire, Fernet token in the column"""

    def __init__(self, plain_max_length=None, **kwargs):
        # length is checked on the plain value, validators would see the token
        self.plain_max_length = plain_max_length
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = super().to_internal_value(data).strip().upper()
        if self.plain_max_length and len(value) > self.plain_max_length:
            raise serializers.ValidationError(
                f"Ensure this field has no more than {self.plain_max_length} characters."
            )
        return encryption_service.encrypt(value) or None

    def to_representation(self, value):
        try:
            return encryption_service.decrypt(value) or None
        except InvalidToken:
            # stale token after a key change
            return None


class IpoAccountSerializer(OwnedRecordSerializer):
    pan = EncryptedCharField(
        source="pan_encrypted",
        plain_max_length=10,
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    class Meta:
        model = IpoAccount
        fields = [
            "id",
            "holder_name",
            "pan",
            "demat_name",
            "demat_provider",
            "demat_id",
            "bank",
            "upi_id",
            "phone",
            "email",
            "category",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class IpoRecordSerializer(OwnedRecordSerializer):
    account_id = serializers.PrimaryKeyRelatedField(
        source="account",
        queryset=IpoAccount.objects.all(),
        required=False,
        allow_null=True,
    )
    profit = serializers.SerializerMethodField()
    profit_pct = serializers.SerializerMethodField()
    listing_gain = serializers.SerializerMethodField()
    listing_gain_pct = serializers.SerializerMethodField()

    class Meta:
        model = IpoRecord
        fields = [
            "id",
            "company_name",
            "symbol",
            "year",
            "exchange",
            "sector",
            "ipo_price",
            "lot_size",
            "lots_applied",
            "allotted",
            "qty_allotted",
            "amount_applied",
            "amount_paid",
            "listing_date",
            "listing_price",
            "selling_price",
            "selling_date",
            "status",
            "account_id",
            "notes",
            "gmp_at_apply",
            "subscription_times",
            "profit",
            "profit_pct",
            "listing_gain",
            "listing_gain_pct",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_account_id(self, account):
        request = self.context.get("request")
        if account is not None and request is not None and account.user_id != request.user.pk:
            raise serializers.ValidationError("Unknown account.")
        return account

    def _metric(self, obj, name):
        # computed on every read, never stored
        value = ipo_record_metrics(obj)[name]
        return float(value) if value is not None else None

    def get_profit(self, obj):
        return self._metric(obj, "profit")

    def get_profit_pct(self, obj):
        return self._metric(obj, "profit_pct")

    def get_listing_gain(self, obj):
        return self._metric(obj, "listing_gain")

    def get_listing_gain_pct(self, obj):
        return self._metric(obj, "listing_gain_pct")
