# ===== apps/trading/admin.py =====
from django.contrib import admin
from .models import Trade, Capital

@admin.register(Trade)
class TradeAdmin(admin.ModelAdmin):
    list_display = ['user', 'symbol', 'sector', 'status', 'buy_price', 'qty', 'exit_price', 'buy_date', 'exit_date']
    list_filter = ['status', 'sector', 'buy_date']
    search_fields = ['user__username', 'symbol', 'tags']
    raw_id_fields = ['user']
    readonly_fields = ['deployed', 'created_at', 'updated_at']

@admin.register(Capital)
class CapitalAdmin(admin.ModelAdmin):
    list_display = ['user', 'total', 'updated_at']
    search_fields = ['user__username']
    raw_id_fields = ['user']
