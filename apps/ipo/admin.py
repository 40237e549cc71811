# ===== apps/ipo/admin.py =====
from django.contrib import admin
from .models import IpoAccount, IpoRecord

@admin.register(IpoAccount)
class IpoAccountAdmin(admin.ModelAdmin):
    list_display = ['user', 'holder_name', 'demat_provider', 'category', 'created_at']
    list_filter = ['demat_provider', 'category']
    search_fields = ['user__username', 'holder_name']
    raw_id_fields = ['user']
    readonly_fields = ['pan_encrypted', 'created_at', 'updated_at']

@admin.register(IpoRecord)
class IpoRecordAdmin(admin.ModelAdmin):
    list_display = ['user', 'company_name', 'year', 'allotted', 'ipo_price', 'selling_price', 'status']
    list_filter = ['year', 'allotted', 'status', 'exchange']
    search_fields = ['user__username', 'company_name', 'symbol']
    raw_id_fields = ['user', 'account']
    readonly_fields = ['created_at', 'updated_at']
