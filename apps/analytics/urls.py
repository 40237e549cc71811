# ===== apps/analytics/urls.py =====
from django.urls import path
from . import views

urlpatterns = [
    path('statistics', views.get_statistics, name='statistics'),
    path('trades', views.get_trade_statistics, name='trade_statistics'),
    path('ipo', views.get_ipo_statistics, name='ipo_statistics'),
    path('position-size', views.get_position_size, name='position_size'),
]
