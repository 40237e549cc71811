from django.urls import path
from . import views

urlpatterns = [
    path('trades', views.trades, name='trades'),
    path('capital', views.capital, name='capital'),
]
