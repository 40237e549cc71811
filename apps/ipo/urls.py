from django.urls import path
from . import views

urlpatterns = [
    path('ipo-accounts', views.ipo_accounts, name='ipo_accounts'),
    path('ipo-records', views.ipo_records, name='ipo_records'),
]
