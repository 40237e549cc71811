from django.urls import path
from . import views

urlpatterns = [
    path("search-symbols", views.search_symbols, name="search_symbols"),
]
