from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('apps.users.urls')),
    path('api/', include('apps.trading.urls')),
    path('api/', include('apps.ipo.urls')),
    path('api/analytics/', include('apps.analytics.urls')),
    path('api/market/', include('apps.market.urls')),
    path('health/', include('apps.users.health_urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

admin.site.site_header = "SwingJournal Administration"
admin.site.site_title = "SwingJournal Admin"
admin.site.index_title = "Trades, IPOs and capital"
