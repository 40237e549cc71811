from django.apps import AppConfig


class IpoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.ipo'
    label = 'ipo'
    verbose_name = 'IPO'
