# apps/trading/models.py
from decimal import Decimal

from django.db import models
from django.conf import settings


def default_capital():
    return Decimal(settings.DEFAULT_CAPITAL)


class Trade(models.Model):
    """Swing trade journal entry"""

    RUNNING = 'Running'
    EXITED = 'Exited'
    STOP_HIT = 'Stop Hit'

    STATUSES = [
        (RUNNING, 'Running'),
        (EXITED, 'Exited'),
        (STOP_HIT, 'Stop Hit'),
    ]

    SECTORS = [
        ('Technology', 'Technology'),
        ('Finance', 'Finance'),
        ('Pharma', 'Pharma'),
        ('Energy', 'Energy'),
        ('FMCG', 'FMCG'),
        ('Auto', 'Auto'),
        ('Metal', 'Metal'),
        ('Realty', 'Realty'),
        ('Other', 'Other'),
    ]

    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='trades'
    )

    symbol = models.CharField(max_length=30)
    sector = models.CharField(max_length=30, choices=SECTORS, default='Technology')
    status = models.CharField(max_length=20, choices=STATUSES, default=RUNNING)

    buy_price = models.DecimalField(max_digits=20, decimal_places=4)
    qty = models.DecimalField(max_digits=20, decimal_places=4)
    sl = models.DecimalField(max_digits=20, decimal_places=4)
    target = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    buy_date = models.DateField()

    # journal notes
    reason = models.TextField(null=True, blank=True)
    timing = models.CharField(max_length=100, null=True, blank=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)
    chart_link = models.URLField(max_length=500, null=True, blank=True)
    tags = models.CharField(max_length=255, null=True, blank=True)

    exit_price = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    exit_date = models.DateField(null=True, blank=True)

    # buy_price * qty, kept in sync on every save
    deployed = models.DecimalField(max_digits=24, decimal_places=4, default=0, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'trades'
        indexes = [
            models.Index(fields=['user', 'status'], name='trades_user_id_1c8e1f_idx'),
            models.Index(fields=['user', 'created_at'], name='trades_user_id_6b0d2a_idx'),
            models.Index(fields=['symbol'], name='trades_symbol_3f9c7e_idx'),
        ]
        ordering = ['-created_at']

    def save(self, *args, **kwargs):
        self.deployed = (self.buy_price or 0) * (self.qty or 0)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.user.username} - {self.symbol} - {self.status}"


class Capital(models.Model):
    """Total trading capital, one row per user"""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='capital'
    )
    total = models.DecimalField(max_digits=20, decimal_places=2, default=default_capital)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'capital'
        verbose_name = 'Capital'
        verbose_name_plural = 'Capital'

    def __str__(self):
        return f"{self.user.username}'s capital"
