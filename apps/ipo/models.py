# apps/ipo/models.py
from django.db import models
from django.conf import settings
from django.utils import timezone


def current_year():
    return str(timezone.now().year)


class IpoAccount(models.Model):
    """Demat account an IPO application is made through"""

    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='ipo_accounts'
    )

    holder_name = models.CharField(max_length=150)
    # Fernet token, see apps.ipo.encryption
    pan_encrypted = models.TextField(null=True, blank=True)

    demat_name = models.CharField(max_length=150, null=True, blank=True)
    demat_provider = models.CharField(max_length=50, default='Zerodha')
    demat_id = models.CharField(max_length=50, null=True, blank=True)
    bank = models.CharField(max_length=100, null=True, blank=True)
    upi_id = models.CharField(max_length=100, null=True, blank=True)
    phone = models.CharField(max_length=20, null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    category = models.CharField(max_length=20, default='Retail')
    notes = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ipo_accounts'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='ipo_account_user_id_5d2b1c_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.holder_name} ({self.demat_provider})"


class IpoRecord(models.Model):
    """One IPO application and, once listed, its outcome"""

    ALLOTMENT = [
        ('Yes', 'Yes'),
        ('No', 'No'),
    ]

    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='ipo_records'
    )
    account = models.ForeignKey(
        IpoAccount,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='records'
    )

    company_name = models.CharField(max_length=200)
    symbol = models.CharField(max_length=30, null=True, blank=True)
    year = models.CharField(max_length=4, default=current_year)
    exchange = models.CharField(max_length=20, default='NSE + BSE')
    sector = models.CharField(max_length=30, default='Technology')

    ipo_price = models.DecimalField(max_digits=20, decimal_places=4)
    lot_size = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    lots_applied = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)

    allotted = models.CharField(max_length=3, choices=ALLOTMENT, default='Yes')
    qty_allotted = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    amount_applied = models.DecimalField(max_digits=20, decimal_places=2, null=True, blank=True)
    amount_paid = models.DecimalField(max_digits=20, decimal_places=2, null=True, blank=True)

    listing_date = models.DateField(null=True, blank=True)
    listing_price = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    selling_price = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    selling_date = models.DateField(null=True, blank=True)

    # free-form: Sold on Listing, Holding, Sold Later, Not Allotted, ...
    status = models.CharField(max_length=50, default='Sold on Listing')
    notes = models.TextField(null=True, blank=True)
    gmp_at_apply = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)
    subscription_times = models.DecimalField(max_digits=20, decimal_places=4, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ipo_records'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='ipo_records_user_id_8e4a0f_idx'),
            models.Index(fields=['user', 'year'], name='ipo_records_user_id_2c7d9b_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.company_name} ({self.year}) - {self.status}"
