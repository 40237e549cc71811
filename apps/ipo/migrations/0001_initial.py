import apps.ipo.models
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='IpoAccount',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('holder_name', models.CharField(max_length=150)),
                ('pan_encrypted', models.TextField(blank=True, null=True)),
                ('demat_name', models.CharField(blank=True, max_length=150, null=True)),
                ('demat_provider', models.CharField(default='Zerodha', max_length=50)),
                ('demat_id', models.CharField(blank=True, max_length=50, null=True)),
                ('bank', models.CharField(blank=True, max_length=100, null=True)),
                ('upi_id', models.CharField(blank=True, max_length=100, null=True)),
                ('phone', models.CharField(blank=True, max_length=20, null=True)),
                ('email', models.EmailField(blank=True, max_length=254, null=True)),
                ('category', models.CharField(default='Retail', max_length=20)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ipo_accounts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ipo_accounts',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='ipo_account_user_id_5d2b1c_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='IpoRecord',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('company_name', models.CharField(max_length=200)),
                ('symbol', models.CharField(blank=True, max_length=30, null=True)),
                ('year', models.CharField(default=apps.ipo.models.current_year, max_length=4)),
                ('exchange', models.CharField(default='NSE + BSE', max_length=20)),
                ('sector', models.CharField(default='Technology', max_length=30)),
                ('ipo_price', models.DecimalField(decimal_places=4, max_digits=20)),
                ('lot_size', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('lots_applied', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('allotted', models.CharField(choices=[('Yes', 'Yes'), ('No', 'No')], default='Yes', max_length=3)),
                ('qty_allotted', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('amount_applied', models.DecimalField(blank=True, decimal_places=2, max_digits=20, null=True)),
                ('amount_paid', models.DecimalField(blank=True, decimal_places=2, max_digits=20, null=True)),
                ('listing_date', models.DateField(blank=True, null=True)),
                ('listing_price', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('selling_price', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('selling_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(default='Sold on Listing', max_length=50)),
                ('notes', models.TextField(blank=True, null=True)),
                ('gmp_at_apply', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('subscription_times', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('account', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='records', to='ipo.ipoaccount')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ipo_records', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ipo_records',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='ipo_records_user_id_8e4a0f_idx'),
                    models.Index(fields=['user', 'year'], name='ipo_records_user_id_2c7d9b_idx'),
                ],
            },
        ),
    ]
