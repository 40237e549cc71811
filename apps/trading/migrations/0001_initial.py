import apps.trading.models
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
            name='Capital',
            fields=[
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, primary_key=True, related_name='capital', serialize=False, to=settings.AUTH_USER_MODEL)),
                ('total', models.DecimalField(decimal_places=2, default=apps.trading.models.default_capital, max_digits=20)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Capital',
                'verbose_name_plural': 'Capital',
                'db_table': 'capital',
            },
        ),
        migrations.CreateModel(
            name='Trade',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('symbol', models.CharField(max_length=30)),
                ('sector', models.CharField(choices=[('Technology', 'Technology'), ('Finance', 'Finance'), ('Pharma', 'Pharma'), ('Energy', 'Energy'), ('FMCG', 'FMCG'), ('Auto', 'Auto'), ('Metal', 'Metal'), ('Realty', 'Realty'), ('Other', 'Other')], default='Technology', max_length=30)),
                ('status', models.CharField(choices=[('Running', 'Running'), ('Exited', 'Exited'), ('Stop Hit', 'Stop Hit')], default='Running', max_length=20)),
                ('buy_price', models.DecimalField(decimal_places=4, max_digits=20)),
                ('qty', models.DecimalField(decimal_places=4, max_digits=20)),
                ('sl', models.DecimalField(decimal_places=4, max_digits=20)),
                ('target', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('buy_date', models.DateField()),
                ('reason', models.TextField(blank=True, null=True)),
                ('timing', models.CharField(blank=True, max_length=100, null=True)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('chart_link', models.URLField(blank=True, max_length=500, null=True)),
                ('tags', models.CharField(blank=True, max_length=255, null=True)),
                ('exit_price', models.DecimalField(blank=True, decimal_places=4, max_digits=20, null=True)),
                ('exit_date', models.DateField(blank=True, null=True)),
                ('deployed', models.DecimalField(decimal_places=4, default=0, editable=False, max_digits=24)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trades', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'trades',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'status'], name='trades_user_id_1c8e1f_idx'),
                    models.Index(fields=['user', 'created_at'], name='trades_user_id_6b0d2a_idx'),
                    models.Index(fields=['symbol'], name='trades_symbol_3f9c7e_idx'),
                ],
            },
        ),
    ]
