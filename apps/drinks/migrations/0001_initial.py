import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Drink',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('type', models.CharField(choices=[('can', 'Can'), ('bottle', 'Bottle'), ('draft', 'Draft'), ('other', 'Other')], default='can', max_length=20)),
                ('volume', models.DecimalField(decimal_places=2, max_digits=8, validators=[MinValueValidator(Decimal('0.01'))])),
                ('alcohol_percentage', models.DecimalField(decimal_places=2, max_digits=5, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('sort_order', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drinks', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'drinks',
                'ordering': ['sort_order', 'created_at'],
                'indexes': [models.Index(fields=['owner', 'sort_order'], name='drinks_owner_sort_idx')],
            },
        ),
        migrations.CreateModel(
            name='ConsumptionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField()),
                ('quantity', models.DecimalField(decimal_places=2, max_digits=8, validators=[MinValueValidator(Decimal('0'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('drink', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='records', to='drinks.drink')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='consumption_records', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'consumption_records',
                'ordering': ['date', 'created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'date'], name='records_owner_date_idx'),
                    models.Index(fields=['drink'], name='records_drink_idx'),
                ],
            },
        ),
    ]
