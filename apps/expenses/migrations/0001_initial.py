from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('hostels', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('description', models.CharField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('hostel', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expense_set', to='hostels.hostel')),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-date', '-id'],
                'indexes': [models.Index(fields=['hostel', 'date'], name='expenses_hostel_date_idx')],
            },
        ),
    ]
