import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('hostels', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Meal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('date', models.DateField(db_index=True)),
                ('hostel', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='meal_set', to='hostels.hostel')),
            ],
            options={
                'db_table': 'meals',
                'ordering': ['-date'],
                'constraints': [models.UniqueConstraint(fields=('hostel', 'date'), name='unique_meal_chart_per_hostel_date')],
            },
        ),
        migrations.CreateModel(
            name='MealRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('day_meal', models.BooleanField(default=False)),
                ('night_meal', models.BooleanField(default=False)),
                ('meal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='records', to='meals.meal')),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='meal_records', to='hostels.member')),
            ],
            options={
                'db_table': 'meal_records',
                'ordering': ['member__name'],
                'constraints': [models.UniqueConstraint(fields=('meal', 'member'), name='unique_meal_record_per_member')],
            },
        ),
    ]
