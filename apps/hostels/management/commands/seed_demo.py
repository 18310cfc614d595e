import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction as db_transaction
from django.utils import timezone

from apps.expenses.models import Expense
from apps.hostels.models import Hostel, Member
from apps.meals.models import Meal
from apps.meals.services import MealChartExists, create_meal_chart
from apps.notices.models import Notice

User = get_user_model()

DEMO_MEMBERS = [
    ('Karim', Decimal('1500.00')),
    ('Salam', Decimal('1200.00')),
    ('Rafiq', Decimal('1000.00')),
    ('Nabil', Decimal('800.00')),
    ('Jamal', Decimal('1500.00')),
]

DEMO_EXPENSES = [
    ('Gas cylinder', Decimal('1450.00')),
    ('Electricity bill', Decimal('900.00')),
    ('Spices and oil', Decimal('620.50')),
    ('Cook salary (advance)', Decimal('2000.00')),
]


class Command(BaseCommand):
    help = '데모 호스텔 데이터 생성 (관리자 1명 + 멤버 + 식사표 + 지출 + 공지)'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, default='admin@demo-mess.com', help='관리자 이메일')
        parser.add_argument('--password', type=str, default='demo1234', help='관리자/멤버 공통 비밀번호')
        parser.add_argument('--days', type=int, default=14, help='생성할 식사표 일수 (오늘부터 과거로)')
        parser.add_argument('--seed', type=int, default=None, help='난수 시드 (재현용)')

    @db_transaction.atomic
    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        password = options['password']
        days = options['days']

        if days < 0:
            raise CommandError('--days 는 0 이상이어야 합니다.')

        rng = random.Random(options['seed'])

        self.stdout.write("=== 데모 데이터 생성 시작 ===")

        # 1. 관리자 + 호스텔
        user, created = User.objects.get_or_create(username=email, defaults={'email': email})
        if created:
            user.set_password(password)
            user.save()

        hostel, _ = Hostel.objects.get_or_create(
            user=user,
            defaults={'hostel_name': 'Demo Mess', 'full_name': 'Demo Admin', 'email': email},
        )

        # 2. 멤버
        domain = email.split('@', 1)[1]
        for name, bazar in DEMO_MEMBERS:
            member_email = f"{name.lower()}@{domain}"
            if Member.objects.filter(hostel=hostel, email=member_email).exists():
                continue
            member_user = User.objects.create_user(username=member_email, email=member_email, password=password)
            Member.objects.create(hostel=hostel, user=member_user, name=name, email=member_email, bazar_amount=bazar)

        # 3. 식사표 (기존 날짜는 건너뜀)
        today = timezone.localdate()
        chart_count = 0
        for offset in range(days):
            try:
                meal = create_meal_chart(hostel, today - timedelta(days=offset))
            except MealChartExists:
                continue
            for record in meal.records.all():
                record.day_meal = rng.random() < 0.8
                record.night_meal = rng.random() < 0.9
                record.save(update_fields=['day_meal', 'night_meal', 'updated_at'])
            chart_count += 1

        # 4. 지출 / 공지
        if not Expense.objects.for_hostel(hostel).exists():
            for i, (description, amount) in enumerate(DEMO_EXPENSES):
                Expense.objects.create(hostel=hostel, description=description, amount=amount, date=today - timedelta(days=i * 3))

        if not Notice.objects.for_hostel(hostel).exists():
            Notice.objects.create(hostel=hostel, title='Welcome', message='Mark your meals before 10am every day.')

        self.stdout.write(self.style.SUCCESS(
            f"✅ {hostel.hostel_name}: 멤버 {Member.objects.for_hostel(hostel).count()}명, "
            f"식사표 {Meal.objects.for_hostel(hostel).count()}개 (신규 {chart_count}), "
            f"관리자 {email} / {password}"
        ))
