"""
공동 지출 (바자 외 기타 지출: 가스비, 전기료, 식자재 추가 구매 등)

지출 합계는 멤버 바자 금액과 더해져 식비 평균 단가 계산의 분자가 됩니다.
"""
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum
from django.utils import timezone

from apps.core.models import HostelOwnedModel


class ExpenseQuerySet(models.QuerySet):
    """Expense 전용 QuerySet"""

    def for_hostel(self, hostel):
        return self.filter(hostel=hostel)

    def by_month(self, year, month):
        return self.filter(date__year=year, date__month=month)

    def total(self):
        return self.aggregate(total=Sum('amount'))['total'] or Decimal('0.00')


class Expense(HostelOwnedModel):
    """지출 내역"""

    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField(default=timezone.localdate, db_index=True)

    objects = ExpenseQuerySet.as_manager()

    class Meta:
        db_table = 'expenses'
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['hostel', 'date'], name='expenses_hostel_date_idx'),
        ]

    def __str__(self):
        return f"{self.description} ({self.amount:,})"
