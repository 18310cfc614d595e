# =============================================================================
# meals/models.py - 식사표 및 식사 기록
# =============================================================================

"""
식사표(Meal)와 멤버별 식사 기록(MealRecord)

- Meal: 호스텔별 날짜당 1개 (hostel + date 유니크)
- MealRecord: 식사표 x 멤버 당 1개, 점심(day)/저녁(night) 두 개의 플래그
"""
from django.db import models
from django.db.models import Count, Q

from apps.core.models import HostelOwnedModel, TimeStampedModel
from apps.hostels.models import Member


class MealQuerySet(models.QuerySet):
    """Meal 전용 QuerySet"""

    def for_hostel(self, hostel):
        return self.filter(hostel=hostel)

    def with_counts(self):
        """식사표별 점심/저녁/합계 식수"""
        return self.annotate(
            day_count=Count('records', filter=Q(records__day_meal=True)),
            night_count=Count('records', filter=Q(records__night_meal=True)),
        )


class Meal(HostelOwnedModel):
    """식사표 (호스텔 + 날짜)"""

    date = models.DateField(db_index=True)

    objects = MealQuerySet.as_manager()

    class Meta:
        db_table = 'meals'
        ordering = ['-date']
        constraints = [
            models.UniqueConstraint(
                fields=['hostel', 'date'],
                name='unique_meal_chart_per_hostel_date'
            )
        ]

    def __str__(self):
        return f"{self.hostel} - {self.date:%Y-%m-%d}"

    @property
    def total_count(self):
        """with_counts() 로 조회한 경우에만 사용"""
        return self.day_count + self.night_count


class MealRecordQuerySet(models.QuerySet):
    """MealRecord 전용 QuerySet"""

    def for_hostel(self, hostel):
        return self.filter(meal__hostel=hostel)

    def for_member(self, member):
        return self.filter(member=member)


class MealRecord(TimeStampedModel):
    """멤버별 식사 기록"""

    MEAL_KIND_FIELDS = {
        'day': 'day_meal',
        'night': 'night_meal',
    }

    meal = models.ForeignKey(Meal, on_delete=models.CASCADE, related_name='records')
    member = models.ForeignKey(Member, on_delete=models.CASCADE, related_name='meal_records')
    day_meal = models.BooleanField(default=False)
    night_meal = models.BooleanField(default=False)

    objects = MealRecordQuerySet.as_manager()

    class Meta:
        db_table = 'meal_records'
        ordering = ['member__name']
        constraints = [
            models.UniqueConstraint(
                fields=['meal', 'member'],
                name='unique_meal_record_per_member'
            )
        ]

    def __str__(self):
        return f"{self.meal} / {self.member.name}"
