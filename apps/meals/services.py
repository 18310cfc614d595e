"""
식사표 생성 / 식사 토글

- 식사표는 호스텔 + 날짜 당 하나 (이미 있으면 기록을 만들기 전에 거부)
- 식사표 생성 시 현재 멤버 전원의 기록(점심/저녁 False)을 함께 생성
- 멤버가 처음 토글할 때 기록이 없으면 그 자리에서 생성
"""
import logging

from django.db import IntegrityError, transaction

from apps.hostels.models import Member
from .models import Meal, MealRecord

logger = logging.getLogger(__name__)


class MealChartExists(Exception):
    """같은 날짜의 식사표가 이미 있음"""

    def __init__(self, date):
        self.date = date
        super().__init__('Meal chart already exists for this date')


def create_meal_chart(hostel, date):
    """
    식사표 + 멤버별 기록 생성 (전부 성공 또는 전부 실패)

    Raises:
        MealChartExists: 같은 날짜 식사표가 이미 있을 때
    """
    if Meal.objects.filter(hostel=hostel, date=date).exists():
        raise MealChartExists(date)

    try:
        with transaction.atomic():
            meal = Meal.objects.create(hostel=hostel, date=date)
            records = [
                MealRecord(meal=meal, member=member, day_meal=False, night_meal=False)
                for member in Member.objects.for_hostel(hostel)
            ]
            MealRecord.objects.bulk_create(records)
    except IntegrityError:
        # 사전 확인 이후 동시에 생성된 경우 (유니크 제약)
        if Meal.objects.filter(hostel=hostel, date=date).exists():
            raise MealChartExists(date)
        raise

    logger.info(f"식사표 생성: {hostel.hostel_name} {date} (기록 {len(records)}건)")
    return meal


def toggle_meal(meal, member, kind):
    """
    멤버의 점심/저녁 식사 토글

    Args:
        kind: 'day' 또는 'night'

    Returns:
        갱신(또는 생성)된 MealRecord
    """
    field = MealRecord.MEAL_KIND_FIELDS.get(kind)
    if field is None:
        raise ValueError(f"Unknown meal kind: {kind}")

    with transaction.atomic():
        record = MealRecord.objects.select_for_update().filter(meal=meal, member=member).first()

        if record is None:
            try:
                with transaction.atomic():
                    record = MealRecord.objects.create(meal=meal, member=member, **{field: True})
            except IntegrityError:
                # 동시에 들어온 첫 토글이 먼저 기록을 만든 경우: 그 기록을 잠그고 토글
                logger.warning(f"식사 기록 동시 생성 감지: member_id={member.pk}, meal_id={meal.pk}")
                record = MealRecord.objects.select_for_update().get(meal=meal, member=member)
            else:
                logger.info(f"식사 기록 생성: member_id={member.pk}, meal_id={meal.pk}, {field}=True")
                return record

        setattr(record, field, not getattr(record, field))
        record.save(update_fields=[field, 'updated_at'])
        logger.info(f"식사 토글: member_id={member.pk}, meal_id={meal.pk}, {field}={getattr(record, field)}")

    return record
