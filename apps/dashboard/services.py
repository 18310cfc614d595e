"""
대시보드 집계용 행 조회

화면마다 필요한 행을 새로 조회하여 stats.py 의 순수 함수에 넘깁니다.
캐시 없음: 매 요청마다 처음부터 다시 계산합니다.
조회 실패 시 해당 행은 빈 목록으로 대체되어 수치가 0 으로 떨어집니다.
"""
import logging

from django.db import DatabaseError

from apps.expenses.models import Expense
from apps.hostels.models import Member
from apps.meals.models import MealRecord
from .stats import compute_hostel_stats, compute_member_stats

logger = logging.getLogger(__name__)


def _fetch(label, queryset):
    """QuerySet 을 평가, DB 오류면 빈 목록"""
    try:
        return list(queryset)
    except DatabaseError as e:
        logger.error(f"집계용 조회 실패 ({label}): {e}", exc_info=True)
        return []


def hostel_snapshot(hostel):
    """호스텔 전체 집계 (HostelStats)"""
    members = _fetch('members', Member.objects.for_hostel(hostel).values('bazar_amount'))
    meal_records = _fetch(
        'meal_records',
        MealRecord.objects.for_hostel(hostel).values('day_meal', 'night_meal'),
    )
    expenses = _fetch('expenses', Expense.objects.for_hostel(hostel).values('amount'))

    return compute_hostel_stats(members, meal_records, expenses)


def member_snapshot(member, hostel_stats=None):
    """
    멤버 개인 집계 (MemberStats)

    hostel_stats 를 넘기면 호스텔 집계를 다시 조회하지 않습니다.
    """
    if hostel_stats is None:
        hostel_stats = hostel_snapshot(member.hostel)

    records = _fetch(
        'member_meal_records',
        MealRecord.objects.for_member(member).values('day_meal', 'night_meal'),
    )

    return compute_member_stats(
        records,
        hostel_stats.total_meals,
        hostel_stats.total_pool,
        member.bazar_amount,
    )


def member_statement(hostel, hostel_stats=None):
    """
    멤버별 정산표

    Returns:
        (hostel_stats, [(member, MemberStats), ...])
    """
    if hostel_stats is None:
        hostel_stats = hostel_snapshot(hostel)

    members = _fetch('statement_members', Member.objects.for_hostel(hostel).order_by('name'))
    records = _fetch(
        'statement_meal_records',
        MealRecord.objects.for_hostel(hostel).values('member_id', 'day_meal', 'night_meal'),
    )

    # 멤버별로 기록 묶기 (멤버 수만큼 쿼리하지 않도록)
    records_by_member = {}
    for record in records:
        records_by_member.setdefault(record['member_id'], []).append(record)

    rows = [
        (
            member,
            compute_member_stats(
                records_by_member.get(member.pk, []),
                hostel_stats.total_meals,
                hostel_stats.total_pool,
                member.bazar_amount,
            ),
        )
        for member in members
    ]
    return hostel_stats, rows
