"""
식비 집계 계산

호스텔 단위로 이미 조회된 행(row)들을 받아 파생 수치를 계산합니다.
DB 조회는 services.py 에서 하고, 여기는 순수 함수만 둡니다.

계산 규칙:
    - 식수(meal unit): 기록 1건당 점심 1 + 저녁 1 (최대 2)
    - 총 풀(pool) = 멤버 바자 금액 합계 + 지출 합계
    - 평균 식비 = 총 풀 / 총 식수 (총 식수 0 이면 0)
    - 개인 식비 = 총 풀 x 개인 식수 / 총 식수 (곱한 뒤 나눔)
    - 잔액 = 바자 금액 - 개인 식비 (음수면 낼 돈이 남은 상태)

행은 모델 인스턴스 또는 .values() 딕셔너리 둘 다 허용합니다.
None 이 들어오면 (조회 실패) 빈 목록으로 보고 0 으로 계산합니다.
"""
from dataclasses import dataclass
from decimal import Decimal

from apps.core.utils import quantize_money, to_decimal

ZERO = Decimal('0')


@dataclass(frozen=True)
class HostelStats:
    """호스텔 전체 집계"""
    total_members: int
    total_meals: int
    total_bazar: Decimal
    total_expenses: Decimal
    total_pool: Decimal
    avg_meal_cost: Decimal


@dataclass(frozen=True)
class MemberStats:
    """멤버 개인 집계"""
    personal_meals: int
    avg_meal_rate: Decimal
    personal_meal_cost: Decimal
    contribution: Decimal
    balance: Decimal

    @property
    def is_settled(self):
        """낼 돈이 없는 상태 (센트 단위 잔액 0 이상)"""
        return quantize_money(self.balance) >= 0


def _get(row, name):
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def count_meals(meal_records):
    """점심/저녁 플래그 중 True 인 개수 합계"""
    total = 0
    for record in meal_records or ():
        total += (1 if _get(record, 'day_meal') else 0) + (1 if _get(record, 'night_meal') else 0)
    return total


def sum_amounts(rows, field):
    """금액 필드 합계 (Decimal)"""
    total = ZERO
    for row in rows or ():
        total += to_decimal(_get(row, field))
    return total


def meal_rate(total_pool, total_meals):
    """식수 1회당 평균 단가 (식수 0 이면 0)"""
    if total_meals > 0:
        return to_decimal(total_pool) / total_meals
    return ZERO


def compute_hostel_stats(members, meal_records, expenses):
    """
    호스텔 전체 집계

    Args:
        members: 멤버 행 (bazar_amount)
        meal_records: 호스텔의 모든 식사 기록 (day_meal, night_meal)
        expenses: 지출 행 (amount)

    Returns:
        HostelStats
    """
    members = list(members or ())
    total_meals = count_meals(meal_records)
    total_bazar = sum_amounts(members, 'bazar_amount')
    total_expenses = sum_amounts(expenses, 'amount')
    total_pool = total_bazar + total_expenses

    return HostelStats(
        total_members=len(members),
        total_meals=total_meals,
        total_bazar=total_bazar,
        total_expenses=total_expenses,
        total_pool=total_pool,
        avg_meal_cost=meal_rate(total_pool, total_meals),
    )


def compute_member_stats(member_meal_records, hostel_total_meals, hostel_total_pool, member_contribution):
    """
    멤버 개인 집계

    Args:
        member_meal_records: 해당 멤버의 식사 기록
        hostel_total_meals: 호스텔 총 식수
        hostel_total_pool: 호스텔 총 풀 (바자 + 지출)
        member_contribution: 멤버 바자 금액

    Returns:
        MemberStats
    """
    personal_meals = count_meals(member_meal_records)
    hostel_total_meals = hostel_total_meals or 0
    avg_meal_rate = meal_rate(hostel_total_pool, hostel_total_meals)
    # 단가를 먼저 나누면 나머지 오차로 정산 완료 멤버가 음수 잔액이 됨
    if hostel_total_meals > 0:
        personal_meal_cost = to_decimal(hostel_total_pool) * personal_meals / hostel_total_meals
    else:
        personal_meal_cost = ZERO
    contribution = to_decimal(member_contribution)

    return MemberStats(
        personal_meals=personal_meals,
        avg_meal_rate=avg_meal_rate,
        personal_meal_cost=personal_meal_cost,
        contribution=contribution,
        balance=contribution - personal_meal_cost,
    )
