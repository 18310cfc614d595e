"""
프로젝트 공통 추상 모델

- TimeStampedModel: 생성/수정 시간 자동 추적
- HostelOwnedModel: 호스텔 소유 + 타임스탬프
"""

from django.db import models


class TimeStampedModel(models.Model):
    """생성/수정 시간 자동 추적"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class HostelOwnedModel(TimeStampedModel):
    """
    호스텔 소유 리소스 (타임스탬프 포함)

    식사표, 지출, 공지는 모두 하나의 호스텔에 속하며
    조회는 항상 호스텔 단위로 범위가 정해집니다.

    사용 방법:
        class Expense(HostelOwnedModel):
            amount = models.DecimalField(...)

        Expense.objects.for_hostel(hostel)
    """

    hostel = models.ForeignKey(
        'hostels.Hostel',
        on_delete=models.CASCADE,
        related_name='%(class)s_set',
        db_index=True
    )

    class Meta:
        abstract = True
