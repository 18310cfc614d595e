# =============================================================================
# hostels/models.py - 호스텔(관리자) 및 멤버 관리
# =============================================================================

"""
호스텔 및 멤버

Django User 하나가 관리자(Hostel) 또는 멤버(Member) 중 하나의 프로필을 가집니다.
- Hostel: 관리 단위 (관리자 1명)
- Member: 호스텔에 소속된 구성원 (바자 금액 = 공동 장보기 분담금)
"""
from decimal import Decimal

from django.contrib.auth.models import User
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel


class Hostel(TimeStampedModel):
    """호스텔 (관리자 프로필)"""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='hostel')
    hostel_name = models.CharField(max_length=100)
    full_name = models.CharField(max_length=100)
    email = models.EmailField()

    class Meta:
        db_table = 'hostels'
        ordering = ['hostel_name']

    def __str__(self):
        return self.hostel_name


class MemberQuerySet(models.QuerySet):
    """Member 전용 QuerySet"""

    def for_hostel(self, hostel):
        return self.filter(hostel=hostel)

    def search(self, term):
        if not term:
            return self
        return self.filter(models.Q(name__icontains=term) | models.Q(email__icontains=term))


class Member(TimeStampedModel):
    """호스텔 멤버"""

    hostel = models.ForeignKey(Hostel, on_delete=models.CASCADE, related_name='members', db_index=True)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='member')
    name = models.CharField(max_length=100, db_index=True)
    email = models.EmailField()
    bazar_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    objects = MemberQuerySet.as_manager()

    class Meta:
        db_table = 'members'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['hostel', 'name'], name='members_hostel_name_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.email})"
