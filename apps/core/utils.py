"""공통 헬퍼 (페이지네이션, 금액 변환)"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.core.paginator import Paginator

ZERO = Decimal('0.00')
CENT = Decimal('0.01')


def get_page(queryset, page_number, per_page=None):
    """
    페이지 번호 검증 후 Page 객체 반환

    Args:
        queryset: 페이지네이션할 QuerySet
        page_number: 페이지 번호 (문자열/None 허용)
        per_page: 페이지당 항목 수 (기본 HOSTEL_PAGE_SIZE)
    """
    paginator = Paginator(queryset, per_page or settings.HOSTEL_PAGE_SIZE)

    try:
        page_num = int(page_number) if page_number else 1
        if page_num < 1:
            page_num = 1
        elif page_num > paginator.num_pages and paginator.num_pages > 0:
            page_num = paginator.num_pages
    except (ValueError, TypeError):
        page_num = 1

    return paginator.get_page(page_num)


def to_decimal(value):
    """
    값을 Decimal로 변환 (None/빈 값/잘못된 값은 0)
    문자열을 거쳐 변환하여 부동소수점 오차 방지
    """
    if value is None or str(value).strip() == '':
        return ZERO

    if isinstance(value, Decimal):
        return value

    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO


def quantize_money(value):
    """소수점 2자리 반올림 (표시/내보내기용)"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
