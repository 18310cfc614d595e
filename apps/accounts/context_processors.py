from django.conf import settings

from .identity import request_identity


def identity(request):
    """템플릿 공용: 역할별 네비게이션 및 통화 기호"""
    current = request_identity(request) if hasattr(request, 'session') else None
    return {
        'identity': current,
        'currency': settings.HOSTEL_CURRENCY_SYMBOL,
    }
