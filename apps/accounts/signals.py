"""
로그인 시 역할 캐시 초기화

세션은 로그인 시 같은 사용자면 유지되므로 (cycle_key)
이전에 캐시된 역할이 남지 않도록 매번 지웁니다.
"""
import logging

from django.contrib.auth.signals import user_logged_in
from django.dispatch import receiver

from .identity import SESSION_ROLE_KEY

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def reset_cached_role(sender, request, user, **kwargs):
    if request is None or not hasattr(request, 'session'):
        return
    request.session.pop(SESSION_ROLE_KEY, None)
    if hasattr(request, '_cached_identity'):
        del request._cached_identity
    logger.info(f"로그인: {user.username} (ID: {user.pk})")
