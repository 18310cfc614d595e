"""
Member ↔ User 연동 시그널

멤버가 삭제되면 (뷰, 관리자 사이트, 호스텔 CASCADE 어느 경로든)
로그인 계정도 함께 삭제하여 더 이상 로그인할 수 없게 합니다.
"""
import logging

from django.contrib.auth.models import User
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Member

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Member)
def revoke_member_identity(sender, instance, **kwargs):
    """멤버 삭제 후 연결된 User 삭제"""
    deleted, _ = User.objects.filter(pk=instance.user_id).delete()
    if deleted:
        logger.info(f"멤버 계정 회수: {instance.email} (user_id={instance.user_id})")
