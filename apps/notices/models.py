from django.db import models

from apps.core.models import HostelOwnedModel


class NoticeQuerySet(models.QuerySet):

    def for_hostel(self, hostel):
        return self.filter(hostel=hostel)

    def latest_first(self):
        return self.order_by('-created_at', '-id')


class Notice(HostelOwnedModel):
    """공지사항 (관리자 작성, 같은 호스텔 멤버 전원 열람)"""

    title = models.CharField(max_length=200)
    message = models.TextField()

    objects = NoticeQuerySet.as_manager()

    class Meta:
        db_table = 'notices'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title
