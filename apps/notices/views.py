import logging

from django.contrib import messages
from django.shortcuts import render, redirect, get_object_or_404

from apps.accounts.decorators import admin_required, member_required
from apps.core.utils import get_page
from .forms import NoticeForm
from .models import Notice

logger = logging.getLogger(__name__)


@admin_required
def notice_list(request, hostel):
    """공지 관리 (관리자)"""
    notices = Notice.objects.for_hostel(hostel).latest_first()
    page_obj = get_page(notices, request.GET.get('page'))
    return render(request, 'notices/notice_list.html', {'page_obj': page_obj})


@admin_required
def notice_create(request, hostel):
    """공지 작성"""
    if request.method == 'POST':
        form = NoticeForm(request.POST)
        if form.is_valid():
            try:
                notice = form.save(commit=False)
                notice.hostel = hostel
                notice.save()
                logger.info(f"공지 등록: {notice.title} (ID: {notice.pk}) - 호스텔: {hostel.hostel_name}")
                messages.success(request, 'Notice posted.')
                return redirect('notices:notice_list')
            except Exception as e:
                logger.error(f"공지 등록 중 오류: hostel_id={hostel.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Please check the form.')
    else:
        form = NoticeForm()

    return render(request, 'notices/notice_form.html', {'form': form})


@admin_required
def notice_delete(request, hostel, pk):
    """공지 삭제 (GET: 확인, POST: 삭제)"""
    notice = get_object_or_404(Notice, pk=pk, hostel=hostel)

    if request.method == 'POST':
        title = notice.title
        try:
            notice.delete()
        except Exception as e:
            logger.error(f"공지 삭제 중 오류: notice_id={pk}, error={e}", exc_info=True)
            messages.error(request, str(e))
            return redirect('notices:notice_list')

        logger.info(f"공지 삭제: {title} (ID: {pk})")
        messages.success(request, 'Notice deleted.')
        return redirect('notices:notice_list')

    return render(request, 'notices/notice_confirm_delete.html', {'notice': notice})


@member_required
def notice_board(request, member):
    """공지 게시판 (멤버, 읽기 전용)"""
    notices = Notice.objects.for_hostel(member.hostel).latest_first()
    page_obj = get_page(notices, request.GET.get('page'))
    return render(request, 'notices/notice_board.html', {'page_obj': page_obj})
