import logging

from django.http import HttpResponse
from django.shortcuts import render
from django.utils import timezone

from apps.accounts.decorators import admin_required, member_required
from apps.hostels.models import Member
from apps.notices.models import Notice
from .services import hostel_snapshot, member_snapshot, member_statement
from .utils import export_statement_to_excel

logger = logging.getLogger(__name__)

RECENT_NOTICE_COUNT = 3


@admin_required
def admin_dashboard(request, hostel):
    """
    관리자 대시보드

    - 총 멤버 수 (count 쿼리)
    - 총 식수 / 총 지출(바자 + 기타) / 평균 식비
    - 멤버별 정산표
    """
    stats, statement = member_statement(hostel)

    context = {
        'hostel': hostel,
        'total_members': Member.objects.for_hostel(hostel).count(),
        'stats': stats,
        'statement': statement,
        'owing_count': sum(1 for _, row in statement if not row.is_settled),
    }
    return render(request, 'dashboard/admin_dashboard.html', context)


@admin_required
def statement_export(request, hostel):
    """정산표 엑셀 다운로드"""
    stats, statement = member_statement(hostel)
    excel_file = export_statement_to_excel(hostel, stats, statement)

    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')
    filename = f"statement_{hostel.pk}_{timestamp}.xlsx"
    logger.info(f"정산표 내보내기: hostel_id={hostel.pk}, 멤버 {len(statement)}명")

    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@member_required
def member_dashboard(request, member):
    """
    멤버 대시보드

    - 내 식수 / 내 식비 / 평균 식비 / 바자 금액
    - 잔액 (바자 금액 - 식비, 음수면 낼 돈)
    - 최근 공지
    """
    hostel_stats = hostel_snapshot(member.hostel)
    stats = member_snapshot(member, hostel_stats=hostel_stats)

    context = {
        'member': member,
        'stats': stats,
        'hostel_stats': hostel_stats,
        'recent_notices': Notice.objects.for_hostel(member.hostel).latest_first()[:RECENT_NOTICE_COUNT],
    }
    return render(request, 'dashboard/member_dashboard.html', context)
