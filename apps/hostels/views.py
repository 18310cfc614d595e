from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.db.models import Count, Q, Sum
from django.utils.http import urlencode
import logging

from apps.accounts.decorators import admin_required
from apps.core.utils import get_page, ZERO
from .forms import HostelSettingsForm, MemberForm, MemberSearchForm
from .models import Member

logger = logging.getLogger(__name__)


# =============================================================================
# Member 뷰
# =============================================================================

@admin_required
def member_list(request, hostel):
    """
    멤버 목록

    기능:
    - 본인 호스텔 멤버만 조회
    - 이름/이메일 검색
    - 페이지네이션
    """
    members = Member.objects.for_hostel(hostel).annotate(
        day_meals=Count('meal_records', filter=Q(meal_records__day_meal=True)),
        night_meals=Count('meal_records', filter=Q(meal_records__night_meal=True)),
    )

    search_form = MemberSearchForm(request.GET)
    query = ''
    if search_form.is_valid():
        search = search_form.cleaned_data.get('search')
        members = members.search(search)
        if search:
            query = urlencode({'search': search})

    members = members.order_by('-created_at')
    page_obj = get_page(members, request.GET.get('page'))

    # 요약 정보
    summary = Member.objects.for_hostel(hostel).aggregate(
        total_count=Count('id'),
        total_bazar=Sum('bazar_amount'),
    )

    context = {
        'page_obj': page_obj,
        'search_form': search_form,
        'query': query,
        'total_count': summary['total_count'] or 0,
        'total_bazar': summary['total_bazar'] or ZERO,
    }
    return render(request, 'hostels/member_list.html', context)


@admin_required
def member_create(request, hostel):
    """
    멤버 추가

    - 로그인 계정(User) 생성 + Member 생성 (한 트랜잭션)
    """
    if request.method == 'POST':
        form = MemberForm(request.POST, hostel=hostel)

        if form.is_valid():
            try:
                member = form.save()
                logger.info(f"멤버 추가: {member.name} ({member.email}) - 호스텔: {hostel.hostel_name}")
                messages.success(request, f'Member "{member.name}" added.')
                return redirect('hostels:member_list')

            except IntegrityError as e:
                logger.error(f"멤버 추가 실패 (무결성 제약): hostel_id={hostel.pk}, error={e}")
                messages.error(request, 'This email is already registered.')

            except ValidationError as e:
                logger.warning(f"멤버 검증 실패: hostel_id={hostel.pk}, error={e}")
                messages.error(request, '; '.join(e.messages))

            except Exception as e:
                logger.error(f"멤버 추가 중 예상치 못한 오류: hostel_id={hostel.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Could not add member. Please check the form.')
    else:
        form = MemberForm(hostel=hostel)

    context = {
        'form': form,
        'title': 'Add Member',
        'submit_text': 'Add',
    }
    return render(request, 'hostels/member_form.html', context)


@admin_required
def member_update(request, hostel, pk):
    """
    멤버 수정 (이름, 이메일, 바자 금액)

    - 비밀번호는 여기서 변경하지 않음
    """
    member = get_object_or_404(Member, pk=pk, hostel=hostel)

    if request.method == 'POST':
        form = MemberForm(request.POST, instance=member, hostel=hostel)

        if form.is_valid():
            try:
                form.save()
                logger.info(f"멤버 수정: {member.name} (ID: {member.pk}, bazar={member.bazar_amount})")
                messages.success(request, f'Member "{member.name}" updated.')
                return redirect('hostels:member_list')

            except IntegrityError as e:
                logger.error(f"멤버 수정 실패 (무결성 제약): member_id={member.pk}, error={e}")
                messages.error(request, 'This email is already registered.')

            except Exception as e:
                logger.error(f"멤버 수정 중 예상치 못한 오류: member_id={member.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Could not update member. Please check the form.')
    else:
        form = MemberForm(instance=member, hostel=hostel)

    context = {
        'form': form,
        'member': member,
        'title': 'Edit Member',
        'submit_text': 'Update',
    }
    return render(request, 'hostels/member_form.html', context)


@admin_required
def member_delete(request, hostel, pk):
    """
    멤버 삭제

    - GET: 확인 페이지
    - POST: Member 삭제 → 시그널이 로그인 계정도 삭제
    """
    member = get_object_or_404(Member, pk=pk, hostel=hostel)

    if request.method == 'POST':
        member_name = member.name
        try:
            member.delete()
        except Exception as e:
            logger.error(f"멤버 삭제 중 오류: member_id={pk}, error={e}", exc_info=True)
            messages.error(request, str(e))
            return redirect('hostels:member_list')

        logger.info(f"멤버 삭제: {member_name} (ID: {pk})")
        messages.success(request, f'Member "{member_name}" deleted.')
        return redirect('hostels:member_list')

    context = {
        'member': member,
        'meal_record_count': member.meal_records.count(),
    }
    return render(request, 'hostels/member_confirm_delete.html', context)


# =============================================================================
# Hostel 설정
# =============================================================================

@admin_required
def hostel_settings(request, hostel):
    """호스텔 이름 / 관리자 이름 수정"""
    if request.method == 'POST':
        form = HostelSettingsForm(request.POST, instance=hostel)
        if form.is_valid():
            try:
                form.save()
                logger.info(f"호스텔 설정 변경: {hostel.hostel_name} (ID: {hostel.pk})")
                messages.success(request, 'Profile updated successfully')
                return redirect('hostels:settings')
            except Exception as e:
                logger.error(f"호스텔 설정 저장 오류: hostel_id={hostel.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Please check the form.')
    else:
        form = HostelSettingsForm(instance=hostel)

    return render(request, 'hostels/settings.html', {'form': form, 'hostel': hostel})
