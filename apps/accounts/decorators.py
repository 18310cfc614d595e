"""
역할별 접근 제어 데코레이터

    @admin_required
    def member_list(request, hostel): ...

    @member_required
    def member_dashboard(request, member): ...

판별된 프로필을 뷰에 키워드 인자로 넘겨주므로
뷰는 전역 상태 없이 자기 호스텔/멤버만 다룹니다.

규칙:
    - 비로그인 → 해당 역할의 로그인 화면 (?next=)
    - 다른 역할 → 자기 대시보드
    - 프로필 없음(UNAFFILIATED) → 로그아웃 후 멤버 로그인 화면
"""
import logging
from functools import wraps

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect
from django.urls import reverse

from .identity import Role, request_identity

logger = logging.getLogger(__name__)

LOGIN_URLS = {
    Role.ADMIN: 'accounts:admin_login',
    Role.MEMBER: 'accounts:login',
}

DASHBOARD_URLS = {
    Role.ADMIN: 'dashboard:admin',
    Role.MEMBER: 'dashboard:member',
}


def dashboard_url_for(identity):
    """역할별 대시보드 URL (판별 불가면 멤버 로그인)"""
    if identity is None or identity.role not in DASHBOARD_URLS:
        return reverse('accounts:login')
    return reverse(DASHBOARD_URLS[identity.role])


def _role_required(required_role, kwarg_name):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return redirect_to_login(request.get_full_path(), reverse(LOGIN_URLS[required_role]))

            identity = request_identity(request)

            if identity.role is Role.UNAFFILIATED:
                logger.warning(f"프로필 없는 계정 접근 차단: user_id={request.user.pk}")
                logout(request)
                messages.error(request, 'Your account is not linked to any hostel.')
                return redirect('accounts:login')

            if identity.role is not required_role:
                return redirect(dashboard_url_for(identity))

            kwargs[kwarg_name] = identity.profile
            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator


admin_required = _role_required(Role.ADMIN, 'hostel')
member_required = _role_required(Role.MEMBER, 'member')


def identity_required(view_func):
    """역할 상관없이 관리자/멤버 프로필이 있는 사용자만 (비밀번호 변경 등)"""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path(), reverse('accounts:login'))

        identity = request_identity(request)
        if identity.role is Role.UNAFFILIATED:
            logout(request)
            messages.error(request, 'Your account is not linked to any hostel.')
            return redirect('accounts:login')

        return view_func(request, *args, **kwargs)
    return _wrapped
