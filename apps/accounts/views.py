# Django 기본
from django.shortcuts import render, redirect
from django.urls import reverse_lazy
from django.contrib import messages
from django.contrib.auth import login as auth_login, logout as auth_logout
from django.utils.decorators import method_decorator

# Django 인증 관련
from django.contrib.auth.views import (
    LoginView as DjangoLoginView,
    LogoutView as DjangoLogoutView,
    PasswordChangeView
)
from django.contrib.messages.views import SuccessMessageMixin

# 데이터베이스
from django.db import IntegrityError

# 기타
import logging

# 앱 내부
from .decorators import dashboard_url_for, identity_required, member_required
from .forms import AdminLoginForm, AdminSignupForm, MemberLoginForm, NewPasswordForm
from .identity import Role, forget_identity, request_identity

logger = logging.getLogger(__name__)


def home(request):
    """역할별 대시보드로 보내기 (비로그인 → 멤버 로그인)"""
    if not request.user.is_authenticated:
        return redirect('accounts:login')

    identity = request_identity(request)
    if identity.role is Role.UNAFFILIATED:
        auth_logout(request)
        messages.error(request, 'Your account is not linked to any hostel.')
        return redirect('accounts:login')

    return redirect(dashboard_url_for(identity))


class MemberLoginView(DjangoLoginView):
    """멤버 로그인"""
    template_name = "accounts/login.html"
    authentication_form = MemberLoginForm
    redirect_authenticated_user = True
    next_page = reverse_lazy("dashboard:member")

    def form_invalid(self, form):
        logger.warning(f"멤버 로그인 실패: {form.data.get('username', '')}")
        return super().form_invalid(form)


class AdminLoginView(DjangoLoginView):
    """관리자 로그인"""
    template_name = "accounts/admin_login.html"
    authentication_form = AdminLoginForm
    redirect_authenticated_user = True
    next_page = reverse_lazy("dashboard:admin")

    def form_invalid(self, form):
        logger.warning(f"관리자 로그인 실패: {form.data.get('username', '')}")
        return super().form_invalid(form)


class UserLogoutView(DjangoLogoutView):
    """로그아웃 (POST)"""
    next_page = reverse_lazy("accounts:login")


def admin_signup(request):
    """
    호스텔 관리자 가입
    - User + Hostel 생성 (한 트랜잭션)
    - 가입 즉시 로그인
    """
    if request.user.is_authenticated:
        return redirect('accounts:home')

    if request.method == "POST":
        form = AdminSignupForm(request.POST)
        if form.is_valid():
            try:
                hostel = form.save()
                auth_login(request, hostel.user)
                forget_identity(request)
                logger.info(f"호스텔 가입: {hostel.hostel_name} (ID: {hostel.pk}, Email: {hostel.email})")
                messages.success(request, f"Welcome, {hostel.full_name}! {hostel.hostel_name} is ready.")
                return redirect("dashboard:admin")
            except IntegrityError as e:
                logger.error(f"호스텔 가입 실패 (중복 데이터): {e}")
                messages.error(request, "This email is already registered.")
            except Exception as e:
                logger.error(f"호스텔 가입 중 예상치 못한 오류: {e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, "Please check the form.")
    else:
        form = AdminSignupForm()

    return render(request, "accounts/admin_signup.html", {"form": form})


@method_decorator(identity_required, name='dispatch')
class HostelPasswordChangeView(SuccessMessageMixin, PasswordChangeView):
    """
    비밀번호 변경 (관리자/멤버 공용)
    - 새 비밀번호 + 확인만 입력
    - 변경 후 세션 유지 (PasswordChangeView 가 세션 해시 갱신)
    """
    template_name = 'accounts/password_change.html'
    form_class = NewPasswordForm
    success_url = reverse_lazy('accounts:home')
    success_message = "Password changed successfully"

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"비밀번호 변경: {self.request.user.username} (ID: {self.request.user.id})")
        return response


@member_required
def profile(request, member):
    """멤버 프로필 (이름, 이메일, 바자 금액, 가입일)"""
    return render(request, 'accounts/profile.html', {'member': member})
