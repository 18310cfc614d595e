# =============================================================================
# conftest.py - pytest 공통 설정 및 Fixtures (전체 앱 공용)
# =============================================================================

import pytest
from decimal import Decimal
from django.contrib.auth.models import User
from django.test import Client

from apps.hostels.models import Hostel, Member


ADMIN_PASSWORD = 'adminpass123'
MEMBER_PASSWORD = 'memberpass123'


# =============================================================================
# 팩토리 Fixtures
# =============================================================================

@pytest.fixture
def create_hostel(db):
    """호스텔(관리자) 생성 팩토리"""
    def _create(email='admin@greenview.com', hostel_name='Green View Mess', **kwargs):
        user = User.objects.create_user(username=email, email=email, password=ADMIN_PASSWORD)
        defaults = {'full_name': 'Rahim Uddin'}
        defaults.update(kwargs)
        return Hostel.objects.create(user=user, hostel_name=hostel_name, email=email, **defaults)
    return _create


@pytest.fixture
def create_member(db):
    """멤버 생성 팩토리 (로그인 계정 포함)"""
    def _create(hostel, email, name='Member', bazar_amount=Decimal('0.00')):
        user = User.objects.create_user(username=email, email=email, password=MEMBER_PASSWORD)
        return Member.objects.create(
            hostel=hostel,
            user=user,
            name=name,
            email=email,
            bazar_amount=bazar_amount,
        )
    return _create


# =============================================================================
# Hostel / Member Fixtures
# =============================================================================

@pytest.fixture
def hostel(create_hostel):
    """기본 테스트 호스텔"""
    return create_hostel()


@pytest.fixture
def other_hostel(create_hostel):
    """다른 호스텔 (격리 테스트용)"""
    return create_hostel(email='admin@blueview.com', hostel_name='Blue View Mess', full_name='Jamal Hossain')


@pytest.fixture
def member(hostel, create_member):
    """기본 테스트 멤버 (바자 500)"""
    return create_member(hostel, 'karim@example.com', name='Karim', bazar_amount=Decimal('500.00'))


@pytest.fixture
def second_member(hostel, create_member):
    """두 번째 멤버 (바자 300)"""
    return create_member(hostel, 'salam@example.com', name='Salam', bazar_amount=Decimal('300.00'))


@pytest.fixture
def other_member(other_hostel, create_member):
    """다른 호스텔 멤버"""
    return create_member(other_hostel, 'nabil@example.com', name='Nabil', bazar_amount=Decimal('100.00'))


@pytest.fixture
def unaffiliated_user(db):
    """어느 프로필도 없는 계정"""
    return User.objects.create_user(
        username='nobody@example.com',
        email='nobody@example.com',
        password=MEMBER_PASSWORD,
    )


# =============================================================================
# 클라이언트 Fixtures
# =============================================================================

@pytest.fixture
def admin_client(hostel):
    """관리자로 로그인된 클라이언트"""
    client = Client()
    client.login(username=hostel.user.username, password=ADMIN_PASSWORD)
    client.user = hostel.user
    return client


@pytest.fixture
def member_client(member):
    """멤버로 로그인된 클라이언트"""
    client = Client()
    client.login(username=member.user.username, password=MEMBER_PASSWORD)
    client.user = member.user
    return client


@pytest.fixture
def other_member_client(other_member):
    """다른 호스텔 멤버로 로그인된 클라이언트"""
    client = Client()
    client.login(username=other_member.user.username, password=MEMBER_PASSWORD)
    return client


# =============================================================================
# 테스트 유틸리티 Fixtures
# =============================================================================

@pytest.fixture
def assert_message_contains():
    """메시지 검증 헬퍼"""
    def _assert(response, text):
        from django.contrib.messages import get_messages
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        assert any(text in msg for msg in messages), \
            f"Expected message containing '{text}', got: {messages}"
    return _assert
