"""
로그인 사용자 역할 판별

Django User 하나는 다음 셋 중 하나로 판별됩니다:
    - ADMIN: Hostel 프로필 보유 (호스텔 관리자)
    - MEMBER: Member 프로필 보유
    - UNAFFILIATED: 로그인은 됐지만 어느 쪽 프로필도 없음

역할은 세션당 한 번 판별하여 세션에 캐시하고,
프로필 행 자체는 매 요청마다 다시 읽습니다 (이름/바자 금액 변경 반영).
"""
import enum
import logging
from dataclasses import dataclass

from apps.hostels.models import Hostel, Member

logger = logging.getLogger(__name__)

SESSION_ROLE_KEY = '_hostel_role'


class Role(enum.Enum):
    ADMIN = 'admin'
    MEMBER = 'member'
    UNAFFILIATED = 'unaffiliated'


@dataclass(frozen=True)
class Identity:
    """판별된 역할 + 프로필 (Hostel / Member / None)"""
    role: Role
    profile: object = None

    @property
    def is_admin(self):
        return self.role is Role.ADMIN

    @property
    def is_member(self):
        return self.role is Role.MEMBER

    @property
    def hostel(self):
        """역할과 무관하게 소속 호스텔"""
        if self.is_admin:
            return self.profile
        if self.is_member:
            return self.profile.hostel
        return None


UNAFFILIATED = Identity(Role.UNAFFILIATED)


def _load_profile(user, role):
    """역할에 맞는 프로필 조회 (없으면 None)"""
    if role is Role.ADMIN:
        return Hostel.objects.filter(user=user).first()
    if role is Role.MEMBER:
        return Member.objects.select_related('hostel').filter(user=user).first()
    return None


def resolve_identity(user):
    """
    User → Identity (관리자 테이블 먼저, 그다음 멤버 테이블)

    익명 사용자는 None.
    """
    if user is None or not user.is_authenticated:
        return None

    for role in (Role.ADMIN, Role.MEMBER):
        profile = _load_profile(user, role)
        if profile is not None:
            return Identity(role, profile)

    return UNAFFILIATED


def get_identity(request):
    """
    세션 캐시를 사용한 역할 판별

    캐시된 역할의 프로필이 사라졌으면 (멤버 삭제 등) 다시 판별합니다.
    """
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None

    cached = request.session.get(SESSION_ROLE_KEY)
    if cached:
        role = Role(cached)
        if role is Role.UNAFFILIATED:
            return UNAFFILIATED
        profile = _load_profile(user, role)
        if profile is not None:
            return Identity(role, profile)
        logger.warning(f"캐시된 역할의 프로필 없음, 재판별: user_id={user.pk}, role={cached}")

    identity = resolve_identity(user)
    request.session[SESSION_ROLE_KEY] = identity.role.value
    return identity


def forget_identity(request):
    """세션 캐시 제거 (로그인 직후, 프로필 생성 직후)"""
    request.session.pop(SESSION_ROLE_KEY, None)
    if hasattr(request, '_cached_identity'):
        del request._cached_identity


def request_identity(request):
    """요청 단위로 한 번만 판별 (미들웨어/데코레이터/컨텍스트 프로세서 공용)"""
    if not hasattr(request, '_cached_identity'):
        request._cached_identity = get_identity(request)
    return request._cached_identity
