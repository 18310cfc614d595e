# =============================================================================
# accounts/tests/test_views.py - 로그인 / 가입 / 비밀번호 / 프로필 뷰 테스트
# =============================================================================

import pytest
from django.contrib.auth.models import User
from django.test import Client
from django.urls import reverse

from apps.hostels.models import Hostel


@pytest.mark.django_db
class TestHomeView:
    """역할별 대시보드로 보내기"""

    def test_anonymous_to_member_login(self, client):
        response = client.get(reverse('accounts:home'))

        assert response.status_code == 302
        assert response.url == reverse('accounts:login')

    def test_admin_to_admin_dashboard(self, admin_client):
        response = admin_client.get(reverse('accounts:home'))

        assert response.url == reverse('dashboard:admin')

    def test_member_to_member_dashboard(self, member_client):
        response = member_client.get(reverse('home'))

        assert response.url == reverse('dashboard:member')

    def test_unaffiliated_logged_out(self, client, unaffiliated_user, assert_message_contains):
        client.force_login(unaffiliated_user)

        response = client.get(reverse('accounts:home'))

        assert response.url == reverse('accounts:login')
        assert '_auth_user_id' not in client.session
        assert_message_contains(response, 'not linked to any hostel')


@pytest.mark.django_db
class TestLoginViews:

    def test_member_login_success(self, client, member):
        response = client.post(reverse('accounts:login'), {
            'username': 'karim@example.com',
            'password': 'memberpass123',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard:member')

    def test_member_login_respects_next(self, client, member):
        response = client.post(reverse('accounts:login') + '?next=' + reverse('meals:my_meals'), {
            'username': 'karim@example.com',
            'password': 'memberpass123',
            'next': reverse('meals:my_meals'),
        })

        assert response.url == reverse('meals:my_meals')

    def test_admin_rejected_on_member_login(self, client, hostel):
        response = client.post(reverse('accounts:login'), {
            'username': hostel.email,
            'password': 'adminpass123',
        })

        assert response.status_code == 200
        assert '_auth_user_id' not in client.session
        assert 'Not authorized as member' in response.content.decode()

    def test_admin_login_success(self, client, hostel):
        response = client.post(reverse('accounts:admin_login'), {
            'username': hostel.email,
            'password': 'adminpass123',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard:admin')

    def test_member_rejected_on_admin_login(self, client, member):
        response = client.post(reverse('accounts:admin_login'), {
            'username': member.email,
            'password': 'memberpass123',
        })

        assert response.status_code == 200
        assert 'Not authorized as admin' in response.content.decode()

    def test_wrong_password(self, client, member):
        response = client.post(reverse('accounts:login'), {
            'username': member.email,
            'password': 'nope-nope',
        })

        assert response.status_code == 200
        assert '_auth_user_id' not in client.session

    def test_logout(self, member_client):
        response = member_client.post(reverse('accounts:logout'))

        assert response.status_code == 302
        assert response.url == reverse('accounts:login')
        assert '_auth_user_id' not in member_client.session


@pytest.mark.django_db
class TestAdminSignupView:

    def test_signup_logs_in_as_admin(self, client):
        response = client.post(reverse('accounts:admin_signup'), {
            'hostel_name': 'Sunrise Mess',
            'full_name': 'Abdul Karim',
            'email': 'owner@sunrise.com',
            'password1': 'secret123',
            'password2': 'secret123',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard:admin')
        hostel = Hostel.objects.get(email='owner@sunrise.com')
        assert int(client.session['_auth_user_id']) == hostel.user_id

        # 가입 직후 관리자 화면 접근 가능
        response = client.get(reverse('dashboard:admin'))
        assert response.status_code == 200

    def test_invalid_signup(self, client, assert_message_contains):
        response = client.post(reverse('accounts:admin_signup'), {
            'hostel_name': 'Sunrise Mess',
            'full_name': 'Abdul Karim',
            'email': 'owner@sunrise.com',
            'password1': 'secret123',
            'password2': 'different',
        })

        assert response.status_code == 200
        assert not User.objects.filter(username='owner@sunrise.com').exists()
        assert_message_contains(response, 'Please check the form.')

    def test_authenticated_user_redirected(self, admin_client):
        response = admin_client.get(reverse('accounts:admin_signup'))

        assert response.status_code == 302


@pytest.mark.django_db
class TestPasswordChangeView:

    def test_member_changes_password(self, member_client, member, assert_message_contains):
        response = member_client.post(reverse('accounts:password_change'), {
            'new_password1': 'brandnew123',
            'new_password2': 'brandnew123',
        })

        assert response.status_code == 302
        assert response.url == reverse('accounts:home')
        member.user.refresh_from_db()
        assert member.user.check_password('brandnew123')
        assert_message_contains(response, 'Password changed successfully')

        # 세션 유지
        assert member_client.get(reverse('dashboard:member')).status_code == 200

    def test_admin_changes_password(self, admin_client, hostel):
        response = admin_client.post(reverse('accounts:password_change'), {
            'new_password1': 'brandnew123',
            'new_password2': 'brandnew123',
        })

        assert response.status_code == 302
        hostel.user.refresh_from_db()
        assert hostel.user.check_password('brandnew123')

    def test_mismatch(self, member_client):
        response = member_client.post(reverse('accounts:password_change'), {
            'new_password1': 'brandnew123',
            'new_password2': 'brandnew124',
        })

        assert response.status_code == 200
        assert 'Passwords do not match' in response.content.decode()

    def test_requires_login(self, client):
        response = client.get(reverse('accounts:password_change'))

        assert response.status_code == 302
        assert reverse('accounts:login') in response.url


@pytest.mark.django_db
class TestProfileView:

    def test_member_profile(self, member_client, member):
        response = member_client.get(reverse('accounts:profile'))

        assert response.status_code == 200
        assert response.context['member'] == member
        assert 'karim@example.com' in response.content.decode()

    def test_admin_redirected(self, admin_client):
        response = admin_client.get(reverse('accounts:profile'))

        assert response.status_code == 302
        assert response.url == reverse('dashboard:admin')
