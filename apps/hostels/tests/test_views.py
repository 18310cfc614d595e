# =============================================================================
# hostels/tests/test_views.py - 멤버 관리 / 호스텔 설정 뷰 테스트
# =============================================================================

import datetime
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.test import Client
from django.urls import reverse

from apps.hostels.models import Member
from apps.meals.services import create_meal_chart


@pytest.mark.django_db
class TestMemberListView:
    """멤버 목록"""

    def test_requires_login(self, client):
        response = client.get(reverse('hostels:member_list'))

        assert response.status_code == 302
        assert reverse('accounts:admin_login') in response.url

    def test_member_cannot_access(self, member_client):
        response = member_client.get(reverse('hostels:member_list'))

        assert response.status_code == 302
        assert response.url == reverse('dashboard:member')

    def test_only_own_members(self, admin_client, member, second_member, other_member):
        response = admin_client.get(reverse('hostels:member_list'))

        assert response.status_code == 200
        listed = list(response.context['page_obj'])
        assert set(listed) == {member, second_member}
        assert response.context['total_count'] == 2
        assert response.context['total_bazar'] == Decimal('800.00')

    def test_search(self, admin_client, member, second_member):
        response = admin_client.get(reverse('hostels:member_list'), {'search': 'salam'})

        assert list(response.context['page_obj']) == [second_member]
        assert response.context['query'] == 'search=salam'

    def test_meal_counts_annotated(self, admin_client, hostel, member):
        meal = create_meal_chart(hostel, datetime.date(2026, 3, 1))
        meal.records.update(day_meal=True)

        response = admin_client.get(reverse('hostels:member_list'))

        row = list(response.context['page_obj'])[0]
        assert row.day_meals == 1
        assert row.night_meals == 0


@pytest.mark.django_db
class TestMemberCreateView:
    """멤버 추가"""

    def test_create(self, admin_client, hostel, assert_message_contains):
        response = admin_client.post(reverse('hostels:member_create'), {
            'name': 'Rafiq',
            'email': 'rafiq@example.com',
            'bazar_amount': '250',
            'password': 'secret123',
        })

        assert response.status_code == 302
        assert response.url == reverse('hostels:member_list')
        member = Member.objects.get(email='rafiq@example.com')
        assert member.hostel == hostel
        assert_message_contains(response, 'Member "Rafiq" added.')

    def test_new_member_can_log_in(self, admin_client):
        admin_client.post(reverse('hostels:member_create'), {
            'name': 'Rafiq',
            'email': 'rafiq@example.com',
            'bazar_amount': '0',
            'password': 'secret123',
        })

        client = Client()
        response = client.post(reverse('accounts:login'), {'username': 'rafiq@example.com', 'password': 'secret123'})

        assert response.status_code == 302
        assert response.url == reverse('dashboard:member')

    def test_invalid_form(self, admin_client, member, assert_message_contains):
        response = admin_client.post(reverse('hostels:member_create'), {
            'name': 'Copy',
            'email': member.email,
            'bazar_amount': '0',
            'password': 'secret123',
        })

        assert response.status_code == 200
        assert Member.objects.filter(email=member.email).count() == 1
        assert_message_contains(response, 'Could not add member')


@pytest.mark.django_db
class TestMemberUpdateView:

    def test_update_bazar(self, admin_client, member):
        response = admin_client.post(reverse('hostels:member_update', kwargs={'pk': member.pk}), {
            'name': 'Karim',
            'email': 'karim@example.com',
            'bazar_amount': '900.50',
        })

        assert response.status_code == 302
        member.refresh_from_db()
        assert member.bazar_amount == Decimal('900.50')

    def test_other_hostel_member_404(self, admin_client, other_member):
        response = admin_client.get(reverse('hostels:member_update', kwargs={'pk': other_member.pk}))

        assert response.status_code == 404


@pytest.mark.django_db
class TestMemberDeleteView:

    def test_confirm_page(self, admin_client, hostel, member):
        create_meal_chart(hostel, datetime.date(2026, 3, 1))

        response = admin_client.get(reverse('hostels:member_delete', kwargs={'pk': member.pk}))

        assert response.status_code == 200
        assert response.context['meal_record_count'] == 1

    def test_delete_removes_member_and_account(self, admin_client, member):
        user_id = member.user_id

        response = admin_client.post(reverse('hostels:member_delete', kwargs={'pk': member.pk}))

        assert response.status_code == 302
        assert not Member.objects.filter(pk=member.pk).exists()
        assert not User.objects.filter(pk=user_id).exists()

    def test_deleted_member_loses_access(self, admin_client, member, member_client):
        admin_client.post(reverse('hostels:member_delete', kwargs={'pk': member.pk}))

        response = member_client.get(reverse('dashboard:member'))

        assert response.status_code == 302
        assert reverse('accounts:login') in response.url

    def test_other_hostel_member_404(self, admin_client, other_member):
        response = admin_client.post(reverse('hostels:member_delete', kwargs={'pk': other_member.pk}))

        assert response.status_code == 404
        assert Member.objects.filter(pk=other_member.pk).exists()


@pytest.mark.django_db
class TestHostelSettingsView:

    def test_update_names(self, admin_client, hostel, assert_message_contains):
        response = admin_client.post(reverse('hostels:settings'), {
            'hostel_name': 'Sunrise Mess',
            'full_name': 'Rahim Uddin',
        })

        assert response.status_code == 302
        hostel.refresh_from_db()
        assert hostel.hostel_name == 'Sunrise Mess'
        assert_message_contains(response, 'Profile updated successfully')

    def test_member_cannot_access(self, member_client):
        response = member_client.get(reverse('hostels:settings'))

        assert response.status_code == 302
