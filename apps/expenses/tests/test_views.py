# =============================================================================
# expenses/tests/test_views.py - 지출 뷰 테스트
# =============================================================================

import datetime
from decimal import Decimal
from io import BytesIO
from unittest.mock import patch

import openpyxl
import pytest
from django.db import DatabaseError
from django.urls import reverse

from apps.expenses.models import Expense


@pytest.fixture
def expense(hostel):
    return Expense.objects.create(
        hostel=hostel,
        description='Gas cylinder',
        amount=Decimal('1200.00'),
        date=datetime.date(2026, 3, 5),
    )


@pytest.fixture
def other_expense(other_hostel):
    return Expense.objects.create(
        hostel=other_hostel,
        description='Fish',
        amount=Decimal('999.00'),
        date=datetime.date(2026, 3, 5),
    )


@pytest.mark.django_db
class TestExpenseListView:

    def test_list_own_expenses(self, admin_client, expense, other_expense):
        response = admin_client.get(reverse('expenses:expense_list'))

        assert response.status_code == 200
        assert list(response.context['page_obj']) == [expense]
        assert response.context['total_amount'] == Decimal('1200.00')
        assert response.context['expense_count'] == 1

    def test_month_filter(self, admin_client, hostel, expense):
        Expense.objects.create(hostel=hostel, description='Rice', amount=Decimal('300'), date=datetime.date(2026, 4, 2))

        response = admin_client.get(reverse('expenses:expense_list'), {'month': '2026-04'})

        assert [e.description for e in response.context['page_obj']] == ['Rice']
        assert response.context['total_amount'] == Decimal('300.00')
        assert response.context['month'] == datetime.date(2026, 4, 1)
        assert response.context['query'] == 'month=2026-04'

    def test_invalid_month_ignored(self, admin_client, expense):
        response = admin_client.get(reverse('expenses:expense_list'), {'month': 'garbage'})

        assert response.status_code == 200
        assert response.context['month'] is None
        assert response.context['expense_count'] == 1


@pytest.mark.django_db
class TestExpenseCreateUpdateDelete:

    def test_create(self, admin_client, hostel, assert_message_contains):
        response = admin_client.post(reverse('expenses:expense_create'), {
            'description': 'Electricity bill',
            'amount': '850.75',
            'date': '2026-03-10',
        })

        assert response.status_code == 302
        expense = Expense.objects.get(description='Electricity bill')
        assert expense.hostel == hostel
        assert expense.amount == Decimal('850.75')
        assert_message_contains(response, 'added')

    def test_create_rejects_zero_amount(self, admin_client, hostel):
        response = admin_client.post(reverse('expenses:expense_create'), {
            'description': 'Nothing',
            'amount': '0',
            'date': '2026-03-10',
        })

        assert response.status_code == 200
        assert not Expense.objects.filter(hostel=hostel).exists()

    def test_update(self, admin_client, expense):
        response = admin_client.post(reverse('expenses:expense_update', kwargs={'pk': expense.pk}), {
            'description': 'Gas cylinder (2)',
            'amount': '1300',
            'date': '2026-03-05',
        })

        assert response.status_code == 302
        expense.refresh_from_db()
        assert expense.amount == Decimal('1300.00')

    def test_update_other_hostel_404(self, admin_client, other_expense):
        response = admin_client.get(reverse('expenses:expense_update', kwargs={'pk': other_expense.pk}))

        assert response.status_code == 404

    def test_delete(self, admin_client, expense):
        url = reverse('expenses:expense_delete', kwargs={'pk': expense.pk})

        assert admin_client.get(url).status_code == 200
        response = admin_client.post(url)

        assert response.status_code == 302
        assert not Expense.objects.filter(pk=expense.pk).exists()

    def test_delete_failure_keeps_expense(self, admin_client, expense, assert_message_contains):
        url = reverse('expenses:expense_delete', kwargs={'pk': expense.pk})

        with patch.object(Expense, 'delete', side_effect=DatabaseError('db down')):
            response = admin_client.post(url)

        assert response.status_code == 302
        assert response.url == reverse('expenses:expense_list')
        assert Expense.objects.filter(pk=expense.pk).exists()
        assert_message_contains(response, 'db down')

    def test_delete_other_hostel_404(self, admin_client, other_expense):
        response = admin_client.post(reverse('expenses:expense_delete', kwargs={'pk': other_expense.pk}))

        assert response.status_code == 404
        assert Expense.objects.filter(pk=other_expense.pk).exists()

    def test_member_cannot_create(self, member_client):
        response = member_client.post(reverse('expenses:expense_create'), {
            'description': 'Sneaky',
            'amount': '10',
            'date': '2026-03-10',
        })

        assert response.status_code == 302
        assert not Expense.objects.exists()


@pytest.mark.django_db
class TestExpenseExport:

    def test_export_with_total_row(self, admin_client, hostel, expense):
        Expense.objects.create(hostel=hostel, description='Rice', amount=Decimal('300.50'), date=datetime.date(2026, 3, 6))

        response = admin_client.get(reverse('expenses:expense_export'))

        assert response.status_code == 200
        assert 'spreadsheetml' in response['Content-Type']
        assert f'expenses_{hostel.pk}_' in response['Content-Disposition']

        ws = openpyxl.load_workbook(BytesIO(response.content)).active
        assert [c.value for c in ws[1]] == ['Date', 'Description', 'Amount']
        assert ws['B2'].value == 'Rice'
        assert ws['C3'].value == 1200.0
        assert ws['B5'].value == 'Total'
        assert ws['C5'].value == 1500.5

    def test_export_month_in_filename(self, admin_client, hostel, expense):
        response = admin_client.get(reverse('expenses:expense_export'), {'month': '2026-03'})

        assert f'expenses_{hostel.pk}_202603.xlsx' in response['Content-Disposition']
