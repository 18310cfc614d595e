import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.http import HttpResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.utils import timezone

from apps.accounts.decorators import admin_required
from apps.core.utils import get_page
from .forms import ExpenseForm, ExpenseFilterForm
from .models import Expense
from .utils import export_expenses_to_excel

logger = logging.getLogger(__name__)


def _filtered_expenses(hostel, params):
    """호스텔 지출 + (선택) 월 필터"""
    expenses = Expense.objects.for_hostel(hostel)
    filter_form = ExpenseFilterForm(params)
    month = None

    if filter_form.is_valid():
        month = filter_form.cleaned_data.get('month')
        if month:
            expenses = expenses.by_month(month.year, month.month)

    return expenses.order_by('-date', '-id'), filter_form, month


@admin_required
def expense_list(request, hostel):
    """
    지출 목록

    - 월 필터 (선택)
    - 합계 / 건수 요약
    """
    expenses, filter_form, month = _filtered_expenses(hostel, request.GET)
    page_obj = get_page(expenses, request.GET.get('page'))

    context = {
        'page_obj': page_obj,
        'filter_form': filter_form,
        'month': month,
        'query': f"month={month:%Y-%m}" if month else '',
        'total_amount': expenses.total(),
        'expense_count': expenses.count(),
    }
    return render(request, 'expenses/expense_list.html', context)


@admin_required
def expense_create(request, hostel):
    """지출 추가"""
    if request.method == 'POST':
        form = ExpenseForm(request.POST)

        if form.is_valid():
            try:
                expense = form.save(commit=False)
                expense.hostel = hostel
                expense.save()

                logger.info(f"지출 추가: {expense.description} {expense.amount} - 호스텔: {hostel.hostel_name}")
                messages.success(request, f'Expense "{expense.description}" added.')
                return redirect('expenses:expense_list')

            except (IntegrityError, ValidationError) as e:
                logger.error(f"지출 추가 실패: hostel_id={hostel.pk}, error={e}")
                messages.error(request, str(e))

            except Exception as e:
                logger.error(f"지출 추가 중 예상치 못한 오류: hostel_id={hostel.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Could not add expense. Please check the form.')
    else:
        form = ExpenseForm(initial={'date': timezone.localdate()})

    context = {
        'form': form,
        'title': 'Add Expense',
        'submit_text': 'Add',
    }
    return render(request, 'expenses/expense_form.html', context)


@admin_required
def expense_update(request, hostel, pk):
    """지출 수정"""
    expense = get_object_or_404(Expense, pk=pk, hostel=hostel)

    if request.method == 'POST':
        form = ExpenseForm(request.POST, instance=expense)

        if form.is_valid():
            try:
                form.save()
                logger.info(f"지출 수정: {expense.description} (ID: {expense.pk})")
                messages.success(request, f'Expense "{expense.description}" updated.')
                return redirect('expenses:expense_list')

            except Exception as e:
                logger.error(f"지출 수정 중 오류: expense_id={expense.pk}, error={e}", exc_info=True)
                messages.error(request, str(e))
        else:
            messages.error(request, 'Could not update expense. Please check the form.')
    else:
        form = ExpenseForm(instance=expense)

    context = {
        'form': form,
        'expense': expense,
        'title': 'Edit Expense',
        'submit_text': 'Update',
    }
    return render(request, 'expenses/expense_form.html', context)


@admin_required
def expense_delete(request, hostel, pk):
    """지출 삭제 (GET: 확인 페이지, POST: 삭제)"""
    expense = get_object_or_404(Expense, pk=pk, hostel=hostel)

    if request.method == 'POST':
        description = expense.description
        try:
            expense.delete()
        except Exception as e:
            logger.error(f"지출 삭제 중 오류: expense_id={pk}, error={e}", exc_info=True)
            messages.error(request, str(e))
            return redirect('expenses:expense_list')

        logger.info(f"지출 삭제: {description} (ID: {pk})")
        messages.success(request, f'Expense "{description}" deleted.')
        return redirect('expenses:expense_list')

    return render(request, 'expenses/expense_confirm_delete.html', {'expense': expense})


@admin_required
def expense_export(request, hostel):
    """지출 내역 엑셀 다운로드 (목록과 같은 월 필터 적용)"""
    expenses, _, month = _filtered_expenses(hostel, request.GET)
    excel_file = export_expenses_to_excel(expenses)

    suffix = f"{month:%Y%m}" if month else timezone.localtime().strftime('%Y%m%d_%H%M%S')
    filename = f"expenses_{hostel.pk}_{suffix}.xlsx"

    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
