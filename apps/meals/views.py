import logging

from django.contrib import messages
from django.db.models import Prefetch
from django.shortcuts import render, redirect, get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_POST

from apps.accounts.decorators import admin_required, member_required
from .forms import MealChartForm
from .models import Meal, MealRecord
from .services import MealChartExists, create_meal_chart, toggle_meal

logger = logging.getLogger(__name__)


# ============================================================
# 관리자: 식사표
# ============================================================

@admin_required
def meal_list(request, hostel):
    """식사표 목록 (날짜별 점심/저녁/합계 식수)"""
    meals = Meal.objects.for_hostel(hostel).with_counts().order_by('-date')

    context = {
        'meals': meals,
        'form': MealChartForm(),
    }
    return render(request, 'meals/meal_list.html', context)


@admin_required
def meal_create(request, hostel):
    """
    식사표 생성

    - 같은 날짜 식사표가 있으면 거부 (기록 생성 전)
    - 현재 멤버 전원 기록 일괄 생성
    """
    if request.method != 'POST':
        return render(request, 'meals/meal_form.html', {'form': MealChartForm()})

    form = MealChartForm(request.POST)
    if not form.is_valid():
        messages.error(request, 'Please select a valid date.')
        return render(request, 'meals/meal_form.html', {'form': form})

    date = form.cleaned_data['date']
    try:
        meal = create_meal_chart(hostel, date)
    except MealChartExists as e:
        logger.warning(f"식사표 중복 생성 시도: hostel_id={hostel.pk}, date={date}")
        messages.error(request, str(e))
        return redirect('meals:meal_list')
    except Exception as e:
        logger.error(f"식사표 생성 중 오류: hostel_id={hostel.pk}, date={date}, error={e}", exc_info=True)
        messages.error(request, str(e))
        return redirect('meals:meal_list')

    messages.success(request, f'Meal chart created for {date:%Y-%m-%d}.')
    return redirect('meals:meal_detail', pk=meal.pk)


@admin_required
def meal_detail(request, hostel, pk):
    """식사표 상세 (멤버별 점심/저녁)"""
    meal = get_object_or_404(Meal, pk=pk, hostel=hostel)
    records = meal.records.select_related('member').order_by('member__name')

    day_count = sum(1 for r in records if r.day_meal)
    night_count = sum(1 for r in records if r.night_meal)

    context = {
        'meal': meal,
        'records': records,
        'day_count': day_count,
        'night_count': night_count,
        'total_count': day_count + night_count,
    }
    return render(request, 'meals/meal_detail.html', context)


@admin_required
def meal_delete(request, hostel, pk):
    """식사표 삭제 (기록도 함께 삭제)"""
    meal = get_object_or_404(Meal, pk=pk, hostel=hostel)

    if request.method == 'POST':
        meal_date = meal.date
        try:
            meal.delete()
        except Exception as e:
            logger.error(f"식사표 삭제 중 오류: meal_id={pk}, error={e}", exc_info=True)
            messages.error(request, str(e))
            return redirect('meals:meal_list')

        logger.info(f"식사표 삭제: hostel_id={hostel.pk}, date={meal_date}")
        messages.success(request, f'Meal chart for {meal_date:%Y-%m-%d} deleted.')
        return redirect('meals:meal_list')

    return render(request, 'meals/meal_confirm_delete.html', {
        'meal': meal,
        'record_count': meal.records.count(),
    })


# ============================================================
# 멤버: 내 식사
# ============================================================

@member_required
def my_meals(request, member):
    """
    내 식사 (호스텔 식사표 최신순 + 내 기록)

    기록이 없는 식사표는 record=None 으로 표시 (처음 토글할 때 생성)
    """
    meals = Meal.objects.for_hostel(member.hostel).order_by('-date').prefetch_related(
        Prefetch(
            'records',
            queryset=MealRecord.objects.filter(member=member),
            to_attr='my_records',
        )
    )

    today = timezone.localdate()
    rows = [
        {
            'meal': meal,
            'record': meal.my_records[0] if meal.my_records else None,
            'is_today': meal.date == today,
        }
        for meal in meals
    ]

    return render(request, 'meals/my_meals.html', {'rows': rows})


@member_required
@require_POST
def meal_toggle(request, member, pk, kind):
    """점심/저녁 토글 (POST)"""
    meal = get_object_or_404(Meal, pk=pk, hostel=member.hostel)

    try:
        toggle_meal(meal, member, kind)
    except ValueError as e:
        messages.error(request, str(e))
    except Exception as e:
        logger.error(f"식사 토글 오류: member_id={member.pk}, meal_id={pk}, error={e}", exc_info=True)
        messages.error(request, str(e))

    return redirect('meals:my_meals')
