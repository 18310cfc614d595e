from django.contrib import admin

from .models import Meal, MealRecord


class MealRecordInline(admin.TabularInline):
    model = MealRecord
    extra = 0
    fields = ['member', 'day_meal', 'night_meal']
    raw_id_fields = ['member']


@admin.register(Meal)
class MealAdmin(admin.ModelAdmin):
    list_display = ['date', 'hostel', 'get_record_count', 'created_at']
    list_filter = ['hostel', 'date']
    date_hierarchy = 'date'
    inlines = [MealRecordInline]

    @admin.display(description='Records')
    def get_record_count(self, obj):
        return obj.records.count()


@admin.register(MealRecord)
class MealRecordAdmin(admin.ModelAdmin):
    list_display = ['meal', 'member', 'day_meal', 'night_meal']
    list_filter = ['day_meal', 'night_meal', 'meal__hostel']
    search_fields = ['member__name', 'member__email']
    raw_id_fields = ['meal', 'member']
