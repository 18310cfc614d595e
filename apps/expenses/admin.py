from django.contrib import admin

from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'description', 'get_amount_display', 'hostel']
    list_filter = ['hostel', 'date']
    search_fields = ['description', 'hostel__hostel_name']
    date_hierarchy = 'date'

    @admin.display(description='Amount', ordering='amount')
    def get_amount_display(self, obj):
        return f"{obj.amount:,.2f}"
