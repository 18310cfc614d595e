from django.contrib import admin

from .models import Notice


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    list_display = ['title', 'hostel', 'created_at']
    list_filter = ['hostel']
    search_fields = ['title', 'message']
    readonly_fields = ['created_at', 'updated_at']
