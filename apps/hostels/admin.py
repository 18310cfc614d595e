from django.contrib import admin

from .models import Hostel, Member


class MemberInline(admin.TabularInline):
    model = Member
    extra = 0
    fields = ['name', 'email', 'bazar_amount']
    readonly_fields = ['email']
    can_delete = False
    show_change_link = True


@admin.register(Hostel)
class HostelAdmin(admin.ModelAdmin):
    list_display = ['hostel_name', 'full_name', 'email', 'get_member_count', 'created_at']
    list_display_links = ['hostel_name']
    search_fields = ['hostel_name', 'full_name', 'email', 'user__username']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [MemberInline]

    @admin.display(description='Members')
    def get_member_count(self, obj):
        return obj.members.count()


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'hostel', 'get_bazar_display', 'created_at']
    list_filter = ['hostel']
    search_fields = ['name', 'email', 'hostel__hostel_name']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description='Bazar', ordering='bazar_amount')
    def get_bazar_display(self, obj):
        return f"{obj.bazar_amount:,.2f}"
