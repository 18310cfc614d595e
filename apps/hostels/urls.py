from django.urls import path
from . import views

app_name = 'hostels'

urlpatterns = [
    path('members/', views.member_list, name='member_list'),
    path('members/create/', views.member_create, name='member_create'),
    path('members/<int:pk>/update/', views.member_update, name='member_update'),
    path('members/<int:pk>/delete/', views.member_delete, name='member_delete'),
    path('settings/', views.hostel_settings, name='settings'),
]
