from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('', views.member_dashboard, name='member'),
    path('admin/', views.admin_dashboard, name='admin'),
    path('admin/statement/export/', views.statement_export, name='statement_export'),
]
