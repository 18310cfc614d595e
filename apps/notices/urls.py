from django.urls import path
from . import views

app_name = 'notices'

urlpatterns = [
    path('', views.notice_list, name='notice_list'),
    path('create/', views.notice_create, name='notice_create'),
    path('<int:pk>/delete/', views.notice_delete, name='notice_delete'),
    path('board/', views.notice_board, name='notice_board'),
]
