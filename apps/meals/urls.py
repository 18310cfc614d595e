from django.urls import path
from . import views

app_name = 'meals'

urlpatterns = [
    # 관리자
    path('', views.meal_list, name='meal_list'),
    path('create/', views.meal_create, name='meal_create'),
    path('<int:pk>/', views.meal_detail, name='meal_detail'),
    path('<int:pk>/delete/', views.meal_delete, name='meal_delete'),

    # 멤버
    path('my/', views.my_meals, name='my_meals'),
    path('<int:pk>/toggle/<str:kind>/', views.meal_toggle, name='meal_toggle'),
]
