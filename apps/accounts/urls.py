from django.urls import path
from . import views

app_name = "accounts"

urlpatterns = [
    path("", views.home, name="home"),
    path("login/", views.MemberLoginView.as_view(), name="login"),
    path("admin/login/", views.AdminLoginView.as_view(), name="admin_login"),
    path("admin/signup/", views.admin_signup, name="admin_signup"),
    path("logout/", views.UserLogoutView.as_view(), name="logout"),
    path("password/", views.HostelPasswordChangeView.as_view(), name="password_change"),
    path("profile/", views.profile, name="profile"),
]
