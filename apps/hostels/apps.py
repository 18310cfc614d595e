from django.apps import AppConfig


class HostelsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.hostels'

    def ready(self):
        # 멤버 삭제 시 로그인 계정 회수 시그널 등록
        import apps.hostels.signals  # noqa: F401
