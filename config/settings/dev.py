from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# 회원 가입/비밀번호 관련 메일은 콘솔로
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# 개발 환경 로깅: 앱 로그는 DEBUG 까지, SQL 은 DEV_SQL_LOG=1 일 때만
LOGGING['loggers']['apps']['level'] = 'DEBUG'
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'DEBUG' if os.environ.get('DEV_SQL_LOG') == '1' else 'INFO',
    'propagate': False,
}
