"""
Django settings for habitlog project.

所有可变配置均从环境变量读取，未设置时使用本地开发默认值。
"""
import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'habitlog-dev-secret-change-me')

DEBUG = _env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',') if h]


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'rest_framework.authtoken',
    'habitlog.apps.HabitLogConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'habitlog.urls'

# 仅供 Django Admin 使用，业务接口全部返回 JSON
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'habitlog.wsgi.application'


# 数据库：配置了 MYSQL_ADDRESS 时使用 MySQL，否则使用本地 SQLite
MYSQL_ADDRESS = os.environ.get('MYSQL_ADDRESS', '')

if MYSQL_ADDRESS:
    import pymysql

    pymysql.install_as_MySQLdb()
    _mysql_host, _, _mysql_port = MYSQL_ADDRESS.partition(':')
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.mysql',
            'NAME': os.environ.get('MYSQL_DATABASE', 'habitlog'),
            'USER': os.environ.get('MYSQL_USERNAME', 'root'),
            'PASSWORD': os.environ.get('MYSQL_PASSWORD', ''),
            'HOST': _mysql_host,
            'PORT': _mysql_port or '3306',
            'OPTIONS': {'charset': 'utf8mb4'},
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.environ.get('SQLITE_PATH', str(BASE_DIR / 'habitlog.sqlite3')),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


AUTH_PASSWORD_VALIDATORS = []


# 时区：积分按该时区的自然日判定。USE_TZ=False，数据库中保存本地时间
LANGUAGE_CODE = 'ko-kr'

TIME_ZONE = os.environ.get('TIME_ZONE', 'Asia/Seoul')

USE_I18N = True

USE_TZ = False


STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = '/uploads/'
MEDIA_ROOT = os.environ.get('UPLOAD_DIR', str(BASE_DIR / 'uploads'))


# 会话
SESSION_COOKIE_NAME = 'session-cookie'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = _env_bool('SESSION_COOKIE_SECURE', False)


# 积分规则
HABITLOG_POST_BONUS = _env_int('HABITLOG_POST_BONUS', 10)
HABITLOG_OX_BONUS = _env_int('HABITLOG_OX_BONUS', 5)
HABITLOG_REWARD_CAS_RETRIES = _env_int('HABITLOG_REWARD_CAS_RETRIES', 3)
HABITLOG_AVATAR_MAX_BYTES = _env_int('HABITLOG_AVATAR_MAX_BYTES', 5 * 1024 * 1024)
HABITLOG_DEFAULT_IMG_URL = '/images/ham.jpg'


LOG_DIR = Path(os.environ.get('LOG_DIR', str(BASE_DIR / 'logs')))
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '[%(asctime)s][%(threadName)s:%(thread)d][task_id:%(name)s][%(filename)s:%(lineno)d]'
                      '[%(levelname)s]- %(message)s'
        },
        'simple': {
            'format': '[%(levelname)s][%(asctime)s] %(message)s'
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
        'default': {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': str(LOG_DIR / 'all.log'),
            'maxBytes': 1024 * 1024 * 50,
            'backupCount': 5,
            'formatter': 'standard',
            'encoding': 'utf-8',
        },
        'error': {
            'level': 'ERROR',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': str(LOG_DIR / 'error.log'),
            'maxBytes': 1024 * 1024 * 50,
            'backupCount': 5,
            'formatter': 'standard',
            'encoding': 'utf-8',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'default'],
            'level': 'INFO',
            'propagate': False,
        },
        'log': {
            'handlers': ['console', 'default', 'error'],
            'level': 'INFO',
            'propagate': True,
        },
    },
}
