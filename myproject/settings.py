import os
from pathlib import Path
from utils import config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('SECRET_KEY', 'django-insecure-change-me')
DEBUG = os.environ.get('DEBUG', '0') == '1'
ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'directory',
    'sitemap',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'utils.middleware.LogIPMiddleware',
]

ROOT_URLCONF = 'myproject.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('DATABASE_PATH', BASE_DIR / 'db.sqlite3'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
USE_TZ = True
TIME_ZONE = 'UTC'
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'static'

# Crawler documents
SITE_URL = os.environ.get('SITE_URL', 'https://knowfounders.com')
SITEMAP_STATIC_PAGES = config.STATIC_PAGES
SITEMAP_DISALLOW_PATHS = config.DISALLOW_PATHS
SITEMAP_CACHE_SECONDS = 3600
SITEMAP_SECTION_SIZE = 50000
SITEMAP_PUBLICATION_NAME = os.environ.get('SITEMAP_PUBLICATION_NAME', 'Know Founders')
SITEMAP_LANGUAGE = 'en'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'ip_address': {
            '()': 'utils.logging.IPAddressFilter',
        },
    },
    'formatters': {
        'request': {
            '()': 'utils.logging.RequestFormatter',
            'format': '{asctime} {levelname} {name} [{ip_address}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'filters': ['ip_address'],
            'formatter': 'request',
        },
    },
    'loggers': {
        'sitemap': {
            'handlers': ['console'],
            'level': os.environ.get('SITEMAP_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}
