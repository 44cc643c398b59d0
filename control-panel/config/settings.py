"""
Django settings for the rollout control plane.

Architecture: Configuration for the Django application with a relational
store, Celery periodic jobs and scheduler submission building.

This module follows the project's configuration conventions:
- Environment variables via python-decouple
- Database configuration via DATABASE_URL
- Celery task queue configuration
"""

from pathlib import Path
from decouple import config, Csv
import dj_database_url

# Build paths inside the project like this: BASE_DIR / 'subdir'
BASE_DIR = Path(__file__).resolve().parent.parent

# Security Settings
SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-this-in-production')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

# Application definition
INSTALLED_APPS = [
    'django.contrib.contenttypes',

    # Control plane apps
    'apps.core',
    'apps.workloads',
    'apps.deployments',
    'apps.scheduler',
]

# Database
# https://docs.djangoproject.com/en/5.0/ref/settings/#databases
DATABASES = {
    'default': config(
        'DATABASE_URL',
        default='sqlite:///' + str(BASE_DIR / 'db.sqlite3'),
        cast=dj_database_url.parse
    )
}

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Celery Configuration
CELERY_BROKER_URL = config('CELERY_BROKER_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = config('CELERY_RESULT_BACKEND', default='redis://localhost:6379/1')
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
CELERY_TASK_TRACK_STARTED = True
CELERY_TASK_TIME_LIMIT = 30 * 60  # 30 minutes
CELERY_BROKER_CONNECTION_RETRY_ON_STARTUP = True


def parse_lifecycle_bundles(entries):
    """Turn ``key=uri`` entries into a lifecycle bundle table."""
    bundles = {}
    for entry in entries:
        key, separator, uri = entry.partition('=')
        if not separator or not key.strip() or not uri.strip():
            raise ValueError(f"Invalid lifecycle bundle entry: {entry!r} (expected key=uri)")
        bundles[key.strip()] = uri.strip()
    return bundles


# Scheduler submission settings
DIEGO_LIFECYCLE_BUNDLES = parse_lifecycle_bundles(config(
    'DIEGO_LIFECYCLE_BUNDLES',
    default=(
        'buildpack/cflinuxfs4=buildpack_app_lifecycle/buildpack_app_lifecycle.tgz,'
        'docker=docker_app_lifecycle/docker_app_lifecycle.tgz'
    ),
    cast=Csv()
))
DIEGO_FILE_SERVER_URL = config('DIEGO_FILE_SERVER_URL', default='http://file-server.service.cf.internal:8080')
DIEGO_TEMPORARY_OCI_BUILDPACK_MODE = config('DIEGO_TEMPORARY_OCI_BUILDPACK_MODE', default='')
DEFAULT_APP_PORT = config('DEFAULT_APP_PORT', default=8080, cast=int)

# Credential broker
CREDHUB_API_INTERNAL_URL = config('CREDHUB_API_INTERNAL_URL', default='')
CREDENTIAL_REFERENCES_INTERPOLATE_SERVICE_BINDINGS = config(
    'CREDENTIAL_REFERENCES_INTERPOLATE_SERVICE_BINDINGS', default=True, cast=bool
)

# Deployment history retention
MAX_RETAINED_DEPLOYMENTS_PER_APP = config('MAX_RETAINED_DEPLOYMENTS_PER_APP', default=100, cast=int)

# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if not DEBUG else 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': config('LOG_LEVEL', default='INFO'),
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'celery': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
