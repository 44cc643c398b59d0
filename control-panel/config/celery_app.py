"""
Celery configuration for the rollout control plane.

"Celery Tasks" section
Architecture: Periodic maintenance of deployment history

This module configures Celery for handling background tasks:
- Deployment history retention sweeps
"""

import os
from celery import Celery
from celery.schedules import crontab

# Set default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Create Celery application
app = Celery('rollout')

# Load configuration from Django settings
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks from all installed apps
app.autodiscover_tasks()

# Celery Beat Schedule - Periodic Tasks
app.conf.beat_schedule = {
    # =========================================================================
    # DEPLOYMENT HISTORY
    # =========================================================================
    'prune-aged-deployments-daily': {
        'task': 'apps.deployments.tasks.maintenance.prune_aged_deployments',
        'schedule': crontab(hour=2, minute=0),
    },
}

# Celery Beat Configuration
app.conf.timezone = 'UTC'
