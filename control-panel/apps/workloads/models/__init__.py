"""
Workload models module.

Exports the records the scheduler runs and the rollout machinery mutates:
- App, Droplet, Revision: What an application is and what it runs
- Process: Long-running processes of an app
- Route, RouteMapping: Routes and their process associations
- Task: One-off commands
"""

from .app import App, Droplet, Revision
from .process import Process
from .route import Route, RouteMapping
from .task import Task

__all__ = [
    'App',
    'Droplet',
    'Revision',
    'Process',
    'Route',
    'RouteMapping',
    'Task',
]
