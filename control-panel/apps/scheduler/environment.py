"""Environment variables handed to scheduled workloads."""

from typing import List
import json

from .graph import EnvironmentVariable
from .settings import SchedulerSettings

PLATFORM_OPTIONS_VARIABLE = 'VCAP_PLATFORM_OPTIONS'


def platform_options(settings: SchedulerSettings) -> List[EnvironmentVariable]:
    """
    The platform options variable, when the credential broker is configured.

    Emitted only when a credhub URL is set and service binding
    interpolation is enabled; otherwise no variable at all.
    """
    if settings.credhub_internal_url and settings.interpolate_service_bindings:
        value = json.dumps({'credhub-uri': settings.credhub_internal_url}, separators=(',', ':'))
        return [EnvironmentVariable(PLATFORM_OPTIONS_VARIABLE, value)]
    return []


class TaskEnvironmentVariableCollector:
    """Default source of a task's environment."""

    @classmethod
    def for_task(cls, task) -> List[EnvironmentVariable]:
        app = task.app
        vcap_application = {
            'application_id': app.guid,
            'application_name': app.name,
            'name': app.name,
            'space_id': app.space.guid,
            'space_name': app.space.name,
            'organization_id': app.space.organization.guid,
            'organization_name': app.space.organization.name,
            'limits': {'mem': task.memory_in_mb, 'disk': task.disk_in_mb},
        }
        environment = [
            EnvironmentVariable('VCAP_APPLICATION', json.dumps(vcap_application, sort_keys=True)),
            EnvironmentVariable('MEMORY_LIMIT', f"{task.memory_in_mb}m"),
            EnvironmentVariable('VCAP_SERVICES', '{}'),
        ]
        user_variables = {**app.environment_variables, **task.environment_variables}
        environment.extend(
            EnvironmentVariable(name, str(value)) for name, value in sorted(user_variables.items())
        )
        return environment
