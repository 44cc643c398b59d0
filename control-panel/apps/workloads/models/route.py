"""Route and route mapping models."""

from django.db import models

from apps.core.common.models import BaseModel


class Route(BaseModel):
    """An addressable host/path in a space."""

    space = models.ForeignKey(
        'core.Space',
        on_delete=models.CASCADE,
        related_name='routes'
    )
    host = models.CharField(max_length=255)
    domain = models.CharField(max_length=255, default='apps.internal')
    path = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = 'routes'
        ordering = ['created_at', 'id']

    def __str__(self) -> str:
        return self.fqdn + self.path

    @property
    def fqdn(self) -> str:
        return f"{self.host}.{self.domain}" if self.host else self.domain


class RouteMapping(BaseModel):
    """Association of a route with a process, with an optional traffic weight."""

    app = models.ForeignKey(
        'workloads.App',
        on_delete=models.CASCADE,
        related_name='route_mappings'
    )
    route = models.ForeignKey(
        Route,
        on_delete=models.CASCADE,
        related_name='route_mappings'
    )
    process = models.ForeignKey(
        'workloads.Process',
        on_delete=models.CASCADE,
        related_name='route_mappings'
    )
    weight = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = 'route_mappings'
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['route', 'process'], name='unique_route_per_process'),
        ]
