"""Copy route mappings from one process to another."""

from typing import List
import logging

from apps.workloads.models import Process, RouteMapping

logger = logging.getLogger(__name__)


class RouteCarryover:
    """Maps a replacement process to every route of the process it replaces."""

    @classmethod
    def carry_over(cls, source: Process, target: Process) -> List[RouteMapping]:
        """
        Map ``target`` to each route mapped to ``source``, with the same weight.

        Routes already mapped to ``target`` are skipped, so repeated calls
        never duplicate a mapping.

        Returns:
            The mappings created by this call
        """
        already_mapped = set(
            RouteMapping.objects
            .filter(process=target)
            .values_list('route_id', flat=True)
        )

        created = []
        for mapping in RouteMapping.objects.filter(process=source).select_related('route'):
            if mapping.route_id in already_mapped:
                continue
            created.append(RouteMapping.objects.create(
                app=target.app,
                route=mapping.route,
                process=target,
                weight=mapping.weight,
            ))
            already_mapped.add(mapping.route_id)

        logger.info(f"Carried {len(created)} route mapping(s) from {source.guid} to {target.guid}")
        return created
