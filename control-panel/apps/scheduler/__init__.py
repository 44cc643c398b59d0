"""
Scheduler submission building.

Turns a workload (a task from a buildpack droplet, or a docker process)
into the action graph, cached dependencies, image layers and environment
the external scheduler consumes. Nothing here touches the database or the
network.
"""
