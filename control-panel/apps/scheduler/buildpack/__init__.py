from .task_action_builder import TaskActionBuilder

__all__ = ['TaskActionBuilder']
