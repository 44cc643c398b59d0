from .desired_lrp_builder import DesiredLrpBuilder

__all__ = ['DesiredLrpBuilder']
