from .power_sample import PowerSample

__all__ = ["PowerSample"]
