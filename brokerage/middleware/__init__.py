"""
Middleware package: request ids and timing.
"""

from .performance import PerformanceMonitoringMiddleware

__all__ = ["PerformanceMonitoringMiddleware"]
