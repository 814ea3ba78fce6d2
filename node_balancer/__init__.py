# __init__.py

"""Node Load Balancer: metrics tracking and task redistribution planning."""

from .metrics_store import MetricsStore
from .models import AverageMetrics, NodeMetrics, RedistributionStep
from .optimization_engine import OptimizationEngine
from .performance_analyzer import PerformanceAnalyzer

__all__ = [
    "MetricsStore",
    "NodeMetrics",
    "AverageMetrics",
    "RedistributionStep",
    "PerformanceAnalyzer",
    "OptimizationEngine",
]
