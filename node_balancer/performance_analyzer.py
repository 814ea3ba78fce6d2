# performance_analyzer.py

"""Load classification and cluster statistics over stored node metrics."""

import logging
from typing import List, Optional, Sequence

from .config import ALL_WITHIN_LIMITS_MESSAGE, SUGGESTION_HEADER
from .metrics_store import MetricsStore
from .models import AverageMetrics, NodeMetrics
from .utils import classify_nodes

logger = logging.getLogger(__name__)

class PerformanceAnalyzer:
    def __init__(self, store: MetricsStore):
        self.store = store

    def find_high_load_nodes(
        self,
        cpu_threshold: float,
        snapshot: Optional[Sequence[NodeMetrics]] = None
    ) -> List[str]:
        """Return nodes whose CPU usage is strictly above the threshold.

        Reads the store unless the caller passes a snapshot it already took.
        """
        if snapshot is None:
            snapshot = self.store.list_all()
        high_load_nodes = classify_nodes(
            snapshot,
            lambda cpu_usage: cpu_usage > cpu_threshold
        )
        logger.debug(f"Found {len(high_load_nodes)} high load nodes above {cpu_threshold}%")
        return high_load_nodes

    def calculate_average_metrics(self, snapshot: Optional[Sequence[NodeMetrics]] = None) -> AverageMetrics:
        """Calculate average CPU, memory and bandwidth across all nodes."""
        if snapshot is None:
            snapshot = self.store.list_all()
        if not snapshot:
            return AverageMetrics(0.0, 0.0, 0.0)

        node_count = len(snapshot)
        return AverageMetrics(
            average_cpu_usage=sum(m.cpu_usage for m in snapshot) / node_count,
            average_memory_usage=sum(m.memory_usage for m in snapshot) / node_count,
            average_bandwidth=sum(m.bandwidth for m in snapshot) / node_count,
        )

    def suggest_task_redistribution(self, cpu_threshold: float) -> str:
        """Build a report listing the nodes that need tasks moved off them."""
        high_load_nodes = self.find_high_load_nodes(cpu_threshold)
        if not high_load_nodes:
            return ALL_WITHIN_LIMITS_MESSAGE

        return SUGGESTION_HEADER + "\n".join(f"- Node ID: {node}" for node in high_load_nodes)
