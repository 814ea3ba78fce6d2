# metrics_store.py

"""In-memory store of the latest metrics reported by each node."""

import logging
import threading
from typing import Dict, List, Optional

from .models import NodeMetrics

logger = logging.getLogger(__name__)

class MetricsStore:
    """Holds the most recent NodeMetrics per node.

    Iteration follows the order in which nodes were first reported, so
    classifications and redistribution plans built from a snapshot are
    reproducible. All access goes through a single lock.
    """

    def __init__(self):
        self._metrics: Dict[str, NodeMetrics] = {}
        self._lock = threading.Lock()

    def update(self, node_id: str, cpu_usage: float, memory_usage: float, bandwidth: float) -> NodeMetrics:
        """Create or fully replace the metrics for a node.

        Values are stored as given; out-of-range percentages are not rejected.
        """
        metrics = NodeMetrics(node_id, cpu_usage, memory_usage, bandwidth)
        with self._lock:
            self._metrics[node_id] = metrics
        logger.info(f"Metrics updated for node: {node_id}")
        return metrics

    def get(self, node_id: str) -> Optional[NodeMetrics]:
        """Return the metrics for a node, or None if it was never reported."""
        with self._lock:
            return self._metrics.get(node_id)

    def list_all(self) -> List[NodeMetrics]:
        """Return a snapshot of all node metrics in first-report order."""
        with self._lock:
            return list(self._metrics.values())

    def log_all_metrics(self) -> None:
        """Log the metrics of every known node."""
        logger.info("Node Performance Metrics:")
        for metrics in self.list_all():
            logger.info(str(metrics))

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __contains__(self, node_id) -> bool:
        with self._lock:
            return node_id in self._metrics
