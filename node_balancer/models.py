# models.py

"""Data models for Node Load Balancer."""

from typing import Any, Dict, NamedTuple

class NodeMetrics(NamedTuple):
    """Last known resource metrics for a node."""
    node_id: str
    cpu_usage: float
    memory_usage: float
    bandwidth: float

    def to_dict(self) -> Dict[str, Any]:
        return self._asdict()

    def __str__(self) -> str:
        return (
            f"Node ID: {self.node_id}, CPU Usage: {self.cpu_usage:.2f}%, "
            f"Memory Usage: {self.memory_usage:.2f}%, Bandwidth: {self.bandwidth:.2f} Mbps"
        )

class AverageMetrics(NamedTuple):
    """Cluster-wide averages across all known nodes."""
    average_cpu_usage: float
    average_memory_usage: float
    average_bandwidth: float

    def to_dict(self) -> Dict[str, float]:
        return self._asdict()

class RedistributionStep(NamedTuple):
    """A suggested move of tasks from an overloaded node to an idle one."""
    source: str
    destination: str
