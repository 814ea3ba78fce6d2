# utils.py

"""Utility functions for Node Load Balancer."""

import logging
import math
from typing import Callable, Iterable, List

from .config import LOG_FORMAT, LOG_DATE_FORMAT
from .exceptions import MetricsInputError
from .models import NodeMetrics

def setup_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level and format."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )

def classify_nodes(
    snapshot: Iterable[NodeMetrics],
    predicate: Callable[[float], bool]
) -> List[str]:
    """
    Select node IDs whose CPU usage satisfies a predicate.

    Args:
        snapshot: Node metrics in store order
        predicate: Called with each node's CPU usage

    Returns:
        Matching node IDs, preserving snapshot order
    """
    return [metrics.node_id for metrics in snapshot if predicate(metrics.cpu_usage)]

def parse_node_sample(value: str) -> NodeMetrics:
    """
    Parse a sample of the form ``ID:CPU,MEMORY,BANDWIDTH``.
    Raises MetricsInputError if the sample is malformed.
    """
    node_id, sep, fields = value.rpartition(":")
    node_id = node_id.strip()
    if not sep or not node_id:
        raise MetricsInputError(
            f"Invalid node sample '{value}': expected ID:CPU,MEMORY,BANDWIDTH"
        )

    parts = fields.split(",")
    if len(parts) != 3:
        raise MetricsInputError(
            f"Invalid node sample '{value}': expected 3 metrics, got {len(parts)}"
        )

    try:
        cpu_usage, memory_usage, bandwidth = (float(part) for part in parts)
    except ValueError as e:
        raise MetricsInputError(f"Invalid metric value in '{value}': {e}")

    if not all(math.isfinite(v) for v in (cpu_usage, memory_usage, bandwidth)):
        raise MetricsInputError(f"Invalid node sample '{value}': metrics must be finite numbers")

    return NodeMetrics(node_id, cpu_usage, memory_usage, bandwidth)
