# optimization_engine.py

"""Redistribution planning from high load nodes to underutilized ones."""

import logging
from typing import List, Optional, Sequence

from .config import NO_OPTIMIZATION_MESSAGE, OPTIMIZATION_HEADER, PLAN_HEADER
from .metrics_store import MetricsStore
from .models import NodeMetrics, RedistributionStep
from .performance_analyzer import PerformanceAnalyzer
from .utils import classify_nodes

logger = logging.getLogger(__name__)

class OptimizationEngine:
    """Proposes task moves between nodes.

    Plans are returned as values and never applied; the store is only read.
    """

    def __init__(self, store: MetricsStore):
        self.store = store
        self.analyzer = PerformanceAnalyzer(store)

    def find_underutilized_nodes(
        self,
        cpu_threshold: float,
        snapshot: Optional[Sequence[NodeMetrics]] = None
    ) -> List[str]:
        """Return nodes whose CPU usage is strictly below the threshold."""
        if snapshot is None:
            snapshot = self.store.list_all()
        underutilized_nodes = classify_nodes(
            snapshot,
            lambda cpu_usage: cpu_usage < cpu_threshold
        )
        logger.debug(f"Found {len(underutilized_nodes)} underutilized nodes below {cpu_threshold}%")
        return underutilized_nodes

    def generate_redistribution_plan(
        self,
        high_load_nodes: Sequence[str],
        underutilized_nodes: Sequence[str]
    ) -> List[RedistributionStep]:
        """
        Pair each high load node with the underutilized node at the same position.

        Pairing stops when either list runs out; leftover nodes are not planned.

        Args:
            high_load_nodes: Source nodes, in the order they should be relieved
            underutilized_nodes: Destination nodes, each used at most once

        Returns:
            List of RedistributionStep in high load order
        """
        plan = [
            RedistributionStep(source, destination)
            for source, destination in zip(high_load_nodes, underutilized_nodes)
        ]

        unpaired = len(high_load_nodes) - len(plan)
        if unpaired:
            logger.debug(f"No destination available for {unpaired} high load nodes")
        return plan

    def build_redistribution_plan(
        self,
        cpu_high_threshold: float,
        cpu_low_threshold: float,
        snapshot: Optional[Sequence[NodeMetrics]] = None
    ) -> List[RedistributionStep]:
        """Classify one snapshot of the nodes and pair them into a redistribution plan."""
        if snapshot is None:
            snapshot = self.store.list_all()
        high_load_nodes = self.analyzer.find_high_load_nodes(cpu_high_threshold, snapshot)
        underutilized_nodes = self.find_underutilized_nodes(cpu_low_threshold, snapshot)
        return self.generate_redistribution_plan(high_load_nodes, underutilized_nodes)

    def optimize_network(self, cpu_high_threshold: float, cpu_low_threshold: float) -> str:
        """Build a redistribution plan and render it as a report."""
        plan = self.build_redistribution_plan(cpu_high_threshold, cpu_low_threshold)
        if not plan:
            return NO_OPTIMIZATION_MESSAGE

        report = OPTIMIZATION_HEADER + PLAN_HEADER
        for step in plan:
            logger.debug(f"Planned: tasks from {step.source} to {step.destination}")
            report += f"Move tasks from {step.source} to {step.destination}\n"
        return report
