# cli.py

"""Command-line interface for Node Load Balancer."""

import argparse
import json
import logging
import sys

from .config import DEFAULT_HIGH_CPU_THRESHOLD, DEFAULT_LOW_CPU_THRESHOLD, SAMPLE_METRICS
from .exceptions import NodeBalancerError
from .metrics_store import MetricsStore
from .optimization_engine import OptimizationEngine
from .utils import parse_node_sample, setup_logging

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Suggest task redistribution across network nodes"
    )
    parser.add_argument(
        "--node",
        action="append",
        default=[],
        metavar="ID:CPU,MEMORY,BANDWIDTH",
        help="Metrics sample for a node (may be repeated)"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use built-in sample metrics when no --node is given"
    )
    parser.add_argument(
        "--high-threshold",
        type=float,
        default=DEFAULT_HIGH_CPU_THRESHOLD,
        help=f"CPU %% above which a node is high load (default: {DEFAULT_HIGH_CPU_THRESHOLD})"
    )
    parser.add_argument(
        "--low-threshold",
        type=float,
        default=DEFAULT_LOW_CPU_THRESHOLD,
        help=f"CPU %% below which a node is underutilized (default: {DEFAULT_LOW_CPU_THRESHOLD})"
    )
    parser.add_argument(
        "--show-metrics",
        action="store_true",
        help="Show metrics for all nodes and cluster averages"
    )
    parser.add_argument(
        "--suggest",
        action="store_true",
        help="Also print the high load suggestion report"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print nodes, averages and plan as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)

def load_store(args) -> MetricsStore:
    """Build a metrics store from --node samples or the built-in sample set."""
    store = MetricsStore()
    if args.node:
        for value in args.node:
            store.update(*parse_node_sample(value))
    elif args.sample:
        for sample in SAMPLE_METRICS:
            store.update(*sample)
    return store

def build_snapshot(engine: OptimizationEngine, high_threshold: float, low_threshold: float) -> dict:
    """Collect nodes, averages and plan into a JSON-serializable dictionary."""
    nodes = engine.store.list_all()
    plan = engine.build_redistribution_plan(high_threshold, low_threshold, nodes)
    return {
        "nodes": [metrics.to_dict() for metrics in nodes],
        "averages": engine.analyzer.calculate_average_metrics(nodes).to_dict(),
        "plan": [step._asdict() for step in plan],
    }

def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        store = load_store(args)
        engine = OptimizationEngine(store)

        if args.json:
            snapshot = build_snapshot(engine, args.high_threshold, args.low_threshold)
            print(json.dumps(snapshot, indent=2, allow_nan=False))
            return 0

        if args.show_metrics:
            store.log_all_metrics()
            averages = engine.analyzer.calculate_average_metrics()
            logger.info(
                f"Average metrics: CPU {averages.average_cpu_usage:.2f}%, "
                f"memory {averages.average_memory_usage:.2f}%, "
                f"bandwidth {averages.average_bandwidth:.2f} Mbps"
            )

        if args.suggest:
            print(engine.analyzer.suggest_task_redistribution(args.high_threshold))

        print(engine.optimize_network(args.high_threshold, args.low_threshold))
        return 0

    except NodeBalancerError as e:
        logger.error(f"Input error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
