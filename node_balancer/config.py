# config.py

"""Configuration settings for Node Load Balancer."""

# Thresholds
DEFAULT_HIGH_CPU_THRESHOLD = 80.0  # Nodes above this CPU % are high load
DEFAULT_LOW_CPU_THRESHOLD = 40.0  # Nodes below this CPU % are underutilized

# Report text
ALL_WITHIN_LIMITS_MESSAGE = "[INFO] All nodes are operating within acceptable CPU usage limits."
NO_OPTIMIZATION_MESSAGE = "[INFO] No optimization needed. All nodes are operating efficiently."
SUGGESTION_HEADER = "[SUGGESTION] Task redistribution needed for high load nodes: \n"
OPTIMIZATION_HEADER = "[OPTIMIZATION REPORT]\n"
PLAN_HEADER = "Task redistribution plan:\n"

# Sample data used by --sample: (node_id, cpu %, memory %, bandwidth Mbps)
SAMPLE_METRICS = [
    ("Node1", 90.0, 70.0, 150.0),
    ("Node2", 45.0, 60.0, 100.0),
    ("Node3", 30.0, 50.0, 80.0),
]

# Logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
