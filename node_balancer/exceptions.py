# exceptions.py

"""Custom exceptions for Node Load Balancer."""

class NodeBalancerError(Exception):
    """Base exception for Node Load Balancer errors."""
    pass

class MetricsInputError(NodeBalancerError):
    """Exception for malformed metric samples supplied by the caller."""
    pass
