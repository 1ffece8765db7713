"""Workload metadata collection for the app meta cache."""

__version__ = "0.1.0"
