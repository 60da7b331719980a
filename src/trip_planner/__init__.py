"""Trip planner: a local, JSON-backed task list for planning trips."""

__version__ = "0.1.0"
