"""TASKLANE

An in-process domain model for task tracking. Tasks, projects and milestones
carry normalized tags and an ordered, validated status, and every change to
them is observable through bubbling event buses.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
