"""Entities package.

All entities are defined in this package and inherit from the base `Entity`
class in `base.py`. They are re-exported here to provide a single, convenient
import path.
"""

from .base import Entity
from .milestone import Milestone
from .project import Project
from .task import Task

__all__ = ["Entity", "Milestone", "Project", "Task"]
