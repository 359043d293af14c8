"""Reactive parts composed into entities.

Each part owns one capability (content, tags, status) and announces its
changes on its own event bus. Entities wire their parts to bubble into the
entity's bus.
"""

from .content import Content
from .status import DEFAULT_STATUSES, StatusManager
from .tags import TagsList

__all__ = ["Content", "DEFAULT_STATUSES", "StatusManager", "TagsList"]
