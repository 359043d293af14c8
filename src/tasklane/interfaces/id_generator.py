"""Port for the sources of entity identifiers."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Hands out the ids of tasks, projects and milestones.

    Ids must be unique within a repository; the identity provider asks for one
    whenever an entity is created without an explicit id.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an id not handed out before by this generator."""
