"""Service layer for TASKLANE.

Implements the application surface: keyed entity repositories, the aggregate
repository composing them, and the mapping between entities and snapshot
records.

Dependency rule: may import `tasklane.domain` and `tasklane.interfaces`, but
not `tasklane.adapters` or `tasklane.entrypoints`.
"""
