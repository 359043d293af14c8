"""Domain layer for TASKLANE.

Contains business rules: entities, their reactive parts (content, tags,
status), value objects, the event bus they announce changes on, and domain
errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `tasklane.adapters` or `tasklane.entrypoints`.
"""
