"""Adapters (infrastructure) for TASKLANE.

Provide concrete implementations of the ports defined in `tasklane.interfaces`
(ID generators, snapshot stores).

Dependency rule: may import `tasklane.interfaces` and `tasklane.domain`; the
domain must not import this package.
"""
