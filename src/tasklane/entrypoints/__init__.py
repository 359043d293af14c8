"""Entrypoints (inbound adapters) for TASKLANE.

Expose the application to the outside world: currently the command-line
interface. Parse and validate inputs, call into the repository, and present
results.

Dependency rule: may import `tasklane.bootstrap`, `tasklane.service_layer` and
`tasklane.domain`; avoid importing `tasklane.adapters` directly.
"""
