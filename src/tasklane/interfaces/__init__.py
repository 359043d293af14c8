"""Interfaces (application boundary) for TASKLANE.

Defines framework-free application contracts: ABCs shared by the domain,
the service layer and adapters (ID generators, snapshot stores). Business
rules stay out of this package.

Dependency rule: this package is independent and must not import from any
`tasklane.*` modules. It may be imported by `tasklane.service_layer`,
`tasklane.adapters`, and `tasklane.bootstrap`.
"""
