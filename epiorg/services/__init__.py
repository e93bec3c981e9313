"""
Application services layer (use cases).

Services orchestrate the domain logic: title parsing, episode assembly,
series reconciliation, season validation, navigation and search.

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
