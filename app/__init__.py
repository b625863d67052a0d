"""
Tenant Secrets Gateway — namespace-scoped secret management API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - secrets: Namespace resolution, secret CRUD, store error classification.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (stores, classifiers, authorizers) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
