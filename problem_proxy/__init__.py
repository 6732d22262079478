"""
Problem Proxy: REST backend for ServiceNow problem records.

Application package root. A thin hexagonal (ports & adapters) service
that forwards CRUD calls from a frontend to the ServiceNow Table API.

Bounded contexts:
    - problems: Problem records and their work-note journal entries.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (ServiceNow Table API over httpx).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
