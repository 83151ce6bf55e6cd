"""
Clinic Booking API — Application Package Initializer
======================================================

Booking backend for a small aesthetics clinic: customers, employees,
services and appointments behind a bearer-token login.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, envelopes
    ├─────────────────────────────────────┤
    │         Services (Workflows)        │  ← Existence and uniqueness rules
    ├─────────────────────────────────────┤
    │     Repositories (Data Access)      │  ← Typed lookups, unit of work
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
