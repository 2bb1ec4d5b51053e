"""
Photo API: Application Package
==============================

What: REST service for the "photo" resource.
Who:  Imported by uvicorn (`photoapi.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (Controller)          │  ← status codes, error_switch
    ├─────────────────────────────────────┤
    │    Services (Data Access, Faker)    │  ← validation, CRUD, fake data
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; every read and write goes through
    PhotoService, and every PhotoService failure comes back to the route as a
    FieldError naming the field that failed.
"""

__version__ = "1.0.0"
