"""
Movies Library Backend — Application Package
=============================================

What: REST API over two MongoDB collections (movies, genres) plus a few
      static endpoints and interactive API docs.

Layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Store calls)      │  ← one method per endpoint
    ├─────────────────────────────────────┤
    │        Schemas (API contracts)      │  ← Pydantic response models
    ├─────────────────────────────────────┤
    │        Database (Connection)        │  ← one shared Motor client
    └─────────────────────────────────────┘

Run with: uvicorn movielib.main:app (or the `movielib` console script).
"""

__version__ = "1.0.0"
