"""
DA Admin Backend — Application Package Initializer
====================================================

What: Marks the `admin_api` directory as a Python package.
Who:  Imported by uvicorn (`admin_api.main:app`), pytest and `python -m admin_api`.

Architecture Note:

    ┌─────────────────────────────────────┐
    │      Middleware (CORS, headers)     │  ← cross-cutting request policy
    ├─────────────────────────────────────┤
    │     Routes (static route table)     │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (mock data)         │  ← presence checks, payloads
    ├─────────────────────────────────────┤
    │      Schemas (response envelopes)   │  ← pydantic models
    └─────────────────────────────────────┘

    The database handle lives beside this stack: it is opened in the
    application lifespan and no route consumes it.
"""

__version__ = "1.0.0"
