"""
Stockroom Backend — Application Package Initializer
====================================================

What: Marks the `stockroom` directory as a Python package.
Why:  Enables module imports like `from stockroom.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The server follows a small layered layout:

    ┌─────────────────────────────────────┐
    │        Routes + Renderers (HTTP)    │  ← status codes, HTML or JSON
    ├─────────────────────────────────────┤
    │      Services (Query + Shaping)     │  ← fixed read queries, row → schema
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy table + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never build SQL and services never know which response format
    the client asked for.
"""

__version__ = "1.0.0"
