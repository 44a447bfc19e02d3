"""
StudyMate Backend — Application Package Initializer
===================================================

What: Marks the `studymate` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin layered API over MongoDB:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Partner / Request)      │  ← filters, merges, snapshots
    ├─────────────────────────────────────┤
    │   Queries & Models (Documents)      │  ← id resolution, serialization
    ├─────────────────────────────────────┤
    │        Database (MongoStore)        │  ← async pymongo client
    └─────────────────────────────────────┘

    Routes never talk to MongoDB directly; services receive the store handle
    on every call so they can be tested with mocked collections.
"""

__version__ = "1.0.0"
