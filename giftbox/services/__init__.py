"""
High-level use cases for the gift service.

Routers (FastAPI endpoints) and scripts call these services instead of
touching the snapshot storage directly.
"""
