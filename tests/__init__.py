# tests/__init__.py
"""
Test Suite for the translation catalog.

Organization:
- `services`: filter composition, freshness, export projection and tag
  reconciliation against an in-memory SQLite store.
- `http_api`: endpoint tests through FastAPI's TestClient.
- top level: configuration, bulk seeding and the admin CLI.
"""
