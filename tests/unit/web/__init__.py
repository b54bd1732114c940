"""Unit tests for JewelCalc web route modules.

Each route module has a corresponding test file. Routers are mounted on a bare
FastAPI app; database sessions are patched with AsyncMock context managers and
the catalog gateway is swapped through dependency_overrides.
"""
