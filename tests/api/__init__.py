"""API tests package.

Request/response tests through FastAPI's TestClient. Most tests run the
full stack against a fresh SQLite schema; test_error_responses swaps
handlers out with app.dependency_overrides to pin the error mapping.
"""
