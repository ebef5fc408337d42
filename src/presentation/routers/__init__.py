"""HTTP routers.

Versioned endpoints live under api/v1 and are generated from the route
registry. The root and health endpoints are declared on the app in
src/main.py.
"""
