"""Presentation layer - API endpoints and HTTP concerns.

Endpoint functions are thin: they turn a request body into a command or
query, call the handler and translate its Result into a response schema or
an RFC 9457 Problem Details body.

Structure:
- routers/api/v1/: Versioned resources and the route registry
- routers/api/middleware/: Bearer auth dependencies and trace middleware

The presentation layer depends on the application layer but contains NO
business rules.
"""
