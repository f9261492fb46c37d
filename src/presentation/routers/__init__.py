"""HTTP routers.

Versioned API routes live under ``api/v1`` and are generated from the route
registry. The health endpoint is declared on the application itself.
"""
