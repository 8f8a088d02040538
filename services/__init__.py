# services/__init__.py
"""
Business logic, one module per resource.

Routers stay thin: they resolve the requester and the session through
dependencies and delegate here. Services raise `utils.errors` exceptions,
never `HTTPException`.
"""
