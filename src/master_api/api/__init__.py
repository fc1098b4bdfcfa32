"""FastAPI application, routes and request-scoped dependencies."""
