"""
Backend package for the starter API server.

This package provides a small FastAPI application with a status route,
a health check and a database connection that is opened once at startup.
"""
