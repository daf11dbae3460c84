"""FastAPI application package for the affiliate ops dashboard."""
