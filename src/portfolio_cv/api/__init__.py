"""FastAPI application for rendering CVs."""
